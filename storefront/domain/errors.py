# storefront/domain/errors.py


class ServiceError(Exception):
    """Blad use case'u z gotowym statusem HTTP i komunikatem dla klienta."""

    status_code = 400
    default_message = "Bad request"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequest(ServiceError):
    status_code = 400
    default_message = "Bad request"


class EmptyCart(ServiceError):
    status_code = 400
    default_message = "Cart is empty"


class MixedCurrencyCart(ServiceError):
    status_code = 400
    default_message = "Cart contains items in more than one currency"


class NotFound(ServiceError):
    status_code = 404
    default_message = "Not found"


class Conflict(ServiceError):
    status_code = 409
    default_message = "Conflict"


class Unauthorized(ServiceError):
    status_code = 401
    default_message = "Unauthorized"


class Forbidden(ServiceError):
    status_code = 403
    default_message = "Forbidden"


class StorageError(Exception):
    """
    Blad warstwy bazy danych (polaczenie, constraint, deadlock).
    Szczegoly tylko w logach, klient dostaje ogolne 500.
    """
