# storefront/api/handlers.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront.domain.errors import ServiceError, StorageError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

INTERNAL_ERROR_BODY = {"status": "error", "message": "Internal Server Error"}


async def service_error_handler(request: Request, exc: ServiceError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"path": ".".join(str(p) for p in err.get("loc", ())[1:]), "msg": err.get("msg")}
        for err in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"message": "Validation error", "errors": errors})


async def storage_error_handler(request: Request, exc: StorageError):
    # przyczyna zalogowana w Database.transaction, klient dostaje tylko ogolny komunikat
    logger.error(f"Storage failure on {request.method} {request.url.path}: {exc.__cause__!r}")
    return JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY)


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content=INTERNAL_ERROR_BODY)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
