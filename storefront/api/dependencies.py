# storefront/api/dependencies.py
from fastapi import Depends, Header, Request

from storefront.data.database import Database
from storefront.data.models.user import UserModel
from storefront.domain.errors import Forbidden, Unauthorized
from storefront.services.auth_service import AuthService
from storefront.services.pricing import PricingPolicy


def get_database(request: Request) -> Database:
    """Uchwyt bazy wstrzykniety w create_app, bez globalnego singletona."""
    return request.app.state.database


def get_pricing(request: Request) -> PricingPolicy:
    return request.app.state.pricing


def _extract_bearer_token(authorization: str | None) -> str | None:
    scheme, _, token = (authorization or "").partition(" ")
    if scheme != "Bearer" or not token.strip():
        return None
    return token.strip()


def get_current_user(
    authorization: str | None = Header(None),
    database: Database = Depends(get_database),
) -> UserModel:
    token = _extract_bearer_token(authorization)
    if not token:
        raise Unauthorized("Missing Authorization Bearer token")
    return AuthService(database).resolve_user(token)


def require_admin(user: UserModel = Depends(get_current_user)) -> UserModel:
    if not user.is_admin:
        raise Forbidden("Admin access required")
    return user
