# storefront/api/routers/auth.py
from fastapi import APIRouter, Depends

from storefront.api.dependencies import get_current_user, get_database
from storefront.data.database import Database
from storefront.data.models.user import UserModel
from storefront.domain.schemas import AuthOut, LoginIn, MeOut, RegisterIn
from storefront.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


def get_service(database: Database = Depends(get_database)) -> AuthService:
    return AuthService(database)


@router.post("/register", response_model=AuthOut, status_code=201)
def register(payload: RegisterIn, svc: AuthService = Depends(get_service)):
    return svc.register(payload)


@router.post("/login", response_model=AuthOut)
def login(payload: LoginIn, svc: AuthService = Depends(get_service)):
    return svc.login(payload)


@router.get("/me", response_model=MeOut)
def me(user: UserModel = Depends(get_current_user)):
    return {
        "id": user.id,
        "email": user.email,
        "name": user.full_name,
        "is_admin": user.is_admin,
    }
