# storefront/services/auth_service.py
import uuid
from typing import Any, Dict

from jose import JWTError

from storefront.data.database import Database
from storefront.data.models.user import UserModel
from storefront.domain.errors import Conflict, Forbidden, Unauthorized
from storefront.domain.schemas import LoginIn, RegisterIn
from storefront.repos.user_repo import UserRepo
from storefront.utils.logging import get_logger
from storefront.utils.security import hash_password, sign_access_token, verify_access_token, verify_password

logger = get_logger(__name__)


def _auth_payload(user: UserModel) -> Dict[str, Any]:
    token = sign_access_token({"sub": str(user.id), "email": user.email})
    return {
        "token": token,
        "user": {"id": user.id, "email": user.email, "name": user.full_name},
    }


class AuthService:
    def __init__(self, database: Database):
        self.database = database

    def register(self, payload: RegisterIn) -> Dict[str, Any]:
        first_name, _, rest = payload.name.strip().partition(" ")
        last_name = " ".join(rest.split()) or None
        email = payload.email.strip().lower()

        with self.database.transaction() as session:
            repo = UserRepo(session)
            if repo.get_user_by_email(email):
                raise Conflict("Email already registered")

            user = repo.create_user(
                UserModel(
                    email=email,
                    password_hash=hash_password(payload.password),
                    first_name=first_name or None,
                    last_name=last_name,
                    is_active=True,
                )
            )
            repo.assign_role(user, "customer")
            result = _auth_payload(user)

        logger.info(f"Registered user {user.id} ({email})")
        return result

    def login(self, payload: LoginIn) -> Dict[str, Any]:
        email = payload.email.strip().lower()

        with self.database.transaction() as session:
            repo = UserRepo(session)
            user = repo.get_user_by_email(email)
            if not user:
                raise Unauthorized("Invalid credentials")
            if not user.is_active:
                raise Forbidden("User is inactive")
            if not verify_password(payload.password, user.password_hash):
                logger.warning(f"Failed login for {email}")
                raise Unauthorized("Invalid credentials")

            repo.touch_last_login(user)
            return _auth_payload(user)

    def resolve_user(self, token: str) -> UserModel:
        """Token -> aktywny user. Uzywane przez dependency get_current_user."""
        try:
            claims = verify_access_token(token)
            user_id = uuid.UUID(str(claims.get("sub")))
        except (JWTError, ValueError):
            raise Unauthorized("Invalid or expired token")

        with self.database.session() as session:
            user = UserRepo(session).get_user(user_id)
            if not user:
                raise Unauthorized("User not found")
            if not user.is_active:
                raise Forbidden("User is inactive")
            # role ladowane selectin, dostepne po zamknieciu sesji
            return user
