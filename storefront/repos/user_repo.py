# storefront/repos/user_repo.py
import uuid
from datetime import datetime, timezone

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from storefront.data.models.user import RoleModel, UserModel


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: uuid.UUID) -> UserModel | None:
        return self.db.get(UserModel, user_id)

    def get_user_by_email(self, email: str) -> UserModel | None:
        return self.db.execute(
            select(UserModel).where(UserModel.email == email)
        ).scalar_one_or_none()

    def create_user(self, user: UserModel) -> UserModel:
        self.db.add(user)
        self.db.flush()
        return user

    def assign_role(self, user: UserModel, role_name: str) -> bool:
        role = self.db.execute(
            select(RoleModel).where(RoleModel.name == role_name)
        ).scalar_one_or_none()

        # rola powinna byc z seeda, jak jej nie ma to pomijamy
        if not role:
            return False

        if role not in user.roles:
            user.roles.append(role)
            self.db.flush()
        return True

    def touch_last_login(self, user: UserModel) -> None:
        user.last_login_at = datetime.now(timezone.utc)
        self.db.flush()

    def count_users(self) -> int:
        return self.db.execute(select(func.count(UserModel.id))).scalar_one()
