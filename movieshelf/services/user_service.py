# movieshelf/services/user_service.py

import logging
from typing import Optional
from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from movieshelf.core.auth import get_password_hash, verify_password
from movieshelf.core.exceptions import StoreError, ValidationFailed
from movieshelf.models.user import UserModel
from movieshelf.schemas.user import UserRegister

logger = logging.getLogger(__name__)


class UserService:

    def __init__(self, db: Session):
        self.db = db

    async def get_user_by_email(self, email: str) -> Optional[UserModel]:
        try:
            stmt = select(UserModel).where(UserModel.email == email)
            return self.db.execute(stmt).scalar_one_or_none()

        except SQLAlchemyError as e:
            raise StoreError(f"Failed to look up user: {str(e)}") from e

    async def create_user(self, user_data: UserRegister) -> UserModel:
        try:
            # duplicate check
            stmt = select(UserModel).where(
                or_(UserModel.email == user_data.email, UserModel.username == user_data.username)
            )
            existing = self.db.execute(stmt).scalars().first()
            if existing:
                field = "email" if existing.email == user_data.email else "username"
                raise ValidationFailed(
                    "Validation failed",
                    code="auth:validation_failed",
                    errors={field: [f"The {field} has already been taken"]},
                )

            user_model = UserModel(
                username=user_data.username,
                email=user_data.email,
                password_hash=get_password_hash(user_data.password),
                role="user",
            )

            self.db.add(user_model)
            self.db.commit()
            self.db.refresh(user_model)

            logger.info("Registered user %s", user_model.id)
            return user_model

        except SQLAlchemyError as e:
            self.db.rollback()
            raise StoreError(f"Failed to register user: {str(e)}") from e

    async def authenticate(self, email: str, password: str) -> Optional[UserModel]:
        user_model = await self.get_user_by_email(email)
        if not user_model or not verify_password(password, user_model.password_hash):
            return None
        return user_model
