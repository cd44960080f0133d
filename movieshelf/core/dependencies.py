# movieshelf/core/dependencies.py

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from movieshelf.core.auth import verify_token
from movieshelf.core.config import get_settings
from movieshelf.core.exceptions import AuthenticationError
from movieshelf.database import get_db
from movieshelf.models.user import UserModel
from movieshelf.services.favorite_service import FavoriteService
from movieshelf.services.tmdb_service import TMDBService
from movieshelf.services.user_service import UserService

security = HTTPBearer(auto_error=False)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


def get_favorite_service(db: Session = Depends(get_db)) -> FavoriteService:
    return FavoriteService(db)


def get_tmdb_service() -> TMDBService:
    return TMDBService(get_settings())


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    user_service: UserService = Depends(get_user_service)
) -> UserModel:
    """Resolve the bearer session token to a user"""
    if not credentials:
        raise AuthenticationError("Unauthenticated")

    email = verify_token(credentials.credentials)
    if not email:
        raise AuthenticationError("Invalid or expired token")

    user = await user_service.get_user_by_email(email)
    if not user:
        raise AuthenticationError("User not found")

    return user
