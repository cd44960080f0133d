# movieshelf/services/__init__.py

from .tmdb_service import TMDBService
from .favorite_service import FavoriteService
from .user_service import UserService

__all__ = ["TMDBService", "FavoriteService", "UserService"]
