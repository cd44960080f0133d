# movieshelf/models/__init__.py

from .user import UserModel
from .favorite import FavoriteModel, MediaType


__all__ = [
    "UserModel",
    "FavoriteModel",
    "MediaType",
]
