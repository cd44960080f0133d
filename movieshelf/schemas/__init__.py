# movieshelf/schemas/__init__.py

from .user import User, UserRegister, UserLogin, TokenResponse
from .favorite import Favorite, FavoriteRequest
from .media import Genre, MovieDetail, TvShowDetail, Trailer
from .params import ListParams, MovieIdParams, TvIdParams, SearchParams, Top5Params

__all__ = [
    "User",
    "UserRegister",
    "UserLogin",
    "TokenResponse",
    "Favorite",
    "FavoriteRequest",
    "Genre",
    "MovieDetail",
    "TvShowDetail",
    "Trailer",
    "ListParams",
    "MovieIdParams",
    "TvIdParams",
    "SearchParams",
    "Top5Params",
]
