# movieshelf/api/v1/__init__.py

from fastapi import APIRouter
from . import auth, movies, tv, favorites, content, system

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(system.router, prefix="/system", tags=["system"])
api_router.include_router(favorites.router, prefix="/favorites", tags=["favorites"])
api_router.include_router(tv.router, prefix="/tv", tags=["tv"])
api_router.include_router(movies.router, tags=["movies"])
api_router.include_router(content.router, tags=["content"])

# "/api/v1" without the trailing slash serves the movie listing too
api_router.add_api_route(
    "", movies.list_movies, methods=["GET"], tags=["movies"], include_in_schema=False
)
