# movieshelf/api/v1/movies.py

import logging
from fastapi import APIRouter, Depends, Path, Request
from movieshelf.core.dependencies import get_current_user, get_tmdb_service
from movieshelf.core.exceptions import ApiError
from movieshelf.core import responses
from movieshelf.core.validation import validate_or_raise
from movieshelf.models.user import UserModel
from movieshelf.schemas.params import ListParams, MovieIdParams
from movieshelf.services.media_formatter import format_movie_detail, take
from movieshelf.services.tmdb_service import TMDBService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/",
    summary="Popular and now playing movies",
    description="Popular and now-playing movies sliced to `size`, plus the movie genre list.",
)
async def list_movies(
    request: Request,
    current_user: UserModel = Depends(get_current_user),
    tmdb_service: TMDBService = Depends(get_tmdb_service),
):
    params = validate_or_raise(ListParams, request.query_params, code="movies:validation_failed")

    try:
        popular = await tmdb_service.get_popular_movies(page=params.page)
        now_playing = await tmdb_service.get_now_playing_movies(page=params.page)
        genres = await tmdb_service.get_movie_genres()

        return responses.success(
            message="Movies fetched successfully",
            data={
                "popular": take(popular, params.size),
                "nowPlaying": take(now_playing, params.size),
                "genres": genres,
            },
            page=params.page,
            size=params.size,
            total=len(popular) + len(now_playing),
        )
    except Exception as e:
        logger.exception("Fetching movies failed")
        raise ApiError("Failed to fetch movies", code="movies:fetch_failed", errors=str(e)) from e


@router.get(
    "/movies/{movie_id}",
    summary="Movie details",
    description="Single movie from TMDB (with credits, videos and images) projected to the detail fields.",
)
async def get_movie(
    movie_id: str = Path(description="TMDB movie ID"),
    current_user: UserModel = Depends(get_current_user),
    tmdb_service: TMDBService = Depends(get_tmdb_service),
):
    params = validate_or_raise(
        MovieIdParams,
        {"id": movie_id},
        code="movie:validation_error",
        message="Validation error",
        status_code=400,
    )

    try:
        movie = await tmdb_service.get_movie(params.id)
        return responses.success(
            message="Movie fetched successfully",
            data=format_movie_detail(movie),
        )
    except Exception as e:
        logger.exception("Fetching movie %s failed", params.id)
        raise ApiError("Failed to fetch movie", code="movie:fetch_failed", errors=str(e)) from e
