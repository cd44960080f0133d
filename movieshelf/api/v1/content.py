# movieshelf/api/v1/content.py

import logging
from fastapi import APIRouter, Depends, Path, Request
from movieshelf.core.dependencies import get_current_user, get_tmdb_service
from movieshelf.core.exceptions import ApiError, NotFoundError
from movieshelf.core import responses
from movieshelf.core.validation import validate_or_raise
from movieshelf.models.user import UserModel
from movieshelf.schemas.params import SearchParams, Top5Params
from movieshelf.services.media_formatter import format_trailers, take
from movieshelf.services.tmdb_service import TMDBService

logger = logging.getLogger(__name__)

router = APIRouter()

TOP_N = 5


@router.get(
    "/search",
    summary="Search movies and TV shows",
    description="Dispatches to TMDB search/movie, search/tv or search/multi depending on `type`.",
)
async def search(
    request: Request,
    current_user: UserModel = Depends(get_current_user),
    tmdb_service: TMDBService = Depends(get_tmdb_service),
):
    params = validate_or_raise(SearchParams, request.query_params, code="search:validation_failed")

    try:
        response = await tmdb_service.search(params.query, params.type, page=params.page)
        return responses.success(
            message="Search results fetched successfully",
            data=response["results"],
        )
    except Exception as e:
        logger.exception("Search for %r failed", params.query)
        raise ApiError(
            "Failed to fetch search results", code="search:fetch_failed", errors=str(e)
        ) from e


@router.get(
    "/content/top5",
    summary="Top 5 movies and TV shows in a genre",
    description="Highest rated movies and TV shows for `genre_id`, at most 5 of each.",
)
async def top5_in_genre(
    request: Request,
    current_user: UserModel = Depends(get_current_user),
    tmdb_service: TMDBService = Depends(get_tmdb_service),
):
    params = validate_or_raise(Top5Params, request.query_params, code="top5:validation_failed")

    try:
        movies = await tmdb_service.discover_top_rated("movie", params.genre_id)
        tv_shows = await tmdb_service.discover_top_rated("tv", params.genre_id)

        return responses.success(
            message="Top 5 movies and TV shows fetched successfully",
            data={"movies": take(movies, TOP_N), "tv_shows": take(tv_shows, TOP_N)},
        )
    except Exception as e:
        logger.exception("Fetching top 5 for genre %s failed", params.genre_id)
        raise ApiError(
            "Failed to fetch top 5 movies and TV shows", code="top5:fetch_failed", errors=str(e)
        ) from e


async def _trailer_links(media_type: str, media_id: int, tmdb_service: TMDBService):
    try:
        videos = await tmdb_service.get_videos(media_type, media_id)
        return responses.success(
            message="Trailer links fetched successfully",
            data=format_trailers(videos),
        )
    except NotFoundError:
        raise
    except Exception as e:
        logger.exception("Fetching trailers for %s/%s failed", media_type, media_id)
        raise ApiError(
            "Failed to fetch trailer links", code="trailers:fetch_failed", errors=str(e)
        ) from e


@router.get(
    "/movie/{media_id}/trailer",
    summary="Movie trailer links",
    description="YouTube links for every video of type Trailer on a movie.",
)
async def get_movie_trailers(
    media_id: int = Path(description="TMDB movie ID"),
    current_user: UserModel = Depends(get_current_user),
    tmdb_service: TMDBService = Depends(get_tmdb_service),
):
    return await _trailer_links("movie", media_id, tmdb_service)


@router.get(
    "/tv/{media_id}/trailer",
    summary="TV show trailer links",
    description="YouTube links for every video of type Trailer on a TV show.",
)
async def get_tv_trailers(
    media_id: int = Path(description="TMDB TV show ID"),
    current_user: UserModel = Depends(get_current_user),
    tmdb_service: TMDBService = Depends(get_tmdb_service),
):
    return await _trailer_links("tv", media_id, tmdb_service)
