# movieshelf/api/v1/tv.py

import logging
from fastapi import APIRouter, Depends, Path, Request
from movieshelf.core.dependencies import get_current_user, get_tmdb_service
from movieshelf.core.exceptions import ApiError
from movieshelf.core import responses
from movieshelf.core.validation import validate_or_raise
from movieshelf.models.user import UserModel
from movieshelf.schemas.params import ListParams, TvIdParams
from movieshelf.services.media_formatter import format_tv_detail, take
from movieshelf.services.tmdb_service import TMDBService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    summary="Popular and top rated TV shows",
    description="Popular and top-rated TV shows sliced to `size`, plus the TV genre list.",
)
async def list_tv_shows(
    request: Request,
    current_user: UserModel = Depends(get_current_user),
    tmdb_service: TMDBService = Depends(get_tmdb_service),
):
    params = validate_or_raise(ListParams, request.query_params, code="tvshows:validation_failed")

    try:
        popular = take(await tmdb_service.get_popular_tv_shows(page=params.page), params.size)
        top_rated = take(await tmdb_service.get_top_rated_tv_shows(page=params.page), params.size)
        genres = await tmdb_service.get_tv_genres()

        return responses.success(
            message="TV shows fetched successfully",
            data={"popular": popular, "topRated": top_rated, "genres": genres},
            page=params.page,
            size=params.size,
            total=len(popular) + len(top_rated),
        )
    except Exception as e:
        logger.exception("Fetching TV shows failed")
        raise ApiError("Failed to fetch TV shows", code="tvshows:fetch_failed", errors=str(e)) from e


@router.get(
    "/{tv_id}",
    summary="TV show details",
    description="Single TV show from TMDB (with credits, videos and images) projected to the detail fields.",
)
async def get_tv_show(
    tv_id: str = Path(description="TMDB TV show ID"),
    current_user: UserModel = Depends(get_current_user),
    tmdb_service: TMDBService = Depends(get_tmdb_service),
):
    params = validate_or_raise(TvIdParams, {"id": tv_id}, code="validation:failed")

    try:
        tv_show = await tmdb_service.get_tv_show(params.id)
        return responses.success(
            message="TV show fetched successfully",
            data=format_tv_detail(tv_show),
        )
    except Exception as e:
        logger.exception("Fetching TV show %s failed", params.id)
        raise ApiError("Failed to fetch TV show", code="tvshow:fetch_failed", errors=str(e)) from e
