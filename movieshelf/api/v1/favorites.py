# movieshelf/api/v1/favorites.py

import logging
from fastapi import APIRouter, Body, Depends, Request
from movieshelf.core.dependencies import get_current_user, get_favorite_service, get_tmdb_service
from movieshelf.core.exceptions import ApiError, NotFoundError
from movieshelf.core import responses
from movieshelf.core.validation import validate_or_raise
from movieshelf.models.favorite import MediaType
from movieshelf.models.user import UserModel
from movieshelf.schemas.favorite import Favorite, FavoriteRequest
from movieshelf.services.favorite_service import FavoriteService
from movieshelf.services.media_formatter import tag_media
from movieshelf.services.tmdb_service import TMDBService

logger = logging.getLogger(__name__)

router = APIRouter()


def _request_data(http_request: Request, payload: dict) -> dict:
    # body fields win over query string fields
    return {**http_request.query_params, **(payload or {})}


@router.get(
    "",
    summary="List favorites",
    description="Favorites of the current user, each re-fetched from TMDB and tagged with its type.",
)
async def list_favorites(
    current_user: UserModel = Depends(get_current_user),
    favorite_service: FavoriteService = Depends(get_favorite_service),
    tmdb_service: TMDBService = Depends(get_tmdb_service),
):
    try:
        grouped = {}
        for media_type in MediaType:
            favorites = await favorite_service.list_by_user(current_user.id, media_type)
            grouped[media_type] = [
                tag_media(
                    await tmdb_service.get_media(media_type.value, favorite.tmdb_id),
                    media_type.value,
                )
                for favorite in favorites
            ]

        return responses.success(
            message="Favorites fetched successfully",
            data={"movies": grouped[MediaType.movie], "tv_shows": grouped[MediaType.tv]},
        )
    except Exception as e:
        logger.exception("Fetching favorites for user %s failed", current_user.id)
        raise ApiError(
            "Failed to fetch favorites", code="favorites:fetch_failed", errors=str(e)
        ) from e


@router.post(
    "",
    summary="Add favorite",
    description="Stores (media_id, media_type) as a favorite of the current user.",
)
async def add_favorite(
    http_request: Request,
    payload: dict = Body(default=None),
    current_user: UserModel = Depends(get_current_user),
    favorite_service: FavoriteService = Depends(get_favorite_service),
):
    request = validate_or_raise(
        FavoriteRequest, _request_data(http_request, payload), code="favorites:validation_failed"
    )

    try:
        favorite = await favorite_service.create(
            current_user.id, request.media_id, request.media_type
        )
        return responses.success(
            message="Favorite added successfully",
            data=Favorite.model_validate(favorite).model_dump(),
        )
    except Exception as e:
        logger.exception("Adding favorite for user %s failed", current_user.id)
        raise ApiError("Failed to add favorite", code="favorites:add_failed", errors=str(e)) from e


@router.delete(
    "",
    summary="Remove favorite",
    description="Deletes the current user's favorite matching (media_id, media_type).",
)
async def remove_favorite(
    http_request: Request,
    payload: dict = Body(default=None),
    current_user: UserModel = Depends(get_current_user),
    favorite_service: FavoriteService = Depends(get_favorite_service),
):
    request = validate_or_raise(
        FavoriteRequest, _request_data(http_request, payload), code="favorites:validation_failed"
    )

    try:
        favorite = await favorite_service.find_one(
            current_user.id, request.media_id, request.media_type
        )
        if not favorite:
            raise NotFoundError("Favorite not found", code="favorites:not_found")

        await favorite_service.delete(favorite)
        return responses.success(message="Favorite removed successfully")

    except NotFoundError:
        raise
    except Exception as e:
        logger.exception("Removing favorite for user %s failed", current_user.id)
        raise ApiError(
            "Failed to remove favorite", code="favorites:remove_failed", errors=str(e)
        ) from e
