# movieshelf/services/media_formatter.py
"""
Pure functions that reshape TMDB payloads into movieshelf response shapes.

Projections index the payload directly: a field missing from the TMDB
response raises ``KeyError`` and fails the request.
"""

from typing import Any, Dict, Iterable, List, Mapping, Type, TypeVar
from pydantic import BaseModel
from movieshelf.core.exceptions import NotFoundError
from movieshelf.schemas.media import MovieDetail, Trailer, TvShowDetail

YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v="

# type tags used when movies and shows are listed together
MEDIA_TYPE_TAGS = {"movie": "movie", "tv": "tv_show"}

DetailT = TypeVar("DetailT", bound=BaseModel)


def _project(payload: Mapping[str, Any], model: Type[DetailT]) -> Dict[str, Any]:
    picked = {name: payload[name] for name in model.model_fields}
    return model.model_validate(picked).model_dump()


def format_movie_detail(payload: Mapping[str, Any]) -> Dict[str, Any]:
    return _project(payload, MovieDetail)


def format_tv_detail(payload: Mapping[str, Any]) -> Dict[str, Any]:
    return _project(payload, TvShowDetail)


def tag_media(payload: Mapping[str, Any], media_type: str) -> Dict[str, Any]:
    """Raw provider object plus a ``type`` discriminator."""
    tagged = dict(payload)
    tagged["type"] = MEDIA_TYPE_TAGS[media_type]
    return tagged


def format_trailers(videos: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    trailers = [video for video in videos if video["type"] == "Trailer"]
    if not trailers:
        raise NotFoundError(
            "No trailers found for this movie or TV show", code="trailers:not_found"
        )

    return [
        Trailer(
            name=video["name"],
            link=f"{YOUTUBE_WATCH_URL}{video['key']}",
            official=video["official"],
            published_at=video["published_at"],
        ).model_dump()
        for video in trailers
    ]


def take(items: List[Any], count: int) -> List[Any]:
    """First ``count`` items, or all of them when there are fewer."""
    return list(items[:count])
