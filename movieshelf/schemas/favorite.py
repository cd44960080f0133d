# movieshelf/schemas/favorite.py

from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from movieshelf.core.validation import required_choice, required_int
from movieshelf.models.favorite import MediaType


class Favorite(BaseModel):
    id: int = Field(description="Favorite ID")
    user_id: int = Field(description="Owner user ID")
    tmdb_id: int = Field(description="TMDB movie or TV show ID")
    media_type: MediaType = Field(description="movie or tv")
    created_at: Optional[datetime] = Field(default=None, description="Created at")

    class Config:
        from_attributes = True


class FavoriteRequest(BaseModel):
    """Body or query string of POST/DELETE /favorites"""

    media_id: Optional[int] = Field(default=None, validate_default=True)
    media_type: Optional[MediaType] = Field(default=None, validate_default=True)

    @field_validator("media_id", mode="before")
    @classmethod
    def _check_media_id(cls, value: Any) -> int:
        return required_int(value, "Media ID is required", "Media ID must be an integer")

    @field_validator("media_type", mode="before")
    @classmethod
    def _check_media_type(cls, value: Any) -> str:
        return required_choice(
            value,
            [m.value for m in MediaType],
            "Media type is required",
            "Media type must be a string",
            'Media type must be either "movie" or "tv"',
        )
