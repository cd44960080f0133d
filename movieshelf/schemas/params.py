# movieshelf/schemas/params.py

from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator
from movieshelf.core.validation import (
    optional_positive_int,
    required_choice,
    required_int,
    required_string,
)

SEARCH_TYPES = ("movie", "tv", "multi")

DEFAULT_PAGE = 1
DEFAULT_SIZE = 10


class ListParams(BaseModel):
    """page/size for the movie and TV listings"""

    page: int = Field(default=DEFAULT_PAGE, validate_default=True)
    size: int = Field(default=DEFAULT_SIZE, validate_default=True)

    @field_validator("page", mode="before")
    @classmethod
    def _check_page(cls, value: Any) -> int:
        return optional_positive_int(value, DEFAULT_PAGE, "Page must be a positive integer")

    @field_validator("size", mode="before")
    @classmethod
    def _check_size(cls, value: Any) -> int:
        return optional_positive_int(value, DEFAULT_SIZE, "Size must be a positive integer")


class MovieIdParams(BaseModel):
    id: Optional[int] = Field(default=None, validate_default=True)

    @field_validator("id", mode="before")
    @classmethod
    def _check_id(cls, value: Any) -> int:
        return required_int(value, "The movie ID is required", "The movie ID must be an integer")


class TvIdParams(BaseModel):
    id: Optional[int] = Field(default=None, validate_default=True)

    @field_validator("id", mode="before")
    @classmethod
    def _check_id(cls, value: Any) -> int:
        message = "The TV show ID is required and must be an integer"
        return required_int(value, message, message)


class SearchParams(BaseModel):
    query: Optional[str] = Field(default=None, validate_default=True)
    type: Optional[str] = Field(default=None, validate_default=True)
    page: int = Field(default=DEFAULT_PAGE, validate_default=True)

    @field_validator("query", mode="before")
    @classmethod
    def _check_query(cls, value: Any) -> str:
        return required_string(value, "Query string is required", "Query string must be a string")

    @field_validator("type", mode="before")
    @classmethod
    def _check_type(cls, value: Any) -> str:
        return required_choice(
            value,
            SEARCH_TYPES,
            "Type is required",
            "Type must be a string",
            'Type must be either "movie", "tv", or "multi"',
        )

    @field_validator("page", mode="before")
    @classmethod
    def _check_page(cls, value: Any) -> int:
        return optional_positive_int(value, DEFAULT_PAGE, "Page must be a positive integer")


class Top5Params(BaseModel):
    genre_id: Optional[int] = Field(default=None, validate_default=True)

    @field_validator("genre_id", mode="before")
    @classmethod
    def _check_genre_id(cls, value: Any) -> int:
        return required_int(value, "Genre ID is required", "Genre ID must be an integer")
