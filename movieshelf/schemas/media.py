# movieshelf/schemas/media.py

from typing import List, Optional
from pydantic import BaseModel, Field


class Genre(BaseModel):
    id: int = Field(description="TMDB genre ID")
    name: str = Field(description="Genre name")


class MovieDetail(BaseModel):
    id: int = Field(description="TMDB movie ID")
    title: Optional[str] = Field(description="Title")
    overview: Optional[str] = Field(description="Overview")
    release_date: Optional[str] = Field(description="Release date (YYYY-MM-DD)")
    runtime: Optional[int] = Field(description="Runtime in minutes")
    poster_path: Optional[str] = Field(description="Poster path")
    backdrop_path: Optional[str] = Field(description="Backdrop path")
    vote_average: Optional[float] = Field(description="Average rating")
    genres: List[Genre] = Field(description="Genres")


class TvShowDetail(BaseModel):
    id: int = Field(description="TMDB TV show ID")
    name: Optional[str] = Field(description="Name")
    original_name: Optional[str] = Field(description="Original name")
    overview: Optional[str] = Field(description="Overview")
    poster_path: Optional[str] = Field(description="Poster path")
    backdrop_path: Optional[str] = Field(description="Backdrop path")
    vote_average: Optional[float] = Field(description="Average rating")
    vote_count: Optional[int] = Field(description="Vote count")
    genres: List[Genre] = Field(description="Genres")
    first_air_date: Optional[str] = Field(description="First air date")
    last_air_date: Optional[str] = Field(description="Last air date")
    number_of_seasons: Optional[int] = Field(description="Number of seasons")
    number_of_episodes: Optional[int] = Field(description="Number of episodes")
    in_production: Optional[bool] = Field(description="Still in production")
    status: Optional[str] = Field(description="Production status")


class Trailer(BaseModel):
    name: str = Field(description="Video name")
    link: str = Field(description="YouTube watch URL")
    official: Optional[bool] = Field(description="Official trailer")
    published_at: Optional[str] = Field(description="Publication timestamp")
