from __future__ import annotations

import os

# must be set before movieshelf is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["TMDB_ACCESS_TOKEN"] = "test-token"
os.environ["SECRET_KEY"] = "test-secret"

from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from movieshelf.core.auth import get_password_hash
from movieshelf.core.config import Settings
from movieshelf.core.dependencies import get_current_user, get_tmdb_service
from movieshelf.database import Base, SessionLocal
from movieshelf.main import app
from movieshelf.models import UserModel
from movieshelf.services.tmdb_service import TMDBService

API = "/api/v1"


class FakeTMDB:
    """Routes TMDB paths (without the /3/ prefix) to canned responses."""

    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, Any]] = {}
        self.calls: list[tuple[str, dict[str, str], str | None]] = []

    def add(self, path: str, payload: Any = None, status_code: int = 200) -> None:
        self.routes[path] = (status_code, payload)

    def paths(self) -> list[str]:
        return [path for path, _, _ in self.calls]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path.removeprefix("/3/")
        self.calls.append((path, dict(request.url.params), request.headers.get("authorization")))
        if path not in self.routes:
            return httpx.Response(404, json={"status_message": "The resource you requested could not be found."})
        status_code, payload = self.routes[path]
        return httpx.Response(status_code, json=payload)


def make_results(prefix: str, count: int) -> dict[str, Any]:
    return {"page": 1, "results": [{"id": i, "title": f"{prefix} {i}"} for i in range(1, count + 1)]}


def movie_payload(movie_id: int = 550) -> dict[str, Any]:
    return {
        "id": movie_id,
        "title": "Fight Club",
        "original_title": "Fight Club",
        "overview": "A ticking-time-bomb insomniac...",
        "release_date": "1999-10-15",
        "runtime": 139,
        "poster_path": "/poster.jpg",
        "backdrop_path": "/backdrop.jpg",
        "vote_average": 8.4,
        "genres": [{"id": 18, "name": "Drama"}],
        "budget": 63000000,
        "credits": {"cast": [], "crew": []},
        "videos": {"results": []},
        "images": {"backdrops": []},
    }


def tv_payload(tv_id: int = 1399) -> dict[str, Any]:
    return {
        "id": tv_id,
        "name": "Game of Thrones",
        "original_name": "Game of Thrones",
        "overview": "Seven noble families...",
        "poster_path": "/got.jpg",
        "backdrop_path": "/got-bg.jpg",
        "vote_average": 8.5,
        "vote_count": 24000,
        "genres": [{"id": 10765, "name": "Sci-Fi & Fantasy"}],
        "first_air_date": "2011-04-17",
        "last_air_date": "2019-05-19",
        "number_of_seasons": 8,
        "number_of_episodes": 73,
        "in_production": False,
        "status": "Ended",
        "seasons": [],
        "credits": {"cast": []},
    }


def video(name: str, video_type: str, key: str, official: bool = True) -> dict[str, Any]:
    return {
        "name": name,
        "type": video_type,
        "key": key,
        "site": "YouTube",
        "official": official,
        "published_at": "2020-01-01T00:00:00.000Z",
    }


@pytest.fixture
def db_session():
    session = SessionLocal()
    yield session
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def user(db_session) -> UserModel:
    user = UserModel(
        username="tester",
        email="tester@example.com",
        password_hash=get_password_hash("secret123"),
        role="user",
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def tmdb() -> FakeTMDB:
    return FakeTMDB()


@pytest.fixture
def tmdb_settings() -> Settings:
    return Settings(tmdb_access_token="test-token", tmdb_base_url="https://api.themoviedb.org/3")


@pytest.fixture
def anon_client(tmdb, tmdb_settings, db_session):
    """Client with a fake TMDB but real bearer-token auth."""
    app.dependency_overrides[get_tmdb_service] = lambda: TMDBService(
        tmdb_settings, transport=httpx.MockTransport(tmdb)
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def client(anon_client, user):
    """Client authenticated as ``user``."""
    app.dependency_overrides[get_current_user] = lambda: user
    return anon_client
