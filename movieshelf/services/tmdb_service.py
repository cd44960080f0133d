# movieshelf/services/tmdb_service.py

import logging
from typing import Any, Dict, List, Mapping, Optional
import httpx
from movieshelf.core.config import Settings, get_settings
from movieshelf.core.exceptions import UpstreamAuthError, UpstreamRequestError

logger = logging.getLogger(__name__)

DETAIL_APPENDS = "credits,videos,images"


class TMDBService:
    """
    Thin client for the TMDB v3 API.

    Every call is a single GET authenticated with the bearer token from
    ``settings.tmdb_access_token``. The token is read when the call is made,
    so a missing token surfaces as ``UpstreamAuthError`` on the first call.
    Transport failures and non-2xx responses raise ``UpstreamRequestError``.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self.timeout = httpx.Timeout(self.settings.tmdb_timeout)
        self.transport = transport

    async def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        if not self.settings.tmdb_access_token:
            raise UpstreamAuthError("TMDB access token is missing.")

        url = f"{self.settings.tmdb_base_url.rstrip('/')}/{path.lstrip('/')}"
        logger.debug("TMDB GET %s params=%s", path, dict(params or {}))

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(
                    url,
                    params=params,
                    headers=self.settings.tmdb_headers
                )
                response.raise_for_status()
                return response.json()

            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                logger.warning("TMDB %s returned %s", path, status)
                raise UpstreamRequestError(
                    f"TMDB API error: {status}", upstream_status=status
                ) from e
            except httpx.RequestError as e:
                logger.warning("TMDB request to %s failed: %s", path, e)
                raise UpstreamRequestError(f"Request failed: {str(e)}") from e
            except ValueError as e:
                raise UpstreamRequestError(f"Invalid JSON from TMDB: {str(e)}") from e

    # Listings

    async def get_popular_movies(self, page: int = 1) -> List[Dict[str, Any]]:
        data = await self.get("movie/popular", {"page": page})
        return data["results"]

    async def get_now_playing_movies(self, page: int = 1) -> List[Dict[str, Any]]:
        data = await self.get("movie/now_playing", {"page": page})
        return data["results"]

    async def get_popular_tv_shows(self, page: int = 1) -> List[Dict[str, Any]]:
        data = await self.get("tv/popular", {"page": page})
        return data["results"]

    async def get_top_rated_tv_shows(self, page: int = 1) -> List[Dict[str, Any]]:
        data = await self.get("tv/top_rated", {"page": page})
        return data["results"]

    async def get_movie_genres(self) -> List[Dict[str, Any]]:
        data = await self.get("genre/movie/list", {"language": self.settings.tmdb_language})
        return data["genres"]

    async def get_tv_genres(self) -> List[Dict[str, Any]]:
        data = await self.get("genre/tv/list")
        return data["genres"]

    # Details

    async def get_movie(self, movie_id: int, with_appends: bool = True) -> Dict[str, Any]:
        params = {"append_to_response": DETAIL_APPENDS} if with_appends else None
        return await self.get(f"movie/{movie_id}", params)

    async def get_tv_show(self, tv_id: int, with_appends: bool = True) -> Dict[str, Any]:
        params = {"append_to_response": DETAIL_APPENDS} if with_appends else None
        return await self.get(f"tv/{tv_id}", params)

    async def get_media(self, media_type: str, media_id: int) -> Dict[str, Any]:
        """Plain detail lookup used by the favorites listing."""
        if media_type == "movie":
            return await self.get_movie(media_id, with_appends=False)
        return await self.get_tv_show(media_id, with_appends=False)

    # Search, videos, discover

    async def search(self, query: str, search_type: str, page: int = 1) -> Dict[str, Any]:
        if search_type not in ("movie", "tv", "multi"):
            raise ValueError(f"Invalid search type: {search_type}")

        return await self.get(
            f"search/{search_type}",
            {
                "query": query,
                "include_adult": "false",
                "language": self.settings.tmdb_language,
                "page": page,
            },
        )

    async def get_videos(self, media_type: str, media_id: int) -> List[Dict[str, Any]]:
        endpoint = f"movie/{media_id}/videos" if media_type == "movie" else f"tv/{media_id}/videos"
        data = await self.get(endpoint, {"language": self.settings.tmdb_language})
        return data["results"]

    async def discover_top_rated(self, media_type: str, genre_id: int) -> List[Dict[str, Any]]:
        data = await self.get(
            f"discover/{media_type}",
            {"with_genres": genre_id, "sort_by": "vote_average.desc"},
        )
        return data["results"]
