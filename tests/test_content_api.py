from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from conftest import API, FakeTMDB, make_results, video


class TestSearch:
    def test_missing_type_is_field_error(self, client: TestClient, tmdb: FakeTMDB):
        response = client.get(f"{API}/search", params={"query": "matrix"})

        assert response.status_code == 422
        body = response.json()
        assert body["code"] == "search:validation_failed"
        assert body["errors"] == {"type": ["Type is required"]}
        assert tmdb.calls == []

    def test_unknown_type_is_rejected(self, client: TestClient):
        response = client.get(f"{API}/search", params={"query": "matrix", "type": "foo"})

        assert response.status_code == 422
        assert response.json()["errors"] == {"type": ['Type must be either "movie", "tv", or "multi"']}

    def test_missing_query(self, client: TestClient):
        response = client.get(f"{API}/search", params={"type": "movie"})

        assert response.status_code == 422
        assert response.json()["errors"] == {"query": ["Query string is required"]}

    @pytest.mark.parametrize("search_type", ["movie", "tv", "multi"])
    def test_dispatches_to_matching_endpoint(self, client: TestClient, tmdb: FakeTMDB, search_type: str):
        tmdb.add(f"search/{search_type}", make_results("Hit", 2))

        response = client.get(f"{API}/search", params={"query": "matrix", "type": search_type, "page": 2})

        assert response.status_code == 200
        assert [item["id"] for item in response.json()["data"]] == [1, 2]
        path, params, _ = tmdb.calls[0]
        assert path == f"search/{search_type}"
        assert params["query"] == "matrix"
        assert params["page"] == "2"

    def test_upstream_failure(self, client: TestClient, tmdb: FakeTMDB):
        response = client.get(f"{API}/search", params={"query": "matrix", "type": "tv"})

        assert response.status_code == 500
        assert response.json()["code"] == "search:fetch_failed"


class TestTop5:
    def test_truncates_to_five(self, client: TestClient, tmdb: FakeTMDB):
        tmdb.add("discover/movie", make_results("Movie", 20))
        tmdb.add("discover/tv", make_results("Show", 20))

        response = client.get(f"{API}/content/top5", params={"genre_id": 18})

        assert response.status_code == 200
        data = response.json()["data"]
        assert [m["id"] for m in data["movies"]] == [1, 2, 3, 4, 5]
        assert len(data["tv_shows"]) == 5
        assert tmdb.calls[0][1] == {"with_genres": "18", "sort_by": "vote_average.desc"}

    def test_returns_all_when_fewer_than_five(self, client: TestClient, tmdb: FakeTMDB):
        tmdb.add("discover/movie", make_results("Movie", 2))
        tmdb.add("discover/tv", make_results("Show", 0))

        data = client.get(f"{API}/content/top5", params={"genre_id": 18}).json()["data"]

        assert len(data["movies"]) == 2
        assert data["tv_shows"] == []

    @pytest.mark.parametrize(
        "params, message",
        [({}, "Genre ID is required"), ({"genre_id": "drama"}, "Genre ID must be an integer")],
    )
    def test_validation(self, client: TestClient, params: dict, message: str):
        response = client.get(f"{API}/content/top5", params=params)

        assert response.status_code == 422
        body = response.json()
        assert body["code"] == "top5:validation_failed"
        assert body["errors"] == {"genre_id": [message]}

    def test_one_failed_collection_fails_the_request(self, client: TestClient, tmdb: FakeTMDB):
        tmdb.add("discover/movie", make_results("Movie", 3))

        response = client.get(f"{API}/content/top5", params={"genre_id": 18})

        assert response.status_code == 500
        assert response.json()["code"] == "top5:fetch_failed"


class TestTrailers:
    def test_returns_trailer_links(self, client: TestClient, tmdb: FakeTMDB):
        tmdb.add(
            "movie/550/videos",
            {"id": 550, "results": [video("Trailer 1", "Trailer", "k1"), video("Clip", "Clip", "k2")]},
        )

        response = client.get(f"{API}/movie/550/trailer")

        assert response.status_code == 200
        assert response.json()["data"] == [
            {
                "name": "Trailer 1",
                "link": "https://www.youtube.com/watch?v=k1",
                "official": True,
                "published_at": "2020-01-01T00:00:00.000Z",
            }
        ]

    def test_no_trailer_entries_is_404(self, client: TestClient, tmdb: FakeTMDB):
        tmdb.add("tv/1399/videos", {"id": 1399, "results": [video("Teaser", "Teaser", "t")]})

        response = client.get(f"{API}/tv/1399/trailer")

        assert response.status_code == 404
        body = response.json()
        assert body["code"] == "trailers:not_found"
        assert body["statusCode"] == 404

    def test_unknown_media_type_falls_through_to_404(self, client: TestClient, tmdb: FakeTMDB):
        response = client.get(f"{API}/person/1/trailer")

        assert response.status_code == 404
        assert response.json()["code"] == "general:not-found"
        assert tmdb.calls == []

    def test_unknown_media_type_is_404_without_a_session(self, anon_client: TestClient):
        response = anon_client.get(f"{API}/person/1/trailer")

        assert response.status_code == 404
        assert response.json() == {"message": "Not found", "code": "general:not-found", "statusCode": 404}

    def test_known_media_type_still_requires_a_session(self, anon_client: TestClient):
        response = anon_client.get(f"{API}/tv/1399/trailer")

        assert response.status_code == 401
        assert response.json()["code"] == "auth:unauthenticated"

    def test_upstream_failure(self, client: TestClient, tmdb: FakeTMDB):
        response = client.get(f"{API}/movie/1/trailer")

        assert response.status_code == 500
        assert response.json()["code"] == "trailers:fetch_failed"
