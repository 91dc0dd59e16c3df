"""
API tests for the CORS origin allow-list and the item preflight route.
"""

from app.api.cors import is_origin_allowed

ALLOWED = "https://movies.com"
BLOCKED = "https://evil.example"
MOVIE_ID = "5ad1a235-0d9c-410a-b32b-220d91689a08"


class TestOriginHeader:
    """Access-Control-Allow-Origin on ordinary responses."""

    def test_allowed_origin_is_echoed(self, client):
        """An allowed Origin is echoed in Access-Control-Allow-Origin."""
        r = client.get("/movies", headers={"Origin": ALLOWED})
        assert r.status_code == 200
        assert r.headers["access-control-allow-origin"] == ALLOWED

    def test_each_allowed_origin_is_echoed_as_sent(self, client):
        """Each listed origin is echoed exactly as sent."""
        r = client.get("/movies", headers={"Origin": "http://localhost:8080"})
        assert r.headers["access-control-allow-origin"] == "http://localhost:8080"

    def test_unknown_origin_gets_no_header(self, client):
        """An unlisted Origin still gets the body but no CORS header."""
        r = client.get("/movies", headers={"Origin": BLOCKED})
        assert r.status_code == 200
        assert "access-control-allow-origin" not in r.headers

    def test_same_origin_request_gets_no_header(self, client):
        """Requests without Origin get no CORS header."""
        r = client.get("/movies")
        assert r.status_code == 200
        assert "access-control-allow-origin" not in r.headers

    def test_error_responses_carry_header(self, client):
        """404 responses carry the header for allowed origins."""
        r = client.delete("/movies/does-not-exist", headers={"Origin": ALLOWED})
        assert r.status_code == 404
        assert r.headers["access-control-allow-origin"] == ALLOWED

    def test_created_response_carries_header(self, client):
        """201 responses carry the header for allowed origins."""
        payload = {
            "title": "Dune",
            "year": 2021,
            "director": "D.V.",
            "duration": 155,
            "poster": "http://x",
            "genre": ["Sci-Fi"],
        }
        r = client.post("/movies", json=payload, headers={"Origin": "https://admin.movies.com"})
        assert r.status_code == 201
        assert r.headers["access-control-allow-origin"] == "https://admin.movies.com"


class TestPreflight:
    """OPTIONS /movies/{movie_id}."""

    def test_preflight_allowed_origin(self, client):
        """Preflight from an allowed origin advertises methods and headers."""
        r = client.options(f"/movies/{MOVIE_ID}", headers={"Origin": ALLOWED})
        assert r.status_code == 200
        assert r.content == b""
        assert r.headers["access-control-allow-origin"] == ALLOWED
        assert r.headers["access-control-allow-methods"] == "GET,POST,PUT,PATCH,DELETE"
        assert r.headers["access-control-allow-headers"] == "Content-Type"

    def test_preflight_without_origin(self, client):
        """Preflight without Origin still advertises methods."""
        r = client.options(f"/movies/{MOVIE_ID}")
        assert r.status_code == 200
        assert r.headers["access-control-allow-methods"] == "GET,POST,PUT,PATCH,DELETE"
        assert "access-control-allow-origin" not in r.headers

    def test_preflight_blocked_origin(self, client):
        """Preflight from an unlisted origin gets an empty 200 and no CORS headers."""
        r = client.options(f"/movies/{MOVIE_ID}", headers={"Origin": BLOCKED})
        assert r.status_code == 200
        assert r.content == b""
        assert "access-control-allow-origin" not in r.headers
        assert "access-control-allow-methods" not in r.headers

    def test_preflight_does_not_require_existing_movie(self, client):
        """Preflight answers for ids that do not exist."""
        r = client.options("/movies/does-not-exist", headers={"Origin": ALLOWED})
        assert r.status_code == 200


class TestIsOriginAllowed:
    """Unit tests for the allow-list predicate."""

    def test_missing_origin_is_allowed(self):
        """Absent or empty Origin counts as same-origin."""
        assert is_origin_allowed(None, [ALLOWED])
        assert is_origin_allowed("", [ALLOWED])

    def test_listed_origin_is_allowed(self):
        """A listed origin is allowed."""
        assert is_origin_allowed(ALLOWED, [ALLOWED])

    def test_match_is_exact(self):
        """Origins must match exactly, scheme and trailing slash included."""
        assert not is_origin_allowed("https://movies.com/", [ALLOWED])
        assert not is_origin_allowed("http://movies.com", [ALLOWED])
