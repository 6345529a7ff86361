"""
ApiClient: bearer token handling and error translation
"""

import asyncio

import httpx
import pytest

from services.api import ApiClient, ApiError


def client_with(handler, token="secret"):
    return ApiClient(base_url="http://testserver", token=token, transport=httpx.MockTransport(handler))


class TestApiClient:

    def test_bearer_token_on_api_routes(self):
        seen = {}

        def handler(request):
            seen["auth"] = request.headers.get("Authorization")
            return httpx.Response(200, json=[])

        assert asyncio.run(client_with(handler).get("/api/parts", params={"aircraft_id": "a1"})) == []
        assert seen["auth"] == "Bearer secret"

    @pytest.mark.parametrize("url", ["/api/auth/login", "/api/auth/signup"])
    def test_no_token_on_auth_routes(self, url):
        seen = {}

        def handler(request):
            seen["auth"] = request.headers.get("Authorization")
            return httpx.Response(200, json={"access_token": "jwt"})

        asyncio.run(client_with(handler).post(url, json={"email": "pilot@example.com"}))
        assert seen["auth"] is None

    def test_status_error_carries_code(self):
        def handler(request):
            return httpx.Response(403, json={"detail": "Not authorized"})

        with pytest.raises(ApiError) as exc_info:
            asyncio.run(client_with(handler).delete("/api/stc/abc"))
        assert exc_info.value.status_code == 403

    def test_transport_error_has_no_code(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ApiError) as exc_info:
            asyncio.run(client_with(handler).get("/api/adsb"))
        assert exc_info.value.status_code is None

    def test_empty_body_returns_none(self):
        def handler(request):
            return httpx.Response(204)

        assert asyncio.run(client_with(handler).delete("/api/parts/abc")) is None

    def test_non_json_body_raises_api_error(self):
        def handler(request):
            return httpx.Response(200, text="<html>Bad gateway</html>")

        with pytest.raises(ApiError) as exc_info:
            asyncio.run(client_with(handler).get("/api/parts"))
        assert exc_info.value.status_code is None
