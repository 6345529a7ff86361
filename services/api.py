"""
HTTP client for the AeroLogix backend
Wraps httpx.AsyncClient with the configured base URL and JWT
"""

import httpx
import logging
from typing import Any, Optional
from config import get_settings

logger = logging.getLogger(__name__)

# Routes that must not carry the bearer token
AUTH_ROUTES = ("/auth/login", "/auth/signup")


class ApiError(Exception):
    """Backend call failed (transport error or non-2xx response)"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ApiClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.base_url = base_url or settings.api_url
        self.token = token if token is not None else settings.auth_token
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"Content-Type": "application/json"},
            timeout=timeout if timeout is not None else settings.request_timeout,
            transport=transport,
        )

    def set_token(self, token: Optional[str]):
        self.token = token

    def _headers_for(self, url: str) -> dict:
        if not self.token or any(route in url for route in AUTH_ROUTES):
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    async def request(self, method: str, url: str, **kwargs) -> Any:
        """Send a request and return the decoded JSON body (None when empty)"""
        try:
            response = await self._client.request(
                method, url, headers=self._headers_for(url), **kwargs
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.warning(f"{method} {url} failed with status {status_code}")
            raise ApiError(f"{method} {url} returned {status_code}", status_code=status_code) from e
        except httpx.HTTPError as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise ApiError(f"{method} {url} failed: {e}") from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"{method} {url} returned a non-JSON body")
            raise ApiError(f"{method} {url} returned a non-JSON body") from e

    async def get(self, url: str, **kwargs) -> Any:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs) -> Any:
        return await self.request("POST", url, **kwargs)

    async def put(self, url: str, **kwargs) -> Any:
        return await self.request("PUT", url, **kwargs)

    async def delete(self, url: str, **kwargs) -> Any:
        return await self.request("DELETE", url, **kwargs)

    async def aclose(self):
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()
