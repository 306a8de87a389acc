"""HTTP client for the dictionary backend that owns all word data."""
import logging
from urllib.parse import quote

import httpx

from config import settings

logger = logging.getLogger(__name__)


class GatewayError(Exception):
    """The backend was unreachable, answered non-2xx, or sent an undecodable body."""


class GatewayClient:
    """Thin wrapper over an httpx client pointed at the dictionary backend.

    Every method returns the decoded JSON body untouched or raises GatewayError.
    """

    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    async def _request(self, method: str, path: str, **kwargs):
        try:
            response = await self._http.request(
                method,
                path,
                headers={"Accept": "application/json"},
                **kwargs,
            )
        except httpx.HTTPError as e:
            raise GatewayError(f"{method} {path} failed: {e}") from e

        if not response.is_success:
            raise GatewayError(
                f"{method} {path} returned {response.status_code}: {response.text[:500]}"
            )
        try:
            return response.json()
        except ValueError as e:
            raise GatewayError(f"{method} {path} returned a malformed body") from e

    async def autocomplete(self, q: str, lang: str, limit: int):
        return await self._request(
            "GET", "/api/dictionary/autocomplete", params={"q": q, "lang": lang, "limit": limit}
        )

    async def search(self, q: str, lang: str):
        return await self._request("GET", "/api/dictionary/search", params={"q": q, "lang": lang})

    async def list_words(self, lang: str, page: int, limit: int, letter: str | None = None):
        path = "/api/dictionary/words"
        if letter:
            path = f"{path}/{quote(letter, safe='')}"
        return await self._request(
            "GET", path, params={"lang": lang, "page": page, "limit": limit}
        )

    async def create_word(self, body):
        return await self._request("POST", "/api/dictionary", json=body)


async def get_gateway():
    async with httpx.AsyncClient(
        base_url=settings.BACKEND_URL, timeout=settings.REQUEST_TIMEOUT
    ) as http:
        yield GatewayClient(http)
