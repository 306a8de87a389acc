"""Client for the same-origin dictionary proxy, used by the interaction controllers."""
import logging
from urllib.parse import quote

import httpx
from fastapi import Request
from pydantic import TypeAdapter, ValidationError

from config import settings
from schemas.word import Suggestion, WordEntry, WordSummary

logger = logging.getLogger(__name__)

_suggestions = TypeAdapter(list[Suggestion])
_summaries = TypeAdapter(list[WordSummary])


class DictionaryClientError(Exception):
    """A proxy call failed. The message is safe to show to the user."""


class DictionaryClient:
    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    async def _get_json(self, path: str, params: dict, fallback: str):
        try:
            response = await self._http.get(path, params=params)
        except httpx.HTTPError as e:
            logger.error("GET %s failed: %s", path, e)
            raise DictionaryClientError(fallback) from e

        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.is_success:
            message = None
            if isinstance(data, dict):
                message = data.get("message") or data.get("error")
            raise DictionaryClientError(message or fallback)
        return data

    async def autocomplete(
        self, q: str, lang: str, limit: int = settings.AUTOCOMPLETE_LIMIT
    ) -> list[Suggestion]:
        fallback = "Failed to fetch suggestions"
        data = await self._get_json(
            "/api/dictionary/autocomplete", {"q": q, "lang": lang, "limit": limit}, fallback
        )
        try:
            return _suggestions.validate_python(data)
        except ValidationError as e:
            logger.error("Unexpected autocomplete body: %s", e)
            raise DictionaryClientError(fallback) from e

    async def search(self, q: str, lang: str) -> WordEntry:
        fallback = "Failed to fetch results"
        data = await self._get_json("/api/dictionary/search", {"q": q, "lang": lang}, fallback)
        try:
            return WordEntry.model_validate(data)
        except ValidationError as e:
            logger.error("Unexpected search body: %s", e)
            raise DictionaryClientError(fallback) from e

    async def list_words(
        self, lang: str, page: int, limit: int = settings.PAGE_SIZE, letter: str | None = None
    ) -> list[WordSummary]:
        fallback = "Failed to fetch words"
        path = "/api/dictionary/words"
        if letter:
            path = f"{path}/{quote(letter, safe='')}"
        data = await self._get_json(path, {"lang": lang, "page": page, "limit": limit}, fallback)
        try:
            return _summaries.validate_python(data)
        except ValidationError as e:
            logger.error("Unexpected word list body: %s", e)
            raise DictionaryClientError(fallback) from e

    async def add_word(self, payload: dict) -> dict:
        fallback = "Failed to add word"
        try:
            response = await self._http.post("/api/dictionary", json=payload)
        except httpx.HTTPError as e:
            logger.error("POST /api/dictionary failed: %s", e)
            raise DictionaryClientError(fallback) from e

        try:
            data = response.json()
        except ValueError:
            data = None
        if not response.is_success:
            message = data.get("message") if isinstance(data, dict) else None
            raise DictionaryClientError(message or fallback)
        return data


async def get_dictionary_client(request: Request):
    """Proxy client bound to this application in-process, so calls stay same-origin."""
    transport = httpx.ASGITransport(app=request.app)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://dictionary.local", timeout=settings.REQUEST_TIMEOUT
    ) as http:
        yield DictionaryClient(http)
