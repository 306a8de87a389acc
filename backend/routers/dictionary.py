"""Dictionary proxy endpoints: relay requests to the dictionary backend."""
import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from config import settings
from services.gateway import GatewayClient, GatewayError, get_gateway

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/dictionary", tags=["dictionary"])

QUERY_REQUIRED = "Query parameter is required"


def _error(key: str, message: str, status_code: int = 500) -> JSONResponse:
    return JSONResponse({key: message}, status_code=status_code)


@router.get("")
async def get_dictionary(
    q: str | None = Query(default=None),
    lang: str = Query(default="en"),
    page: int = Query(default=1),
    limit: int = Query(default=settings.PAGE_SIZE),
    gateway: GatewayClient = Depends(get_gateway),
):
    """Search when a query is given, otherwise list words."""
    try:
        if q and q.strip():
            return await gateway.search(q, lang)
        return await gateway.list_words(lang, page, limit)
    except GatewayError as e:
        logger.error("Dictionary API error: %s", e)
        return _error("message", "Failed to fetch data. Please try again later.")


@router.post("")
async def add_word(request: Request, gateway: GatewayClient = Depends(get_gateway)):
    try:
        body = await request.json()
        return await gateway.create_word(body)
    except (GatewayError, ValueError) as e:
        logger.error("Dictionary API error: %s", e)
        return _error("message", "Failed to add word. Please try again later.")


@router.get("/autocomplete")
async def autocomplete(
    q: str | None = Query(default=None),
    lang: str = Query(default="en"),
    limit: int = Query(default=settings.AUTOCOMPLETE_LIMIT),
    gateway: GatewayClient = Depends(get_gateway),
):
    if not q or not q.strip():
        return _error("error", QUERY_REQUIRED, status_code=400)
    try:
        return await gateway.autocomplete(q, lang, limit)
    except GatewayError as e:
        logger.error("Autocomplete error: %s", e)
        return _error("error", "Failed to fetch suggestions")


@router.get("/search")
async def search(
    q: str | None = Query(default=None),
    lang: str = Query(default="en"),
    gateway: GatewayClient = Depends(get_gateway),
):
    if not q or not q.strip():
        return _error("error", QUERY_REQUIRED, status_code=400)
    try:
        return await gateway.search(q, lang)
    except GatewayError as e:
        logger.error("Search error: %s", e)
        return _error("error", "Failed to fetch word details")


@router.get("/words")
async def list_words(
    lang: str = Query(default="en"),
    page: int = Query(default=1),
    limit: int = Query(default=settings.PAGE_SIZE),
    gateway: GatewayClient = Depends(get_gateway),
):
    try:
        return await gateway.list_words(lang, page, limit)
    except GatewayError as e:
        logger.error("Fetch words error: %s", e)
        return _error("error", "Failed to fetch words")


@router.get("/words/{letter}")
async def list_words_by_letter(
    letter: str,
    lang: str = Query(default="en"),
    page: int = Query(default=1),
    limit: int = Query(default=settings.PAGE_SIZE),
    gateway: GatewayClient = Depends(get_gateway),
):
    try:
        return await gateway.list_words(lang, page, limit, letter=letter)
    except GatewayError as e:
        logger.error("Fetch words error (letter %s): %s", letter, e)
        return _error("error", "Failed to fetch words")
