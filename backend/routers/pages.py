"""Server-rendered dictionary pages and HTML fragments."""
import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from controllers.search import SearchController
from controllers.theme import CookieThemeStore, ThemeContext
from controllers.word_list import WordListController
from languages import LANGUAGE_CODES
from services.dictionary_client import DictionaryClient, DictionaryClientError, get_dictionary_client
from services.pronunciation import EmbeddedPlayback, PronunciationService, get_pronunciation_http
from views.components import render_pronunciation, render_suggestions
from views.forms import AddWordForm
from views.html import url
from views.page import render_page

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])

MAX_PAGES = 50


def _check_language(lang: str):
    if lang not in LANGUAGE_CODES:
        raise HTTPException(status_code=400, detail=f"Unsupported language: {lang}")


def _next_url(request: Request) -> str:
    """Where the theme toggle should return to; only GET pages can be revisited."""
    if request.method != "GET":
        return "/"
    if request.url.query:
        return f"{request.url.path}?{request.url.query}"
    return request.url.path


async def _build_page(
    request: Request,
    client: DictionaryClient,
    lang: str,
    q: str | None = None,
    letter: str | None = None,
    pages: int = 1,
    tab: int = 0,
    form: AddWordForm | None = None,
    form_error: str | None = None,
    notice: str | None = None,
) -> str:
    theme = ThemeContext(CookieThemeStore(request.cookies)).load()

    search = SearchController(client, language=lang)
    word_list = WordListController(client, language=lang)
    try:
        if q:
            search.query = q
            await search.submit(q)

        if letter:
            await word_list.select_letter(letter)
        else:
            await word_list.start()
        for _ in range(min(pages, MAX_PAGES) - 1):
            if not word_list.has_more or word_list.error:
                break
            await word_list.load_more()
    finally:
        await search.aclose()

    return render_page(
        theme,
        search,
        word_list,
        active_tab=tab,
        form=form,
        form_error=form_error,
        notice=notice,
        next_url=_next_url(request),
    )


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    lang: str = Query(default="en"),
    q: str | None = Query(default=None),
    letter: str | None = Query(default=None),
    pages: int = Query(default=1, ge=1),
    tab: int = Query(default=0, ge=0),
    add: bool = Query(default=False),
    added: str | None = Query(default=None),
    client: DictionaryClient = Depends(get_dictionary_client),
):
    _check_language(lang)
    form = AddWordForm(language=lang) if add else None
    notice = "Word added successfully!" if added else None
    return await _build_page(
        request, client, lang, q=q, letter=letter, pages=pages, tab=tab, form=form, notice=notice
    )


@router.get("/views/suggestions", response_class=HTMLResponse)
async def suggestions(
    q: str = Query(default=""),
    lang: str = Query(default="en"),
    client: DictionaryClient = Depends(get_dictionary_client),
):
    _check_language(lang)
    search = SearchController(client, language=lang)
    try:
        search.set_query(q)
        await search.fetch_suggestions()
    finally:
        await search.aclose()
    return render_suggestions(search.suggestions, lang, search.suggestions_visible)


@router.get("/views/pronounce", response_class=HTMLResponse)
async def pronounce(
    word: str = Query(...),
    lang: str = Query(default="en"),
    http: httpx.AsyncClient = Depends(get_pronunciation_http),
):
    _check_language(lang)
    playback = EmbeddedPlayback()
    service = PronunciationService(http, playback, playback)
    await service.speak(word, lang)
    return render_pronunciation(word, service, playback)


@router.post("/words/new", response_class=HTMLResponse)
async def add_word(request: Request, client: DictionaryClient = Depends(get_dictionary_client)):
    data = await request.form()
    form = AddWordForm.from_form(data)
    action = str(data.get("action") or "submit")

    if action == "add_example":
        form.add_example()
        return await _build_page(request, client, form.language, form=form)
    if action.startswith("remove_example:"):
        index = action.split(":", 1)[1]
        if index.isdigit():
            form.remove_example(int(index))
        return await _build_page(request, client, form.language, form=form)

    missing = form.missing_fields()
    if missing:
        error = f"Please fill in: {', '.join(missing)}"
        return await _build_page(request, client, form.language, form=form, form_error=error)

    try:
        await client.add_word(form.to_payload())
    except DictionaryClientError as e:
        logger.error("Add word error: %s", e)
        return await _build_page(
            request, client, form.language, form=form,
            form_error=str(e) or "Failed to add word. Please try again.",
        )

    return RedirectResponse(url("/", lang=form.language, added=form.word), status_code=303)


@router.post("/theme/toggle")
async def toggle_theme(request: Request):
    data = await request.form()
    next_url = str(data.get("next") or "/")
    if not next_url.startswith("/") or next_url.startswith("//"):
        next_url = "/"

    store = CookieThemeStore(request.cookies)
    theme = ThemeContext(store).load()
    theme.toggle()

    response = RedirectResponse(next_url, status_code=303)
    store.apply(response)
    return response
