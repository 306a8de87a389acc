"""The full dictionary page."""
from views.components import (
    render_add_word_form,
    render_modal,
    render_search_box,
    render_theme_toggle,
    render_word_card,
    render_word_list,
)
from languages import all_token
from views.html import esc, href, url

TITLE = "English-Turkish Dictionary"


def render_page(
    theme,
    search,
    word_list,
    active_tab: int = 0,
    form=None,
    form_error: str | None = None,
    notice: str | None = None,
    next_url: str = "/",
) -> str:
    """Render the whole document.

    Nothing theme-dependent is emitted while the theme is still unknown, so a
    page can never flash the wrong theme before the preference is read.
    """
    html_class = ""
    if theme.known and theme.is_dark:
        html_class = " class='dark'"

    lang = search.language
    letter = word_list.selected_letter if word_list.selected_letter != all_token(word_list.language) else None
    params = {"q": search.query, "lang": lang, "letter": letter}

    parts = [
        f"<!DOCTYPE html><html lang='{esc(lang)}'{html_class}><head><meta charset='utf-8'>",
        "<meta name='viewport' content='width=device-width, initial-scale=1'>",
        f"<title>{TITLE}</title></head><body><main class='container'>",
        "<header class='page-header'><div class='title'>",
        f"<h1>{TITLE}</h1>",
        "<p>Search words in English or Turkish</p>",
        f"<a class='button' href='{href('/', lang=lang, add=1)}'>+ Add New Word</a>",
        "</div>",
        render_theme_toggle(theme, next_url),
        "</header>",
    ]
    if notice:
        parts.append(f"<div class='notice success'>{esc(notice)}</div>")

    parts.append(f"<div class='search-box'>{render_search_box(search)}</div>")
    if search.result is not None:
        parts.append("<div class='result'>")
        parts.append(render_word_card(search.result, active_tab, **params))
        parts.append("</div>")

    parts.append(render_word_list(word_list, q=search.query or None))

    if form is not None:
        body = render_add_word_form(form, error=form_error)
        parts.append(render_modal("Add New Word", body, close_href=url("/", lang=lang)))

    parts.append("</main></body></html>")
    return "".join(parts)
