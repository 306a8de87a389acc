"""Small helpers for building HTML strings."""
from urllib.parse import urlencode


def esc(s) -> str:
    return (
        str(s)
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )


def url(path: str, **params) -> str:
    """Build a link target, dropping empty parameters."""
    query = urlencode({k: v for k, v in params.items() if v is not None and v != ""})
    return f"{path}?{query}" if query else path


def href(path: str, **params) -> str:
    return esc(url(path, **params))


def classes(*names) -> str:
    return " ".join(n for n in names if n)
