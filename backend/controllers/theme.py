"""Dark-mode preference: an explicit context object handed to the page root."""
from __future__ import annotations

from typing import Mapping, Optional

from fastapi import Response

from config import settings

# Ten years; the preference has no expiry of its own.
COOKIE_MAX_AGE = 10 * 365 * 24 * 60 * 60


class CookieThemeStore:
    """Reads the preference from request cookies, writes it onto a response."""

    def __init__(self, cookies: Mapping[str, str], key: str = settings.THEME_COOKIE):
        self.key = key
        self._cookies = cookies
        self._written: Optional[bool] = None

    def read(self) -> bool:
        return self._cookies.get(self.key) == "true"

    def write(self, is_dark: bool):
        self._written = is_dark

    def apply(self, response: Response):
        if self._written is None:
            return
        response.set_cookie(
            self.key,
            "true" if self._written else "false",
            max_age=COOKIE_MAX_AGE,
            samesite="lax",
        )


class ThemeContext:
    """Theme state; `is_dark` is None until the persisted preference has been read."""

    def __init__(self, store: CookieThemeStore):
        self._store = store
        self.is_dark: Optional[bool] = None

    @property
    def known(self) -> bool:
        return self.is_dark is not None

    def load(self) -> ThemeContext:
        self.is_dark = self._store.read()
        return self

    def toggle(self):
        if self.is_dark is None:
            raise RuntimeError("Theme preference has not been loaded")
        self.is_dark = not self.is_dark
        self._store.write(self.is_dark)
