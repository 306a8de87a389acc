"""Paginated, letter-filtered word list with "load more" paging."""
from __future__ import annotations

import logging
from typing import Optional

from config import settings
from languages import all_token, letter_filter, normalize_letter
from schemas.word import WordSummary
from services.dictionary_client import DictionaryClient, DictionaryClientError

logger = logging.getLogger(__name__)


class WordListController:
    """Accumulates pages of words for one (language, letter) pair.

    Changing the language or letter resets the list and bumps the generation;
    a page response from an older generation is discarded on arrival.
    """

    def __init__(
        self,
        client: DictionaryClient,
        language: str = "en",
        page_size: int = settings.PAGE_SIZE,
    ):
        self._client = client
        self._page_size = page_size
        self._generation = 0

        self.language = language
        self.selected_letter = all_token(language)
        self.page = 1
        self.words: list[WordSummary] = []
        self.has_more = True
        self.loading = False
        self.error: Optional[str] = None

    def _reset(self):
        self._generation += 1
        self.page = 1
        self.has_more = True
        self.words = []
        self.loading = False
        self.error = None

    async def start(self):
        self._reset()
        await self.fetch_page()

    async def set_language(self, language: str):
        self.language = language
        self.selected_letter = all_token(language)
        self._reset()
        await self.fetch_page()

    async def select_letter(self, letter: str):
        self.selected_letter = normalize_letter(self.language, letter)
        self._reset()
        await self.fetch_page()

    async def fetch_page(self) -> bool:
        """Fetch the current page. Returns False if the fetch failed."""
        if self.loading:
            return True

        generation = self._generation
        page = self.page
        self.loading = True
        self.error = None

        try:
            words = await self._client.list_words(
                self.language,
                page,
                self._page_size,
                letter=letter_filter(self.language, self.selected_letter),
            )
        except DictionaryClientError as e:
            logger.error("Fetch error (%s, %s, page %d): %s", self.language, self.selected_letter, page, e)
            if generation == self._generation:
                self.error = str(e) or "Failed to load words. Please try again."
            return False
        finally:
            if generation == self._generation:
                self.loading = False

        if generation != self._generation:
            logger.debug("Discarding stale page %d for %s/%s", page, self.language, self.selected_letter)
            return True

        if len(words) < self._page_size:
            self.has_more = False
        self.words = words if page == 1 else self.words + words
        return True

    async def load_more(self):
        if self.loading or not self.has_more:
            return
        self.page += 1
        generation = self._generation
        ok = await self.fetch_page()
        if not ok and generation == self._generation and self.page > 1:
            self.page -= 1
