"""Search box state: query, debounced autocomplete, and the current result."""
from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from config import settings
from controllers.timer import CancellableTimer
from schemas.word import Suggestion, WordEntry
from services.dictionary_client import DictionaryClient, DictionaryClientError

logger = logging.getLogger(__name__)


class SearchController:
    """Owns the search interaction for one view.

    Autocomplete runs after the query has been quiet for the debounce delay.
    Responses are tagged with a generation number and dropped when a newer
    query, language or search has superseded them.
    """

    def __init__(
        self,
        client: DictionaryClient,
        language: str = "en",
        debounce: float = settings.AUTOCOMPLETE_DEBOUNCE_MS / 1000,
        on_result: Optional[Callable[[WordEntry], None]] = None,
    ):
        self._client = client
        self._on_result = on_result

        self.query = ""
        self.language = language
        self.suggestions: list[Suggestion] = []
        self.suggestions_visible = False
        self.loading = False
        self.error: Optional[str] = None
        self.result: Optional[WordEntry] = None

        self._timer = CancellableTimer(debounce, self._on_debounce)
        self._suggest_generation = 0
        self._search_generation = 0
        self._tasks: set[asyncio.Task] = set()

    def set_query(self, text: str):
        self.query = text
        self.suggestions_visible = True
        self._suggest_generation += 1
        if not text.strip():
            self._timer.cancel()
            self.suggestions = []
            return
        self._timer.start()

    def set_language(self, language: str):
        self.language = language
        self._suggest_generation += 1
        if self.query.strip():
            self._timer.start()

    def _on_debounce(self):
        task = asyncio.get_running_loop().create_task(self.fetch_suggestions())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def fetch_suggestions(self):
        generation = self._suggest_generation
        query, language = self.query, self.language
        if not query.strip():
            self.suggestions = []
            return

        try:
            suggestions = await self._client.autocomplete(query, language)
        except DictionaryClientError as e:
            logger.warning("Autocomplete error for %r: %s", query, e)
            return

        if generation != self._suggest_generation:
            logger.debug("Discarding stale suggestions for %r", query)
            return
        self.suggestions = suggestions

    async def submit(self, text: str):
        if not text.strip():
            return

        self._search_generation += 1
        generation = self._search_generation
        self.loading = True
        self.suggestions_visible = False
        self.error = None

        try:
            entry = await self._client.search(text, self.language)
        except DictionaryClientError as e:
            logger.error("Search error for %r: %s", text, e)
            if generation == self._search_generation:
                self.error = str(e) or "Failed to fetch results. Please try again."
                self.result = None
        else:
            if generation == self._search_generation:
                self.result = entry
                if self._on_result is not None:
                    self._on_result(entry)
        finally:
            if generation == self._search_generation:
                self.loading = False

    async def select_suggestion(self, word: str):
        self.set_query(word)
        await self.submit(word)

    async def wait_idle(self):
        """Wait for autocomplete requests already started by the timer."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def aclose(self):
        self._timer.cancel()
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
