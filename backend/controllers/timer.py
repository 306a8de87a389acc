from __future__ import annotations

import asyncio
from typing import Callable, Optional


class CancellableTimer:
    """One-shot timer on the running event loop; re-arming cancels the previous arm."""

    def __init__(self, delay: float, callback: Callable[[], None]):
        self.delay = delay
        self._callback = callback
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def start(self):
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire)

    def cancel(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self):
        self._handle = None
        self._callback()
