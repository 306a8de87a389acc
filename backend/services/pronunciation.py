"""Pronunciation: phonetic audio for English, speech synthesis for Turkish."""
from __future__ import annotations

import logging
from typing import Optional, Protocol
from urllib.parse import quote

import httpx

from config import settings
from languages import get_language

logger = logging.getLogger(__name__)


class PronunciationError(Exception):
    pass


class AudioPlayer(Protocol):
    async def play(self, url: str) -> None: ...


class SpeechSynthesizer(Protocol):
    def speak(self, text: str, locale: str) -> None: ...


async def lookup_audio_url(
    http: httpx.AsyncClient, word: str, api_url: str = settings.PRONUNCIATION_API_URL
) -> Optional[str]:
    """Return the first non-empty phonetic audio URL for an English word.

    Returns None when the word is unknown or has no audio. Raises
    PronunciationError when the lookup itself fails.
    """
    url = f"{api_url.rstrip('/')}/{quote(word, safe='')}"
    try:
        response = await http.get(url)
    except httpx.HTTPError as e:
        raise PronunciationError("Failed to fetch pronunciation") from e

    if response.status_code == 404:
        return None
    if not response.is_success:
        raise PronunciationError("Failed to fetch pronunciation")

    try:
        entries = response.json()
    except ValueError as e:
        raise PronunciationError("Failed to fetch pronunciation") from e

    if not isinstance(entries, list):
        return None
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        phonetics = entry.get("phonetics")
        if not isinstance(phonetics, list):
            continue
        for phonetic in phonetics:
            if not isinstance(phonetic, dict):
                continue
            audio = phonetic.get("audio")
            if audio and isinstance(audio, str):
                return audio
    return None


class PronunciationService:
    """Plays a word. `available` drops to False when no audio exists; that is not an error."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        player: AudioPlayer,
        synthesizer: SpeechSynthesizer,
        api_url: str = settings.PRONUNCIATION_API_URL,
    ):
        self._http = http
        self._player = player
        self._synthesizer = synthesizer
        self._api_url = api_url
        self.is_playing = False
        self.available = True
        self.error: Optional[str] = None

    async def speak(self, word: str, language: str):
        self.error = None
        self.available = True
        try:
            if language == "tr":
                self._synthesizer.speak(word, get_language("tr")["speech_locale"])
                return

            audio = await lookup_audio_url(self._http, word, self._api_url)
            if not audio:
                logger.info("No pronunciation available for %r", word)
                self.available = False
                return

            self.is_playing = True
            try:
                await self._player.play(audio)
            finally:
                self.is_playing = False
        except PronunciationError as e:
            logger.warning("Pronunciation error for %r: %s", word, e)
            self.error = str(e) or "Failed to play pronunciation"


class EmbeddedPlayback:
    """Player and synthesizer for rendered pages: records what the browser should play."""

    def __init__(self):
        self.audio_url: Optional[str] = None
        self.speech_text: Optional[str] = None
        self.speech_locale: Optional[str] = None

    async def play(self, url: str) -> None:
        self.audio_url = url

    def speak(self, text: str, locale: str) -> None:
        self.speech_text = text
        self.speech_locale = locale

    @property
    def mode(self) -> str:
        if self.audio_url:
            return "audio"
        if self.speech_text:
            return "speech"
        return "none"


async def get_pronunciation_http():
    async with httpx.AsyncClient(timeout=settings.REQUEST_TIMEOUT) as http:
        yield http
