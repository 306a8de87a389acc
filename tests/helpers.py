from contextlib import asynccontextmanager

import httpx

from services.dictionary_client import DictionaryClient


@asynccontextmanager
async def proxy_client(handler):
    """DictionaryClient whose requests are answered by `handler`."""
    async with httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://app.test"
    ) as http:
        yield DictionaryClient(http)


def summary(word: str, *translations: str) -> dict:
    return {"word": word, "translations": [{"word": t, "type": "noun"} for t in translations]}


def entry(word: str, translation: str, language: str = "en") -> dict:
    return {
        "word": word,
        "language": language,
        "difficulty": "A2",
        "translations": [{
            "word": translation,
            "type": "noun",
            "definitions": [f"definition of {word}"],
            "examples": [f"An example with {word}."],
        }],
    }


def phonetics_response(*audios: str) -> httpx.Response:
    return httpx.Response(200, json=[{
        "word": "hello",
        "phonetics": [{"text": "/həˈləʊ/", "audio": a} for a in audios],
    }])
