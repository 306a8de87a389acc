"""Pronunciation lookup endpoint."""
import httpx
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from languages import LANGUAGE_CODES
from services.pronunciation import EmbeddedPlayback, PronunciationService, get_pronunciation_http

router = APIRouter(prefix="/api/pronunciation", tags=["pronunciation"])


@router.get("")
async def get_pronunciation(
    word: str = Query(...),
    lang: str = Query(default="en"),
    http: httpx.AsyncClient = Depends(get_pronunciation_http),
):
    if lang not in LANGUAGE_CODES:
        raise HTTPException(status_code=400, detail=f"Unsupported language: {lang}")

    playback = EmbeddedPlayback()
    service = PronunciationService(http, playback, playback)
    await service.speak(word, lang)
    if service.error:
        return JSONResponse({"error": service.error}, status_code=500)
    return {
        "word": word,
        "language": lang,
        "mode": playback.mode,
        "audio_url": playback.audio_url,
        "locale": playback.speech_locale,
    }
