from __future__ import annotations

import logging
from typing import Any

import httpx

from common.config import ProviderSettings

logger = logging.getLogger(__name__)


async def transcribe_audio(
    audio: bytes,
    filename: str = "audio.wav",
    content_type: str = "audio/wav",
    settings: ProviderSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """Send audio to the ElevenLabs speech-to-text API and return the decoded JSON result."""
    settings = settings or ProviderSettings()
    url = f"{settings.base_url.rstrip('/')}/v1/speech-to-text"

    data = {
        "model_id": settings.model_id,
        "language_code": settings.language_code,
        "diarize": str(settings.diarize).lower(),
        "tag_audio_events": str(settings.tag_audio_events).lower(),
    }
    files = {"file": (filename, audio, content_type)}

    logger.info("Requesting transcription: %s (%d bytes)", filename, len(audio))
    async with httpx.AsyncClient(timeout=settings.timeout_s, transport=transport) as client:
        resp = await client.post(
            url,
            data=data,
            files=files,
            headers={"xi-api-key": settings.api_key},
        )
        resp.raise_for_status()
        return resp.json()


async def fetch_transcript_document(
    uri: str,
    timeout_s: float = 30.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """Download a provider transcript document (e.g. a Transcribe output file).

    JSON documents are returned decoded; anything else is returned as text.
    """
    async with httpx.AsyncClient(timeout=timeout_s, transport=transport) as client:
        resp = await client.get(uri)
        resp.raise_for_status()
        try:
            return resp.json()
        except ValueError:
            logger.debug("Transcript document is not JSON, returning as text")
            return resp.text
