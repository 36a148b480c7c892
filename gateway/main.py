from __future__ import annotations

import logging
from typing import Any, Optional

import httpx
from fastapi import Body, FastAPI, File, HTTPException, UploadFile

from common.config import GatewaySettings, ProviderSettings
from common.schemas import (
    FetchTranscriptRequest,
    NormalizationResult,
    TranscriptionResponse,
)
from gateway import provider
from normalizer.pipeline import normalize_result

logger = logging.getLogger(__name__)

settings = GatewaySettings()
provider_settings = ProviderSettings()
app = FastAPI(title="Transcript Normalizer Gateway")


@app.get("/health")
async def health():
    return {"status": "ok", "provider": provider_settings.model_id}


@app.post("/upload", response_model=TranscriptionResponse)
async def upload_audio(audio: Optional[UploadFile] = File(None)):
    if audio is None:
        raise HTTPException(status_code=400, detail="No audio file provided")

    content = await audio.read()
    if not content:
        raise HTTPException(status_code=400, detail="No audio file provided")
    if len(content) > settings.max_upload_bytes:
        raise HTTPException(status_code=413, detail="Audio file too large")

    try:
        result = await provider.transcribe_audio(
            content,
            filename=audio.filename or "audio.wav",
            content_type=audio.content_type or "audio/wav",
            settings=provider_settings,
        )
    except httpx.HTTPError:
        logger.exception("Transcription error for %s", audio.filename)
        raise HTTPException(status_code=502, detail="Transcription failed")

    normalized = normalize_result(result)

    logger.info(
        "Transcribed %s: %d segments",
        audio.filename,
        len(normalized.ordered_segments or []),
    )
    return TranscriptionResponse(**normalized.model_dump())


@app.post("/normalize", response_model=NormalizationResult)
async def normalize(raw: Any = Body(...)):
    return normalize_result(raw)


@app.post("/transcript/fetch", response_model=NormalizationResult)
async def fetch_transcript(req: FetchTranscriptRequest):
    if not req.uri.startswith(("http://", "https://")):
        raise HTTPException(status_code=400, detail="Invalid transcript URI format")

    try:
        document = await provider.fetch_transcript_document(
            req.uri, timeout_s=provider_settings.timeout_s
        )
    except httpx.HTTPError:
        logger.exception("Transcript fetch error: %s", req.uri)
        raise HTTPException(status_code=502, detail="Failed to fetch transcript")

    return normalize_result(document)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
