from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# --- Normalized transcript ---

class NormalizedSegment(BaseModel):
    speaker: str
    text: str


class NormalizationResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    transcript: str
    speakers: Optional[list[str]] = None
    ordered_segments: Optional[list[NormalizedSegment]] = Field(
        default=None, alias="orderedSegments"
    )


# --- HTTP request / response ---

class TranscriptionResponse(NormalizationResult):
    status: str = "completed"


class FetchTranscriptRequest(BaseModel):
    uri: str
