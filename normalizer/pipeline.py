from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any, Optional

from common.schemas import NormalizationResult, NormalizedSegment
from normalizer.formatter import collect_speakers, format_transcript
from normalizer.resolver import resolve_segments
from normalizer.words import speaker_blocks

logger = logging.getLogger(__name__)


def normalize_result(raw: Any) -> NormalizationResult:
    """Normalize a provider result of any supported shape."""
    segments, fallback_text = resolve_segments(raw)
    return _build(segments, fallback_text)


def normalize_words(words: Iterable[Any]) -> NormalizationResult:
    """Normalize a diarized word list (already in temporal order)."""
    return _build(speaker_blocks(words), "")


def _build(
    segments: Optional[Sequence[NormalizedSegment]],
    fallback_text: Optional[str],
) -> NormalizationResult:
    if not segments:
        return NormalizationResult(transcript=fallback_text or "")

    speakers = collect_speakers(segments)
    logger.debug("Normalized %d segments, %d speakers", len(segments), len(speakers))
    return NormalizationResult(
        transcript=format_transcript(segments),
        speakers=speakers or None,
        ordered_segments=list(segments),
    )
