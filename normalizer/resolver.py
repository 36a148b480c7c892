"""Resolve a provider transcription result of unknown shape into segments.

Providers disagree on where segments live (``segments``, ``utterances``,
``results.segments``, a bare list, ...) and on what the fields inside a
segment are called. The lookups below are ordered tables so new aliases or
paths can be added without touching the resolution logic.

Resolution order:

1. Text input is parsed as JSON; it is only treated as structured data when
   the parsed value carries segments, otherwise it is the transcript itself.
2. Word-level output (a ``words`` list) is merged into speaker runs.
3. The first non-empty segment list is sorted by start time and normalized.
4. A top-level ``text`` field is scanned for inline speaker labels.
5. A legacy single transcript field is used verbatim.
6. Anything else is dumped as indented JSON.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Callable, Mapping
from typing import Any, Optional

from common.schemas import NormalizedSegment
from normalizer.models import as_text, first_present, lookup
from normalizer.speaker_labels import extract_labelled_segments
from normalizer.words import speaker_blocks

logger = logging.getLogger(__name__)

START_FIELDS = ("start", "start_time", "startTime")
SPEAKER_FIELDS = ("speaker", "speaker_label", "speakerId", "speaker_id")
TEXT_FIELDS = ("text", "transcript", "content")


def _path(*names: str) -> Callable[[Any], Any]:
    def probe(raw: Any) -> Any:
        value = raw
        for name in names:
            value = lookup(value, name)
            if value is None:
                return None
        return value

    return probe


def _bare_list(raw: Any) -> Any:
    return raw if isinstance(raw, list) else None


def _legacy_aws(raw: Any) -> Any:
    transcripts = _path("results", "transcripts")(raw)
    if isinstance(transcripts, list) and transcripts:
        return lookup(transcripts[0], "transcript")
    return None


SEGMENT_PROBES: list[tuple[str, Callable[[Any], Any]]] = [
    ("segments", _path("segments")),
    ("utterances", _path("utterances")),
    ("results.segments", _path("results", "segments")),
    ("results.utterances", _path("results", "utterances")),
    ("bare list", _bare_list),
]

WORD_PROBE = _path("words")

LEGACY_TRANSCRIPT_PROBES: list[tuple[str, Callable[[Any], Any]]] = [
    ("transcript", _path("transcript")),
    ("Transcript", _path("Transcript")),
    ("results.transcripts[0].transcript", _legacy_aws),
]


def resolve_segments(raw: Any) -> tuple[Optional[list[NormalizedSegment]], Optional[str]]:
    """Return ``(ordered_segments, fallback_text)`` for a raw provider result.

    ``ordered_segments`` is None when no structured segmentation exists.
    ``fallback_text`` is the best plain-text transcript that could be found
    without formatting segments; it is None only when segments were derived
    and no free text accompanied them. Never raises.
    """
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    if isinstance(raw, str):
        parsed = _parse_encoded(raw)
        if parsed is None:
            return None, raw
        raw = parsed

    words = WORD_PROBE(raw)
    if isinstance(words, list) and words:
        logger.debug("Resolved word-level result (%d words)", len(words))
        blocks = speaker_blocks(words)
        if blocks:
            return blocks, None

    candidates = _find_segment_list(raw)
    if candidates is not None:
        segments = extract_segments(candidates)
        if segments:
            return segments, None
        logger.debug("Segment list had no usable text; falling back")

    text = lookup(raw, "text")
    if isinstance(text, str):
        labelled = extract_labelled_segments(text)
        if labelled:
            logger.debug("Extracted %d labelled segments from free text", len(labelled))
            return labelled, text
        return None, text

    for name, probe in LEGACY_TRANSCRIPT_PROBES:
        value = probe(raw)
        if isinstance(value, str):
            logger.debug("Using legacy transcript field %s", name)
            return None, value

    logger.debug("Unrecognized result shape; dumping as text")
    return None, _dump(raw)


def extract_segments(candidates: list[Any]) -> list[NormalizedSegment]:
    """Sort a heterogeneous segment list by start time and normalize it.

    The sort is stable, so segments sharing a start time keep their input
    order. Speakers default to ``"Speaker {n}"`` (1-based sorted position);
    segments whose text is blank are dropped.
    """
    ordered = sorted(candidates, key=_start_time)
    segments: list[NormalizedSegment] = []
    for index, seg in enumerate(ordered, start=1):
        speaker = first_present(seg, SPEAKER_FIELDS)
        text = first_present(seg, TEXT_FIELDS)
        text = (as_text(text) or "").strip()
        speaker = as_text(speaker)
        if not text:
            continue
        segments.append(
            NormalizedSegment(
                speaker=f"Speaker {index}" if speaker is None else speaker,
                text=text,
            )
        )
    return segments


def _find_segment_list(raw: Any) -> Optional[list[Any]]:
    for name, probe in SEGMENT_PROBES:
        value = probe(raw)
        if isinstance(value, list) and value:
            logger.debug("Resolved segment list via %s (%d segments)", name, len(value))
            return value
    return None


def _is_segment_bearing(value: Any) -> bool:
    if not isinstance(value, (Mapping, list)):
        return False
    words = WORD_PROBE(value)
    if isinstance(words, list) and words:
        return True
    return _find_segment_list(value) is not None


def _parse_encoded(text: str) -> Any:
    """Parse JSON-encoded structured results; None means "treat as plain text"."""
    try:
        parsed = json.loads(text)
    except ValueError:
        logger.debug("Transcript is not JSON, treating as text")
        return None
    return parsed if _is_segment_bearing(parsed) else None


def _start_time(seg: Any) -> float:
    value = first_present(seg, START_FIELDS)
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        # Google Speech reports offsets as "1.500s".
        value = value.strip().rstrip("s")
    elif not isinstance(value, (int, float)):
        return 0.0
    try:
        start = float(value)
    except (OverflowError, ValueError):
        return 0.0
    return start if math.isfinite(start) else 0.0


def _dump(raw: Any) -> str:
    try:
        return json.dumps(raw, indent=2, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return as_text(raw) or ""
