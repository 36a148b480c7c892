from __future__ import annotations

from collections.abc import Sequence

from common.schemas import NormalizedSegment


def format_transcript(segments: Sequence[NormalizedSegment]) -> str:
    """Render segments as ``"{speaker}:\\n\\n{text}\\n"`` blocks separated by a blank line."""
    return "\n".join(f"{seg.speaker}:\n\n{seg.text}\n" for seg in segments)


def collect_speakers(segments: Sequence[NormalizedSegment]) -> list[str]:
    """Distinct speakers in order of first appearance."""
    return list(dict.fromkeys(seg.speaker for seg in segments))
