from __future__ import annotations

import re

from common.schemas import NormalizedSegment

# "[Speaker 1]:", "speaker 2", "SPEAKER B:" ... the id is a number or one uppercase letter.
SPEAKER_MARKER = re.compile(r"\[?\b(?i:speaker)\s*(\d+|[A-Z])\b\]?\s*:?")


def extract_labelled_segments(text: str) -> list[NormalizedSegment]:
    """Split free text on inline speaker labels.

    Each marker owns the text up to the next marker (or the end of the
    string). Text before the first marker and blank runs are dropped.
    """
    markers = list(SPEAKER_MARKER.finditer(text))
    segments: list[NormalizedSegment] = []
    for i, marker in enumerate(markers):
        end = markers[i + 1].start() if i + 1 < len(markers) else len(text)
        content = text[marker.end():end].strip()
        if content:
            segments.append(
                NormalizedSegment(speaker=f"Speaker {marker.group(1)}", text=content)
            )
    return segments
