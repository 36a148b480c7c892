from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Optional

from common.schemas import NormalizedSegment
from normalizer.models import Word

UNKNOWN_SPEAKER = "Unknown"


def merge_word_runs(words: Iterable[Any]) -> list[NormalizedSegment]:
    """Merge consecutive words from the same speaker into speaker blocks.

    Word texts are concatenated as-is, so separating whitespace must already
    be part of the word text (as in diarized provider output, where spacing
    tokens sit between words). Only adjacent words are merged; a speaker who
    talks again later gets a new block.
    """
    blocks: list[NormalizedSegment] = []
    current_speaker: Optional[str] = None
    buffer: list[str] = []

    for item in words:
        word = item if isinstance(item, Word) else Word.from_payload(item)
        if not buffer or word.speaker_id != current_speaker:
            if buffer:
                blocks.append(_block(current_speaker, buffer))
            buffer = []
            current_speaker = word.speaker_id
        buffer.append(word.text)

    if buffer:
        blocks.append(_block(current_speaker, buffer))
    return blocks


def _block(speaker: Optional[str], texts: list[str]) -> NormalizedSegment:
    return NormalizedSegment(
        speaker=UNKNOWN_SPEAKER if speaker is None else speaker,
        text="".join(texts),
    )


def speaker_blocks(words: Iterable[Any]) -> list[NormalizedSegment]:
    """Merged word runs with their text trimmed; whitespace-only runs are dropped."""
    blocks = []
    for block in merge_word_runs(words):
        text = block.text.strip()
        if text:
            blocks.append(NormalizedSegment(speaker=block.speaker, text=text))
    return blocks
