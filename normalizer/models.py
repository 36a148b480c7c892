"""Internal models for transcript normalization."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

SPEAKER_ID_FIELDS = ("speakerId", "speaker_id")


def lookup(obj: Any, name: str) -> Any:
    """Read ``name`` from a mapping or, failing that, an attribute object."""
    if isinstance(obj, Mapping):
        return obj.get(name)
    if isinstance(obj, (str, bytes, list, tuple)):
        return None
    return getattr(obj, name, None)


def as_text(value: Any) -> Optional[str]:
    """``str(value)``, or None for values that cannot be rendered (huge ints)."""
    if value is None:
        return None
    try:
        return str(value)
    except ValueError:
        return None


def first_present(obj: Any, names: tuple[str, ...]) -> Any:
    """Return the value of the first field in ``names`` that is set on ``obj``."""
    for name in names:
        value = lookup(obj, name)
        if value is not None:
            return value
    return None


@dataclass
class Word:
    speaker_id: Optional[str]
    text: str

    @classmethod
    def from_payload(cls, item: Any) -> Word:
        speaker = first_present(item, SPEAKER_ID_FIELDS)
        text = lookup(item, "text")
        return cls(
            speaker_id=as_text(speaker),
            text=as_text(text) or "",
        )
