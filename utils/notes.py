"""Encoding of the two-part notes stored on each item.

Notes are kept in ``items.notes`` as a compact JSON object with the keys
``bruteForce`` and ``optimized``. Older rows hold free text; those decode
to a payload whose ``bruteForce`` is the whole text.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Union

from models.notes import NotesPayload

FIELD_ORDER = ("bruteForce", "optimized")


@dataclass(frozen=True)
class EmptyNotes:
    payload: NotesPayload
    kind: ClassVar[str] = "empty"


@dataclass(frozen=True)
class StructuredNotes:
    payload: NotesPayload
    kind: ClassVar[str] = "structured"


@dataclass(frozen=True)
class LegacyNotes:
    payload: NotesPayload
    raw: str
    kind: ClassVar[str] = "legacy"


DecodedNotes = Union[EmptyNotes, StructuredNotes, LegacyNotes]


def encode_notes(payload: NotesPayload) -> str:
    data = {
        "bruteForce": payload.brute_force,
        "optimized": payload.optimized,
    }
    return json.dumps(
        {key: data[key] for key in FIELD_ORDER},
        ensure_ascii=False,
        separators=(",", ":"),
    )


def _field_text(parsed: dict, key: str) -> str:
    value: Any = parsed.get(key)
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def decode_notes(raw: Optional[str]) -> DecodedNotes:
    """Decode a stored notes blob. Never raises."""
    if not raw:
        return EmptyNotes(payload=NotesPayload())
    try:
        parsed = json.loads(raw)
    except (ValueError, RecursionError):
        parsed = None
    if not isinstance(parsed, dict):
        return LegacyNotes(payload=NotesPayload(brute_force=raw), raw=raw)
    return StructuredNotes(
        payload=NotesPayload(
            brute_force=_field_text(parsed, "bruteForce"),
            optimized=_field_text(parsed, "optimized"),
        )
    )


def parse_notes(raw: Optional[str]) -> NotesPayload:
    return decode_notes(raw).payload
