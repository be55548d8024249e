"""
Field-level normalization rules shared by every transformer.

Source records are loosely typed: any field may be missing or null, and
localized text arrives as lists with one entry per language.
"""

import json
import re
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, Sequence, TypeVar

T = TypeVar("T")

INT32_MIN = -2147483648
INT32_MAX = 2147483647


def first_value(entries: Optional[Sequence[Dict[str, Any]]], default: str = "") -> str:
    """Value of the first entry of a language-tagged list, never aggregated."""
    if not entries:
        return default
    value = entries[0].get("value")
    return default if value is None else value


def language_tag(entry: Dict[str, Any], field: str = "bcp47") -> Optional[str]:
    """Language tag of a localized entry, None when the entry has none."""
    language = entry.get("language") or {}
    return language.get(field)


def tagged_entries(entries: Optional[Iterable[Dict[str, Any]]], field: str = "bcp47") -> List[Dict[str, Any]]:
    """Entries carrying a language tag; the rest cannot become a translation row."""
    return [entry for entry in entries or [] if language_tag(entry, field)]


def dedupe_keep_max(items: Iterable[T], key: Callable[[T], Hashable], score: Callable[[T], int]) -> List[T]:
    """
    Keep one item per key, the one with the highest score.

    The first item wins a tie. Output keeps first-seen key order.
    """
    kept: Dict[Hashable, T] = {}
    for item in items:
        item_key = key(item)
        existing = kept.get(item_key)
        if existing is None or score(item) > score(existing):
            kept[item_key] = item
    return list(kept.values())


def clamp_int32(value: int) -> int:
    return max(INT32_MIN, min(INT32_MAX, value))


def fill_slots(entries: Optional[Iterable[Dict[str, Any]]], slots: Sequence[str]) -> Dict[str, str]:
    """
    Merge image entries slot by slot.

    The first non-empty value seen for a slot is kept; later entries only
    fill slots that are still empty.
    """
    merged: Dict[str, str] = {}
    for entry in entries or []:
        for slot in slots:
            value = entry.get(slot)
            if value and not merged.get(slot):
                merged[slot] = value
    return merged


def to_json(value: Any) -> str:
    """Compact JSON, matching what the apps already parse."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def to_json_or_none(values: Sequence[Any]) -> Optional[str]:
    """JSON for a non-empty list; None marks "nothing" rather than "[]"."""
    return to_json(list(values)) if values else None


def to_json_bytes_or_none(values: Sequence[Any]) -> Optional[bytes]:
    encoded = to_json_or_none(values)
    return encoded.encode("utf-8") if encoded is not None else None


def titleize(label: str) -> str:
    """Split a camelCase label into words, e.g. featureFilm -> Feature Film."""
    spaced = re.sub(r"([A-Z])", r" \1", label)
    return (spaced[:1].upper() + spaced[1:]).strip()
