"""Hiragana/Katakana script shifting."""

from enum import Enum

import jaconv

# Hiragana and Katakana letters sit 0x60 apart in Unicode.
KANA_OFFSET = 0x60

# Only ranges that have a counterpart in the other block are shifted. Symbols
# such as ヷ-ヺ, ・, ー, ヿ, ゟ and the half-width forms pass through unchanged.
_HIRAGANA_RANGES = ((0x3041, 0x3096), (0x309D, 0x309E))
_KATAKANA_RANGES = tuple((lo + KANA_OFFSET, hi + KANA_OFFSET) for lo, hi in _HIRAGANA_RANGES)


class ScriptRange(str, Enum):
    HIRAGANA = "hiragana"
    KATAKANA = "katakana"
    OTHER = "other"


def _in_ranges(code: int, ranges) -> bool:
    return any(lo <= code <= hi for lo, hi in ranges)


def classify(ch: str) -> ScriptRange:
    """Classify a single character as shiftable Hiragana, shiftable Katakana or other."""
    code = ord(ch)
    if _in_ranges(code, _HIRAGANA_RANGES):
        return ScriptRange.HIRAGANA
    if _in_ranges(code, _KATAKANA_RANGES):
        return ScriptRange.KATAKANA
    return ScriptRange.OTHER


def to_katakana(text: str) -> str:
    """Shift every Hiragana letter in *text* to Katakana; everything else is kept."""
    return jaconv.hira2kata(text)


def to_hiragana(text: str) -> str:
    """Shift every Katakana letter in *text* to Hiragana; everything else is kept."""
    return jaconv.kata2hira(text)
