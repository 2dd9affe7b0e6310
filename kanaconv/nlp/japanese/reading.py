"""Whole-text phonetic reading built from analyzer tokens."""

from dataclasses import dataclass
from typing import List, Optional

from kanaconv.nlp.base import BaseAnalyzer, SegmentationMode, Token
from .analyzer import PRONUNCIATION_INDEX, READING_INDEX
from .script import to_hiragana

PLACEHOLDER = "*"

SOURCE_READING = "reading"
SOURCE_PRONUNCIATION = "pronunciation"
SOURCE_SURFACE = "surface"


@dataclass(frozen=True)
class TokenReading:
    """Reading chosen for one token and the feature it came from."""
    surface: str
    reading: str
    source: str


def _usable(value: Optional[str]) -> bool:
    # Merged compound tokens can carry a partial reading such as "ガッ*".
    return bool(value) and PLACEHOLDER not in value


class ReadingResolver:
    """Turn arbitrary Japanese text into one Hiragana reading."""

    def __init__(self, analyzer: BaseAnalyzer, default_mode: SegmentationMode = SegmentationMode.SEARCH):
        self._analyzer = analyzer
        self._default_mode = default_mode

    def resolve(self, text: str, mode: Optional[SegmentationMode] = None) -> str:
        """Return the Hiragana reading of *text*.

        Tokens the dictionary has no reading for contribute their surface text
        unchanged. Empty input returns ``""`` without touching the analyzer.

        Raises:
            AnalyzerUnavailable: If the analyzer cannot segment the text.
        """
        return "".join(r.reading for r in self.resolve_tokens(text, mode))

    def resolve_tokens(self, text: str, mode: Optional[SegmentationMode] = None) -> List[TokenReading]:
        """Per-token version of :meth:`resolve`, boundary markers excluded."""
        if not text:
            return []

        tokens = self._analyzer.analyze(text, mode or self._default_mode)
        return [self._read(token) for token in tokens if not token.is_boundary]

    @staticmethod
    def _read(token: Token) -> TokenReading:
        reading = token.feature(READING_INDEX)
        if _usable(reading):
            return TokenReading(token.surface, to_hiragana(reading), SOURCE_READING)

        pronunciation = token.feature(PRONUNCIATION_INDEX)
        if _usable(pronunciation):
            return TokenReading(token.surface, to_hiragana(pronunciation), SOURCE_PRONUNCIATION)

        return TokenReading(token.surface, token.surface, SOURCE_SURFACE)
