"""Kanji/kana text to Hiragana, Katakana and romanji."""

from dataclasses import dataclass
from typing import List, Optional

import jaconv

from kanaconv.logger import logger
from kanaconv.nlp.base import BaseAnalyzer, SegmentationMode
from kanaconv.nlp.japanese.reading import ReadingResolver, TokenReading
from kanaconv.nlp.japanese.romanizer import JapaneseRomanizer
from kanaconv.nlp.japanese.script import to_katakana


@dataclass(frozen=True)
class ConversionResult:
    hiragana: str
    katakana: str
    romanji: str
    tokens: Optional[List[TokenReading]] = None


class JapaneseConverter:
    """Runs the reading, script shift and transliteration steps for one input.

    The analyzer is injected so one long-lived instance can serve every
    request, and tests can pass a double instead.
    """

    def __init__(
        self,
        analyzer: BaseAnalyzer,
        romanizer: Optional[JapaneseRomanizer] = None,
        normalize_halfwidth: bool = True,
        default_mode: SegmentationMode = SegmentationMode.SEARCH,
    ):
        self.resolver = ReadingResolver(analyzer, default_mode=default_mode)
        self.romanizer = romanizer or JapaneseRomanizer()
        self.normalize_halfwidth = normalize_halfwidth

    def convert(self, text: str, mode: Optional[SegmentationMode] = None, debug: bool = False) -> ConversionResult:
        """Convert *text* into its three representations.

        Katakana and romanji are both derived from the Hiragana reading, so
        all three fields describe the same pronunciation. With ``debug`` the
        per-token readings are returned as well.

        Raises:
            AnalyzerUnavailable: If the analyzer is broken; callers decide
                whether that fails the request.
        """
        if not text:
            return ConversionResult("", "", "", [] if debug else None)

        if self.normalize_halfwidth:
            # ｶﾅ -> カナ; ASCII and digits are left alone
            text = jaconv.h2z(text, kana=True, ascii=False, digit=False)

        tokens = self.resolver.resolve_tokens(text, mode)
        hiragana = "".join(t.reading for t in tokens)
        logger.debug(f"Resolved {len(tokens)} tokens into {len(hiragana)} kana")

        return ConversionResult(
            hiragana=hiragana,
            katakana=to_katakana(hiragana),
            romanji=self.romanizer.to_romanji(hiragana),
            tokens=tokens if debug else None,
        )
