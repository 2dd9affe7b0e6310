"""Janome-backed morphological analyzer."""

import threading
from typing import List, Optional

from janome.analyzer import Analyzer
from janome.tokenfilter import CompoundNounFilter
from janome.tokenizer import Tokenizer

from kanaconv.logger import logger
from kanaconv.nlp.base import AnalyzerUnavailable, BaseAnalyzer, SegmentationMode, Token

# Positions in the IPADIC feature layout rebuilt by ``_to_token``.
POS_FIELDS = 4
READING_INDEX = 7
PRONUNCIATION_INDEX = 8

# MeCab-style part of speech used for sentence boundary nodes.
BOUNDARY_POS = "BOS/EOS"


class JanomeAnalyzer(BaseAnalyzer):
    """Morphological analyzer wrapping a single Janome tokenizer.

    The tokenizer loads the full IPADIC into memory, so it is built once and
    shared. Calls into it are serialized, which makes one instance safe to
    hand to every request thread.
    """

    def __init__(self, user_dictionary: Optional[str] = None):
        """Build the Janome tokenizer, optionally with an IPADIC-format user dictionary.

        Raises:
            AnalyzerUnavailable: If Janome cannot load its dictionaries.
        """
        # ──────────────────────────────────────────────────────────────────────────────
        # INITIALISATION
        # ──────────────────────────────────────────────────────────────────────────────
        try:
            if user_dictionary:
                self._tokenizer = Tokenizer(udic=user_dictionary, udic_enc="utf8")
            else:
                self._tokenizer = Tokenizer()
        except Exception as e:
            logger.error(f"Error initializing Janome tokenizer: {e}")
            raise AnalyzerUnavailable(str(e)) from e

        self._compound_analyzer = Analyzer(tokenizer=self._tokenizer, token_filters=[CompoundNounFilter()])
        self._lock = threading.Lock()
        logger.info(f"Janome analyzer ready (user dictionary: {user_dictionary or 'none'})")

    def analyze(self, text: str, mode: SegmentationMode = SegmentationMode.SEARCH) -> List[Token]:
        """Segment *text* in one pass and return the tokens in original order.

        Raises:
            AnalyzerUnavailable: If Janome fails while segmenting.
        """
        try:
            with self._lock:
                if mode == SegmentationMode.NORMAL:
                    raw_tokens = list(self._compound_analyzer.analyze(text))
                else:
                    raw_tokens = list(self._tokenizer.tokenize(text, wakati=False))
        except Exception as e:
            logger.error(f"Janome failed to segment text ({len(text)} chars): {e}")
            raise AnalyzerUnavailable(str(e)) from e

        return [self._to_token(t) for t in raw_tokens]

    @staticmethod
    def _to_token(token) -> Token:
        """Rebuild the IPADIC feature list from a Janome token.

        Layout: 4 part-of-speech fields, conjugation type, conjugation form,
        base form, reading, pronunciation.
        """
        pos_fields = token.part_of_speech.split(",")
        pos_fields += ["*"] * (POS_FIELDS - len(pos_fields))
        features = pos_fields + [
            token.infl_type,
            token.infl_form,
            token.base_form,
            token.reading,
            token.phonetic,
        ]
        return Token(
            surface=token.surface,
            features=features,
            is_boundary=pos_fields[0] == BOUNDARY_POS,
        )
