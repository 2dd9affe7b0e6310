from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


# ──────────────────────────────────────────────────────────────────────────────
# EXCEPTIONS
# ──────────────────────────────────────────────────────────────────────────────
class KanaconvError(Exception):
    """Base class for errors raised by the conversion pipeline."""


class AnalyzerUnavailable(KanaconvError):
    """Raised when the morphological analyzer cannot be built or fails while segmenting."""
    def __init__(self, reason: str):
        super().__init__(f"Morphological analyzer unavailable: {reason}")
        self.reason = reason


# ──────────────────────────────────────────────────────────────────────────────
# TYPES
# ──────────────────────────────────────────────────────────────────────────────
class SegmentationMode(str, Enum):
    """How the analyzer splits text.

    ``SEARCH`` keeps the finest decomposition, which gives the best reading
    coverage. ``NORMAL`` merges compound nouns into a single token.
    """
    SEARCH = "search"
    NORMAL = "normal"


@dataclass(frozen=True)
class Token:
    """One segment of analyzed text.

    ``features`` follows the analyzer's dictionary layout and may be shorter
    than expected for unknown words, so always go through :meth:`feature`.
    """
    surface: str
    features: List[str] = field(default_factory=list)
    is_boundary: bool = False

    def feature(self, index: int) -> Optional[str]:
        """Return the feature at *index*, or ``None`` when the list is too short."""
        if 0 <= index < len(self.features):
            return self.features[index]
        return None


class BaseAnalyzer(ABC):
    """Abstract base class for morphological analyzers"""

    @abstractmethod
    def analyze(self, text: str, mode: SegmentationMode = SegmentationMode.SEARCH) -> List[Token]:
        """Segment *text* into tokens, in original order"""
        pass
