"""Natural Language Processing module for kanaconv

This module wraps the morphological analyzer and provides the script
conversion building blocks used by the converter.
"""

from typing import Optional

from .base import AnalyzerUnavailable, BaseAnalyzer, KanaconvError, SegmentationMode, Token

def get_analyzer(backend: str = 'janome', user_dictionary: Optional[str] = None) -> BaseAnalyzer:
    """Get a morphological analyzer for the specified backend.

    Args:
        backend: Analyzer backend name (only 'janome' is supported)
        user_dictionary: Optional path to an IPADIC-format user dictionary CSV

    Returns:
        Analyzer instance, ready to use

    Raises:
        ValueError: If backend is not supported
        AnalyzerUnavailable: If the analyzer fails to initialize
    """
    backend = backend.lower()

    if backend == 'janome':
        from .japanese.analyzer import JanomeAnalyzer
        return JanomeAnalyzer(user_dictionary=user_dictionary)
    else:
        raise ValueError(f"Unsupported analyzer backend: {backend}")

__all__ = [
    'AnalyzerUnavailable',
    'BaseAnalyzer',
    'KanaconvError',
    'SegmentationMode',
    'Token',
    'get_analyzer',
]
