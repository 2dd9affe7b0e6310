"""Japanese language processing module."""

from .analyzer import JanomeAnalyzer
from .reading import ReadingResolver, TokenReading
from .romanizer import JapaneseRomanizer
from .script import ScriptRange, classify, to_hiragana, to_katakana

__all__ = [
    'JanomeAnalyzer',
    'ReadingResolver',
    'TokenReading',
    'JapaneseRomanizer',
    'ScriptRange',
    'classify',
    'to_hiragana',
    'to_katakana',
]
