"""Kanji/kana conversion service.

Turns Japanese text into Hiragana, Katakana and a romanji transliteration.
"""

__version__ = "0.1.0"
