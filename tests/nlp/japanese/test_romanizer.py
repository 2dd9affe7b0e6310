"""Tests for Hiragana to romanji transliteration."""
import pytest
from kanaconv.nlp.japanese.romanizer import JapaneseRomanizer, LONG_ENTRIES, SHORT_ENTRIES


class TestJapaneseRomanizer:
    """Test JapaneseRomanizer.to_romanji."""

    @pytest.fixture
    def romanizer(self):
        return JapaneseRomanizer()

    def test_empty(self, romanizer):
        assert romanizer.to_romanji("") == ""

    def test_single_vowel(self, romanizer):
        assert romanizer.to_romanji("あ") == "a"

    def test_long_vowel(self, romanizer):
        assert romanizer.to_romanji("ああ") == "aa"
        assert romanizer.to_romanji("しい") == "shii"

    def test_words(self, romanizer):
        assert romanizer.to_romanji("かな") == "kana"
        assert romanizer.to_romanji("ひらがな") == "hiragana"
        assert romanizer.to_romanji("こんにちは") == "konnichiha"

    def test_voiced_and_semi_voiced(self, romanizer):
        assert romanizer.to_romanji("がぎぐげご") == "gagigugego"
        assert romanizer.to_romanji("ぱぴぷぺぽ") == "papipupepo"
        assert romanizer.to_romanji("ぢづ") == "jizu"

    def test_contracted_sounds(self, romanizer):
        assert romanizer.to_romanji("とうきょう") == "toukyou"
        assert romanizer.to_romanji("じゃ") == "ja"

    def test_unmapped_passes_through(self, romanizer):
        assert romanizer.to_romanji("漢字abc123、。") == "漢字abc123、。"
        assert romanizer.to_romanji("っ") == "っ"

    def test_geminated_consonants(self, romanizer):
        """Small っ doubles the consonant that follows it."""
        assert romanizer.to_romanji("がっこう") == "gakkou"
        assert romanizer.to_romanji("ちょっとまって") == "chottomatte"
        assert romanizer.to_romanji("きって") == "kitte"
        assert romanizer.to_romanji("いっぱい") == "ippai"

    def test_katakana_passes_through(self, romanizer):
        assert romanizer.to_romanji("カナ") == "カナ"

    def test_long_entry_tried_before_short(self):
        """A two-codepoint entry must win even when it differs from the single-entry concatenation."""
        romanizer = JapaneseRomanizer(
            long_entries={"しい": "SHII"},
            short_entries={"し": "shi", "い": "i"},
        )
        assert romanizer.to_romanji("しい") == "SHII"
        assert romanizer.to_romanji("しいし") == "SHIIshi"

    def test_trailing_single_codepoint(self, romanizer):
        assert romanizer.to_romanji("かあか") == "kaaka"


class TestTables:
    """Test the static transliteration tables."""

    def test_long_keys_are_two_codepoints(self):
        assert all(len(key) == 2 for key in LONG_ENTRIES)

    def test_short_keys_are_one_codepoint(self):
        assert all(len(key) == 1 for key in SHORT_ENTRIES)

    def test_long_keys_start_with_mapped_kana(self):
        assert all(key[0] in SHORT_ENTRIES or key[0] == "っ" for key in LONG_ENTRIES)

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            SHORT_ENTRIES["あ"] = "x"
