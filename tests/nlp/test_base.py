"""Tests for NLP base classes and exceptions."""
import pytest
from unittest.mock import patch
from kanaconv.nlp import get_analyzer
from kanaconv.nlp.base import AnalyzerUnavailable, BaseAnalyzer, KanaconvError, SegmentationMode, Token


class TestBaseAnalyzer:
    """Test BaseAnalyzer abstract class."""

    def test_analyze_not_implemented(self):
        """Test that BaseAnalyzer cannot be instantiated."""
        with pytest.raises(TypeError):
            BaseAnalyzer()

    def test_concrete_implementation(self):
        """Test that concrete implementation works."""
        class CharAnalyzer(BaseAnalyzer):
            def analyze(self, text, mode=SegmentationMode.SEARCH):
                return [Token(surface=ch) for ch in text]

        tokens = CharAnalyzer().analyze("ab")
        assert [t.surface for t in tokens] == ["a", "b"]


class TestToken:
    """Test bounds-checked feature access."""

    def test_feature_in_range(self):
        token = Token(surface="猫", features=["名詞", "一般"])
        assert token.feature(1) == "一般"

    def test_feature_out_of_range(self):
        token = Token(surface="猫", features=["名詞"])
        assert token.feature(7) is None
        assert token.feature(-1) is None

    def test_defaults(self):
        token = Token(surface="x")
        assert token.features == []
        assert token.is_boundary is False


class TestAnalyzerUnavailable:
    """Test the typed analyzer error."""

    def test_attributes(self):
        error = AnalyzerUnavailable("dictionary missing")
        assert isinstance(error, KanaconvError)
        assert error.reason == "dictionary missing"
        assert "dictionary missing" in str(error)


class TestGetAnalyzer:
    """Test the analyzer factory."""

    def test_janome(self):
        with patch('kanaconv.nlp.japanese.analyzer.JanomeAnalyzer') as mock_cls:
            analyzer = get_analyzer('Janome', user_dictionary='/tmp/u.csv')
        mock_cls.assert_called_once_with(user_dictionary='/tmp/u.csv')
        assert analyzer is mock_cls.return_value

    def test_unsupported(self):
        with pytest.raises(ValueError):
            get_analyzer('mecab')
