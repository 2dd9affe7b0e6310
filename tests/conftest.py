"""Test configuration and fixtures."""
import pytest
from unittest.mock import Mock
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from kanaconv.nlp.base import BaseAnalyzer, Token


def ipadic_token(surface, reading="*", pronunciation="*", pos="名詞,一般,*,*"):
    """Build a token with the full 9-field IPADIC feature layout."""
    features = pos.split(",") + ["*", "*", surface, reading, pronunciation]
    return Token(surface=surface, features=features)


@pytest.fixture
def make_token():
    """Factory for IPADIC-shaped tokens."""
    return ipadic_token


@pytest.fixture
def mock_analyzer():
    """Analyzer double; set ``analyze.return_value`` in the test."""
    analyzer = Mock(spec=BaseAnalyzer)
    analyzer.analyze.return_value = []
    return analyzer


@pytest.fixture
def gakkou_analyzer(mock_analyzer):
    """Analyzer that reads 学校 as ガッコウ."""
    mock_analyzer.analyze.return_value = [ipadic_token("学校", "ガッコウ", "ガッコー")]
    return mock_analyzer


@pytest.fixture(scope="session")
def janome_analyzer():
    """Real Janome analyzer; loading the dictionary is slow, so share it."""
    from kanaconv.nlp.japanese.analyzer import JanomeAnalyzer
    return JanomeAnalyzer()
