"""
Shared test fixtures for the recognizer test suite.
"""
import re

import pytest

from lookup_ner.entity_extraction.config_store import ConfigStore
from lookup_ner.entity_extraction.dictionary import EntityDictionary
from lookup_ner.entity_extraction.recognizer import EntityRecognizer


# ==========================================================================
# Collaborators
# ==========================================================================

def _singularize(word: str) -> str:
    """Tiny English plural stripper standing in for the spaCy lemmatizer."""
    if len(word) > 3 and word.endswith("ies"):
        return word[:-3] + "y"
    if len(word) > 2 and word.endswith("s") and not word.endswith("ss"):
        return word[:-1]
    return word


@pytest.fixture
def singularize():
    return _singularize


_TOKEN_RE = re.compile(r"(?P<number>\d+)|(?P<word>\w+)|(?P<punctuation>[^\w\s])")


def _tokenize(text: str) -> list:
    return [
        {"value": match.group(0), "tag": match.lastgroup}
        for match in _TOKEN_RE.finditer(text)
    ]


@pytest.fixture
def tokenize():
    """Regex tokenizer emitting word / number / punctuation tokens."""
    return _tokenize


# ==========================================================================
# Training data
# ==========================================================================

@pytest.fixture
def training_data():
    return [
        {"text": "manchester united", "entityType": "club", "uid": "manu"},
        {"text": "manchester", "entityType": "city"},
        {"text": "U K", "entityType": "country", "uid": "uk"},
        {"text": "raw banana", "entityType": "veg"},
        {"text": "banana", "entityType": "fruit"},
        {"text": "u s a", "entityType": "country", "uid": "usa"},
        {"text": "new york city", "entityType": "city", "uid": "nyc", "population": 8336817},
        {"text": "new york", "entityType": "state", "uid": "ny"},
    ]


# ==========================================================================
# Components
# ==========================================================================

@pytest.fixture
def config_store():
    return ConfigStore()


@pytest.fixture
def dictionary():
    return EntityDictionary()


@pytest.fixture
def recognizer(singularize):
    return EntityRecognizer(singularize=singularize)


@pytest.fixture
def trained_recognizer(singularize, training_data):
    recognizer = EntityRecognizer(singularize=singularize)
    recognizer.learn(training_data)
    return recognizer
