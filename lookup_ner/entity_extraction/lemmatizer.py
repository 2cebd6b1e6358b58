"""
spaCy-backed noun singularizer used as the default lemma fallback.

The recognizer accepts any `singularize(word) -> word` callable; this module
provides the default one. The model is lazy-loaded on first use.
"""
import logging
from functools import lru_cache
from typing import Callable, Optional

from lookup_ner.config.settings import LEMMATIZER_ENABLED, SPACY_MODEL

logger = logging.getLogger(__name__)

Singularizer = Callable[[str], str]

# Lazy-loaded spaCy model
_nlp_model = None
_nlp_model_loaded = False


def _get_nlp_model():
    """Lazy-load spaCy model to avoid import-time cost."""
    global _nlp_model, _nlp_model_loaded
    if not _nlp_model_loaded:
        _nlp_model_loaded = True
        if not LEMMATIZER_ENABLED:
            logger.info("Lemmatizer disabled by LEMMATIZER_ENABLED, lemma fallback is a no-op")
            return None
        import spacy  # type: ignore[import-untyped]
        try:
            _nlp_model = spacy.load(SPACY_MODEL, disable=["parser", "ner"])
            logger.info("Loaded spaCy model: %s", SPACY_MODEL)
        except OSError:
            logger.warning(
                "spaCy model '%s' not found, lemma fallback is a no-op. "
                "Install with: python -m spacy download %s",
                SPACY_MODEL,
                SPACY_MODEL,
            )
            _nlp_model = None
    return _nlp_model


def singularize_with(nlp_model, word: str) -> str:
    """
    Reduce `word` to its singular noun form using `nlp_model`.

    Args:
        nlp_model: A loaded spaCy pipeline with a lemmatizer, or None.
        word: A single normalized word.

    Returns:
        The lemma when spaCy tags the word as a noun, otherwise `word` unchanged.
    """
    if nlp_model is None or not word:
        return word

    doc = nlp_model(word)
    if len(doc) != 1:
        return word

    token = doc[0]
    if token.pos_ not in ("NOUN", "PROPN") or not token.lemma_:
        return word
    return token.lemma_.lower()


@lru_cache(maxsize=8192)
def singularize(word: str) -> str:
    """Default singularizer: `singularize_with` against the lazily loaded model."""
    return singularize_with(_get_nlp_model(), word)


def build_singularizer(nlp_model=None) -> Singularizer:
    """
    Build a singularizer bound to a pre-loaded spaCy model.

    Args:
        nlp_model: Pre-loaded spaCy model. If None, the lazily loaded default is used.
    """
    if nlp_model is None:
        return singularize

    @lru_cache(maxsize=8192)
    def _singularize(word: str) -> str:
        return singularize_with(nlp_model, word)

    return _singularize


def resolve_singularizer(singularizer: Optional[Singularizer]) -> Singularizer:
    return singularizer if singularizer is not None else singularize
