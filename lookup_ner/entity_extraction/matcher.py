"""
Greedy longest-match entity recognition over a token sequence.

For every token not yet consumed:
    1. Ignorable tag           → pass through
    2. Head index lookup       → normalized value, then its singular form
    3. No entry                → pass through
       Single-word entity      → merged entity token
       Phrase head             → try each candidate length, longest first;
                                 pass through when none matches
       Both                    → as phrase head; fall back to the single word

Ignorable tokens inside a phrase are skipped for the lookup but kept in the
entity's `originalSeq`, so "raw-banana" matches "raw banana".
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from lookup_ner.entity_extraction.config_store import ConfigStore
from lookup_ner.entity_extraction.dictionary import EntityDictionary
from lookup_ner.entity_extraction.merger import merge_phrase, merge_single_word
from lookup_ner.models.entity import DictionaryEntry
from lookup_ner.monitoring.metrics import record_entity_match

logger = logging.getLogger(__name__)


@dataclass
class PhraseMatch:
    """Outcome of one phrase attempt; `token` is None on a miss."""

    token: Optional[dict]
    next_index: int

    @property
    def matched(self) -> bool:
        return self.token is not None


def match_phrase(
    tokens: Sequence[dict],
    start: int,
    length: int,
    dictionary: EntityDictionary,
    config: ConfigStore,
    singularize: Callable[[str], str],
) -> PhraseMatch:
    """
    Try to match a phrase of `length` words starting at `start`.

    Scans forward until `length` non-ignorable tokens are collected or the
    tokens run out; a scan cut short at the end of the input looks up the
    words it gathered and consumes trailing ignorable tokens with them. Every
    scanned token goes into `originalSeq`; only non-ignorable ones form the
    phrase. If the phrase misses, the last word is retried in singular form.

    Returns:
        PhraseMatch with the merged token and the index just past the last
        scanned token, or with `token=None` and `next_index=start` on a miss.
    """
    words: List[str] = []
    original_seq: List[str] = []
    k = start

    while k < len(tokens) and len(words) < length:
        value = tokens[k]["value"]
        if not config.is_ignorable(value, tokens[k]["tag"]):
            words.append(config.normalize(value))
        original_seq.append(value)
        k += 1

    if not words:
        return PhraseMatch(token=None, next_index=start)

    entry = dictionary.lookup_phrase(" ".join(words))
    if entry is None:
        words[-1] = singularize(words[-1])
        entry = dictionary.lookup_phrase(" ".join(words))

    if entry is None:
        return PhraseMatch(token=None, next_index=start)

    return PhraseMatch(token=merge_phrase(entry, words, original_seq), next_index=k)


def match_longest_phrase(
    tokens: Sequence[dict],
    start: int,
    head: DictionaryEntry,
    dictionary: EntityDictionary,
    config: ConfigStore,
    singularize: Callable[[str], str],
) -> PhraseMatch:
    """
    Try the head's candidate lengths in order (longest first); first hit wins.

    Each length is an independent rescan from `start`.
    """
    for length in head.word_counts or []:
        result = match_phrase(tokens, start, length, dictionary, config, singularize)
        if result.matched:
            return result
    return PhraseMatch(token=None, next_index=start)


def _lookup_head(
    value: str,
    dictionary: EntityDictionary,
    singularize: Callable[[str], str],
) -> Tuple[Optional[DictionaryEntry], str]:
    """Look up `value`, falling back to its singular form. Returns (entry, key)."""
    entry = dictionary.lookup_head(value)
    if entry is not None:
        return entry, value

    lemma = singularize(value)
    return dictionary.lookup_head(lemma), lemma


def recognize_tokens(
    tokens: Sequence[dict],
    dictionary: EntityDictionary,
    config: ConfigStore,
    singularize: Callable[[str], str],
) -> List[dict]:
    """
    Recognize learned entities in `tokens`.

    Args:
        tokens: [{"value": "Manchester", "tag": "word"}, ...]
        dictionary: Learned entities.
        config: Ignorable tags/values and normalization mode.
        singularize: Lemma fallback for head words and last phrase words.

    Returns:
        New token list: unmatched tokens as-is, each matched span merged into one
        entity token.
    """
    recognized: List[dict] = []
    i = 0

    while i < len(tokens):
        token = tokens[i]

        if config.is_ignorable_tag(token["tag"]):
            recognized.append(token)
            i += 1
            continue

        entry, key = _lookup_head(config.normalize(token["value"]), dictionary, singularize)

        if entry is None:
            recognized.append(token)
            i += 1
            continue

        if entry.starts_phrases:
            result = match_longest_phrase(tokens, i, entry, dictionary, config, singularize)
            if result.matched:
                logger.debug("Phrase entity at %d: %s", i, result.token["originalSeq"])
                record_entity_match("phrase")
                recognized.append(result.token)
                i = result.next_index
                continue

        if entry.is_entity:
            logger.debug("Single-word entity at %d: %s", i, key)
            record_entity_match("single_word")
            recognized.append(merge_single_word(token, entry, key))
        else:
            recognized.append(token)
        i += 1

    return recognized
