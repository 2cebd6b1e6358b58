"""
Entity Dictionary — two-level index of learned entities.

    head index    first word of every entity → DictionaryEntry
                  (single-word entity fields and/or candidate phrase lengths)
    phrase index  full multi-word phrase → DictionaryEntry

Candidate phrase lengths (`word_counts`) are kept longest first, which is what
lets the matcher prefer the longest entity starting at a token.
"""
import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, Optional

from jsonschema import Draft7Validator

from lookup_ner.config.constants import TEXT_FIELD
from lookup_ner.config.schemas import ENTITY_DEFINITION_SCHEMA
from lookup_ner.models.entity import DictionaryEntry
from lookup_ner.monitoring.metrics import record_definitions

logger = logging.getLogger(__name__)

_DEFINITION_VALIDATOR = Draft7Validator(ENTITY_DEFINITION_SCHEMA)


def is_acceptable_definition(definition: Any) -> bool:
    """A definition needs a mapping with non-blank `text` and a non-null `entityType`."""
    return isinstance(definition, Mapping) and _DEFINITION_VALIDATOR.is_valid(dict(definition))


def is_acronym(words: list) -> bool:
    """
    True for single letters separated by single spaces, e.g. ["u", "s", "a"].

    `len(" ".join(words))` is `2 * len(words) - 1` exactly when every word is
    one character long.
    """
    return len(words) > 1 and 2 * len(words) == len(" ".join(words)) + 1


class EntityDictionary:
    """Head and phrase indexes, grown by `learn()` and replaced by `load()`."""

    def __init__(self) -> None:
        self.head_index: Dict[str, DictionaryEntry] = {}
        self.phrase_index: Dict[str, DictionaryEntry] = {}

    def __len__(self) -> int:
        return len(self.head_index) + len(self.phrase_index)

    def lookup_head(self, word: str) -> Optional[DictionaryEntry]:
        return self.head_index.get(word)

    def lookup_phrase(self, phrase: str) -> Optional[DictionaryEntry]:
        return self.phrase_index.get(phrase)

    def clear(self) -> None:
        self.head_index = {}
        self.phrase_index = {}

    def load(
        self,
        head_index: Dict[str, DictionaryEntry],
        phrase_index: Dict[str, DictionaryEntry],
    ) -> None:
        self.head_index = head_index
        self.phrase_index = phrase_index

    # ------------------------------------------------------------------
    # Learning
    # ------------------------------------------------------------------

    def learn(
        self,
        definitions: Iterable[Any],
        normalize: Callable[[str], str],
    ) -> int:
        """
        Add entity definitions to the indexes.

        Later definitions of the same word or phrase override earlier ones; the
        candidate phrase lengths of a head word are kept across overrides.

        Args:
            definitions: [{"text": "united kingdom", "entityType": "country",
                           "uid": "uk", ...extra fields}, ...]
            normalize: Phrase normalizer (trim, collapse whitespace, case-fold).

        Returns:
            Number of definitions accepted; invalid ones are skipped.
        """
        accepted = 0
        rejected = 0

        for definition in definitions:
            if not is_acceptable_definition(definition):
                logger.debug("Skipping invalid entity definition: %r", definition)
                rejected += 1
                continue

            words = normalize(definition[TEXT_FIELD]).split()
            entry = DictionaryEntry.from_definition(definition)

            if len(words) == 1:
                self._learn_single_word(words[0], entry)
            else:
                self._learn_phrase(words, entry)
            accepted += 1

        # Longest phrase first for every head word.
        for head in self.head_index.values():
            head.sort_word_counts()

        record_definitions(accepted, rejected)
        logger.info(
            "Learned %d entity definitions (%d skipped); head=%d phrase=%d",
            accepted,
            rejected,
            len(self.head_index),
            len(self.phrase_index),
        )
        return accepted

    def _learn_single_word(self, word: str, entry: DictionaryEntry) -> None:
        previous = self.head_index.get(word)
        if previous is not None and previous.word_counts is not None:
            entry.word_counts = previous.word_counts
        self.head_index[word] = entry

    def _learn_phrase(self, words: list, entry: DictionaryEntry) -> None:
        self.phrase_index[" ".join(words)] = entry

        head = self.head_index.get(words[0])
        if head is None:
            head = DictionaryEntry()
            self.head_index[words[0]] = head
        head.add_word_count(len(words))

        if is_acronym(words):
            alias = "".join(words)
            logger.debug("Registering acronym alias '%s' for '%s'", alias, " ".join(words))
            self._learn_single_word(
                alias,
                DictionaryEntry(
                    entity_type=entry.entity_type,
                    uid=entry.uid,
                    value=entry.value,
                    extras=dict(entry.extras),
                ),
            )
