"""
DictionaryEntry — what the recognizer knows about one learned word or phrase.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from lookup_ner.config.constants import (
    ENTITY_TYPE_FIELD,
    RESERVED_ENTRY_FIELDS,
    UID_FIELD,
    VALUE_FIELD,
    WORD_COUNTS_FIELD,
)


@dataclass
class DictionaryEntry:
    """
    A learned entity, or the head word of one or more multi-word entities.

    An entry in the head index may carry both its own `entity_type` (the word is
    an entity by itself) and `word_counts` (the word also starts longer phrases).
    A head entry created only for phrases has `entity_type` None.
    """

    entity_type: Optional[str] = None
    uid: Optional[str] = None
    value: Optional[str] = None
    extras: Dict[str, Any] = field(default_factory=dict)   # pass-through fields
    word_counts: Optional[List[int]] = None                 # phrase lengths, longest first

    @classmethod
    def from_definition(cls, definition: dict) -> "DictionaryEntry":
        """Clone an entity definition, leaving out `text` and any `wordCounts`."""
        return cls(
            entity_type=definition.get(ENTITY_TYPE_FIELD),
            uid=definition.get(UID_FIELD),
            value=definition.get(VALUE_FIELD),
            extras={k: v for k, v in definition.items() if k not in RESERVED_ENTRY_FIELDS},
        )

    @classmethod
    def from_dict(cls, data: dict) -> "DictionaryEntry":
        """Inverse of `to_dict()`; used when importing snapshots."""
        entry = cls.from_definition(data)
        word_counts = data.get(WORD_COUNTS_FIELD)
        if word_counts is not None:
            if not isinstance(word_counts, list) or not all(
                isinstance(n, int) and not isinstance(n, bool) and n > 1 for n in word_counts
            ):
                raise ValueError(f"wordCounts must list phrase lengths above 1, got {word_counts!r}")
            entry.word_counts = list(word_counts)
        return entry

    @property
    def is_entity(self) -> bool:
        return self.entity_type is not None

    @property
    def starts_phrases(self) -> bool:
        return bool(self.word_counts)

    def add_word_count(self, count: int) -> None:
        if self.word_counts is None:
            self.word_counts = []
        if count not in self.word_counts:
            self.word_counts.append(count)

    def sort_word_counts(self) -> None:
        if self.word_counts:
            self.word_counts.sort(reverse=True)

    def token_fields(self) -> dict:
        """Fields copied onto a recognized token (everything but `wordCounts`)."""
        fields: dict = {}
        if self.entity_type is not None:
            fields[ENTITY_TYPE_FIELD] = self.entity_type
        if self.uid is not None:
            fields[UID_FIELD] = self.uid
        if self.value is not None:
            fields[VALUE_FIELD] = self.value
        fields.update(self.extras)
        return fields

    def to_dict(self) -> dict:
        data = self.token_fields()
        if self.word_counts is not None:
            data[WORD_COUNTS_FIELD] = list(self.word_counts)
        return data

    def __repr__(self) -> str:
        return f"DictionaryEntry({self.entity_type}, uid={self.uid}, word_counts={self.word_counts})"
