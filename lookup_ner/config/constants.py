"""
Constants used across the recognizer.
Pinned so that configuration and snapshots stay comparable between runs.
"""
from typing import List, Set

# =============================================================================
# Token tags
# =============================================================================
WORD_TAG: str = "word"

# Tags that may be placed in `tagsToIgnore`. `word` and `number` carry entity
# content and are deliberately absent.
IGNORABLE_TAGS: Set[str] = {
    "punctuation",
    "emoticon",
    "email",
    "emoji",
    "hashtag",
    "mention",
    "quoted_phrase",
    "currency",
    "time",
    "url",
    "unknown",
    "symbol",
}

# =============================================================================
# Default recognition-time configuration
# =============================================================================
DEFAULT_TAGS_TO_IGNORE: List[str] = ["punctuation"]
DEFAULT_VALUES_TO_IGNORE: List[str] = []
DEFAULT_IGNORE_DIACRITICS: bool = True

# =============================================================================
# Dictionary entries
# =============================================================================
# Wire names of the fields every entry may carry; anything else is an extra
# pass-through field copied verbatim onto recognized tokens.
TEXT_FIELD: str = "text"
ENTITY_TYPE_FIELD: str = "entityType"
UID_FIELD: str = "uid"
VALUE_FIELD: str = "value"
WORD_COUNTS_FIELD: str = "wordCounts"
ORIGINAL_SEQ_FIELD: str = "originalSeq"

RESERVED_ENTRY_FIELDS: Set[str] = {
    TEXT_FIELD,
    ENTITY_TYPE_FIELD,
    UID_FIELD,
    VALUE_FIELD,
    WORD_COUNTS_FIELD,
}

# =============================================================================
# Snapshot layout
# =============================================================================
# [config, headIndex, phraseIndex, reserved-object, reserved-list, reserved-list]
SNAPSHOT_ELEMENT_COUNT: int = 6
SNAPSHOT_CONFIG_INDEX: int = 0
SNAPSHOT_HEAD_INDEX: int = 1
SNAPSHOT_PHRASE_INDEX: int = 2
