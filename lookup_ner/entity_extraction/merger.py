"""
Entity Token Merger.

Builds the token emitted for a recognized entity:
1. Single word → copy of the input token + entry fields
2. Phrase      → entry fields only; the consumed tokens collapse into one

Both kinds record the consumed raw values in `originalSeq`, default `uid` and
`value` from the matched words when the entry has none, and carry `tag: "word"`.
"""
from typing import List

from lookup_ner.config.constants import ORIGINAL_SEQ_FIELD, WORD_TAG
from lookup_ner.models.entity import DictionaryEntry


def merge_single_word(token: dict, entry: DictionaryEntry, normalized_value: str) -> dict:
    """
    Turn a single token into an entity token. The input token is not modified.

    Args:
        token: Input token ({"value": ..., "tag": ...}).
        entry: Head index entry with its own `entity_type`.
        normalized_value: The key that matched (normalized, possibly singularized).

    Returns:
        New token dict.
    """
    merged = dict(token)
    merged.update(entry.token_fields())
    merged[ORIGINAL_SEQ_FIELD] = [token["value"]]
    merged["uid"] = entry.uid or normalized_value
    merged["value"] = entry.value or normalized_value
    merged["tag"] = WORD_TAG
    return merged


def merge_phrase(entry: DictionaryEntry, words: List[str], original_seq: List[str]) -> dict:
    """
    Collapse the tokens of a matched phrase into one entity token.

    Args:
        entry: Phrase index entry.
        words: Normalized phrase words used for the lookup.
        original_seq: Raw values of every consumed token, ignorable ones included.

    Returns:
        New token dict.
    """
    merged = entry.token_fields()
    merged[ORIGINAL_SEQ_FIELD] = original_seq
    merged["uid"] = entry.uid or "_".join(words)
    merged["value"] = entry.value or " ".join(words)
    merged["tag"] = WORD_TAG
    return merged
