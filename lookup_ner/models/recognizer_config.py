"""
Typed Pydantic model for the recognition-time configuration.

Wire names are camelCase (`tagsToIgnore`, `valuesToIgnore`, `ignoreDiacritics`),
matching the dict returned by `configure()` and stored in snapshots.
"""
from __future__ import annotations

import logging
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lookup_ner.config.constants import (
    DEFAULT_IGNORE_DIACRITICS,
    DEFAULT_TAGS_TO_IGNORE,
    DEFAULT_VALUES_TO_IGNORE,
    IGNORABLE_TAGS,
)

logger = logging.getLogger(__name__)


def _dedup(items: List[str]) -> List[str]:
    return list(dict.fromkeys(items))


class RecognizerConfig(BaseModel):
    """
    What the matcher skips over while scanning multi-word entities, and how it
    normalizes words before looking them up.
    """

    model_config = ConfigDict(populate_by_name=True)

    tags_to_ignore: List[str] = Field(
        default_factory=lambda: list(DEFAULT_TAGS_TO_IGNORE),
        alias="tagsToIgnore",
        description="Token tags to skip; restricted to IGNORABLE_TAGS.",
    )
    values_to_ignore: List[str] = Field(
        default_factory=lambda: list(DEFAULT_VALUES_TO_IGNORE),
        alias="valuesToIgnore",
        description="Token values to skip, matched verbatim.",
    )
    ignore_diacritics: bool = Field(
        DEFAULT_IGNORE_DIACRITICS,
        alias="ignoreDiacritics",
        description="Strip diacritics during normalization; otherwise only lowercase.",
    )

    @field_validator("tags_to_ignore")
    @classmethod
    def keep_ignorable_tags(cls, v: List[str]) -> List[str]:
        dropped = [tag for tag in v if tag not in IGNORABLE_TAGS]
        if dropped:
            logger.warning("Dropping tags that can not be ignored: %s", dropped)
        return _dedup([tag for tag in v if tag in IGNORABLE_TAGS])

    @field_validator("values_to_ignore")
    @classmethod
    def dedup_values(cls, v: List[str]) -> List[str]:
        return _dedup(v)

    def to_dict(self) -> dict:
        return {
            "tagsToIgnore": list(self.tags_to_ignore),
            "valuesToIgnore": list(self.values_to_ignore),
            "ignoreDiacritics": self.ignore_diacritics,
        }
