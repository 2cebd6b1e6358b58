"""
Unit tests for:
- lookup_ner.models.entity             (DictionaryEntry)
- lookup_ner.models.recognizer_config  (RecognizerConfig Pydantic model)
- CONFIGURE_OPTIONS_SCHEMA / ENTITY_DEFINITION_SCHEMA
"""
from __future__ import annotations

import pytest
from jsonschema import ValidationError, validate
from pydantic import ValidationError as PydanticValidationError

from lookup_ner.config.schemas import CONFIGURE_OPTIONS_SCHEMA, ENTITY_DEFINITION_SCHEMA
from lookup_ner.models.entity import DictionaryEntry
from lookup_ner.models.recognizer_config import RecognizerConfig


# =============================================================================
# DictionaryEntry
# =============================================================================

class TestDictionaryEntry:
    def test_from_definition_drops_text(self):
        entry = DictionaryEntry.from_definition(
            {"text": "india", "entityType": "country", "uid": "in", "capital": "delhi"}
        )
        assert entry.entity_type == "country"
        assert entry.uid == "in"
        assert entry.value is None
        assert entry.extras == {"capital": "delhi"}

    def test_flags(self):
        assert DictionaryEntry(entity_type="city").is_entity
        assert not DictionaryEntry(word_counts=[2]).is_entity
        assert DictionaryEntry(word_counts=[2]).starts_phrases
        assert not DictionaryEntry(word_counts=[]).starts_phrases

    def test_add_word_count_dedups(self):
        entry = DictionaryEntry()
        for n in (2, 3, 2):
            entry.add_word_count(n)
        entry.sort_word_counts()
        assert entry.word_counts == [3, 2]

    def test_to_dict_omits_unset_fields(self):
        assert DictionaryEntry(word_counts=[2]).to_dict() == {"wordCounts": [2]}
        assert DictionaryEntry(entity_type="veg").to_dict() == {"entityType": "veg"}

    def test_token_fields_exclude_word_counts(self):
        entry = DictionaryEntry(entity_type="city", value="Manchester", word_counts=[2])
        assert entry.token_fields() == {"entityType": "city", "value": "Manchester"}

    def test_from_dict_inverse(self):
        original = DictionaryEntry(
            entity_type="city", uid="nyc", extras={"population": 1}, word_counts=[3, 2]
        )
        assert DictionaryEntry.from_dict(original.to_dict()) == original

    @pytest.mark.parametrize("word_counts", ["2", [2, "3"], [True], [1], [0]])
    def test_from_dict_rejects_bad_word_counts(self, word_counts):
        with pytest.raises(ValueError):
            DictionaryEntry.from_dict({"wordCounts": word_counts})


# =============================================================================
# RecognizerConfig
# =============================================================================

class TestRecognizerConfig:
    def test_defaults(self):
        assert RecognizerConfig().to_dict() == {
            "tagsToIgnore": ["punctuation"],
            "valuesToIgnore": [],
            "ignoreDiacritics": True,
        }

    def test_accepts_wire_names(self):
        config = RecognizerConfig.model_validate(
            {"tagsToIgnore": ["emoji"], "valuesToIgnore": ["of"], "ignoreDiacritics": False}
        )
        assert config.tags_to_ignore == ["emoji"]
        assert config.values_to_ignore == ["of"]
        assert config.ignore_diacritics is False

    def test_non_ignorable_tags_dropped(self):
        config = RecognizerConfig(tags_to_ignore=["word", "number", "symbol", "nonsense"])
        assert config.tags_to_ignore == ["symbol"]

    def test_duplicates_removed_in_order(self):
        config = RecognizerConfig(tags_to_ignore=["url", "emoji", "url"], values_to_ignore=["b", "a", "b"])
        assert config.tags_to_ignore == ["url", "emoji"]
        assert config.values_to_ignore == ["b", "a"]

    def test_wrong_types_rejected(self):
        with pytest.raises(PydanticValidationError):
            RecognizerConfig.model_validate({"valuesToIgnore": "of"})


# =============================================================================
# Schemas
# =============================================================================

class TestSchemas:
    def test_options_schema_accepts_any_diacritics_value(self):
        validate(instance={"ignoreDiacritics": "yes"}, schema=CONFIGURE_OPTIONS_SCHEMA)

    def test_options_schema_rejects_non_string_values(self):
        with pytest.raises(ValidationError):
            validate(instance={"valuesToIgnore": [1]}, schema=CONFIGURE_OPTIONS_SCHEMA)

    def test_definition_schema_allows_extra_fields(self):
        validate(
            instance={"text": "india", "entityType": "country", "anything": [1, 2]},
            schema=ENTITY_DEFINITION_SCHEMA,
        )

    def test_definition_schema_requires_visible_text(self):
        with pytest.raises(ValidationError):
            validate(instance={"text": " \n ", "entityType": "country"}, schema=ENTITY_DEFINITION_SCHEMA)
