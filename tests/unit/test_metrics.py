"""
Unit tests for lookup_ner.monitoring.metrics.

Counters are process-global, so assertions compare before/after samples.
"""
from __future__ import annotations

import pytest
from prometheus_client import REGISTRY

from lookup_ner.monitoring.metrics import (
    record_configuration_error,
    record_definitions,
    record_entity_match,
    record_snapshot_import,
    timed_operation,
)


def _sample(name: str, **labels) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


class TestMetricHelpers:

    def test_record_definitions(self):
        accepted = _sample("lookup_ner_definitions_total", outcome="accepted")
        rejected = _sample("lookup_ner_definitions_total", outcome="rejected")

        record_definitions(3, 1)

        assert _sample("lookup_ner_definitions_total", outcome="accepted") == accepted + 3
        assert _sample("lookup_ner_definitions_total", outcome="rejected") == rejected + 1

    def test_record_entity_match(self):
        before = _sample("lookup_ner_entities_recognized_total", match_kind="phrase")
        record_entity_match("phrase")
        assert _sample("lookup_ner_entities_recognized_total", match_kind="phrase") == before + 1

    def test_record_snapshot_import(self):
        before = _sample("lookup_ner_snapshot_imports_total", outcome="invalid_format")
        record_snapshot_import("invalid_format")
        assert _sample("lookup_ner_snapshot_imports_total", outcome="invalid_format") == before + 1

    def test_record_configuration_error(self):
        before = _sample("lookup_ner_configuration_errors_total", field="tagsToIgnore")
        record_configuration_error("tagsToIgnore")
        assert _sample("lookup_ner_configuration_errors_total", field="tagsToIgnore") == before + 1

    def test_timed_operation_observes(self):
        before = _sample("lookup_ner_operation_seconds_count", operation="test_op")
        with timed_operation("test_op"):
            x = 1 + 1  # noqa: F841
        assert _sample("lookup_ner_operation_seconds_count", operation="test_op") == before + 1

    def test_timed_operation_does_not_suppress_exceptions(self):
        with pytest.raises(ValueError, match="test error"):
            with timed_operation("test_op"):
                raise ValueError("test error")

    def test_recognizer_records_matches(self, trained_recognizer, tokenize):
        before = _sample("lookup_ner_entities_recognized_total", match_kind="single_word")
        trained_recognizer.recognize(tokenize("banana and Manchester"))
        assert _sample("lookup_ner_entities_recognized_total", match_kind="single_word") == before + 2
