"""
Prometheus Metrics — recognizer observability.

Exposes counters and histograms for:
- Entity definitions learned / rejected
- Entities recognized, by match kind (single_word / phrase)
- Snapshot imports, by outcome
- Configuration errors, by offending field
- Operation latency (learn / recognize / import)

Usage
-----
    from lookup_ner.monitoring.metrics import record_entity_match, timed_operation

    with timed_operation("recognize"):
        tokens = recognizer.recognize(tokens)

    record_entity_match("phrase")
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Entity definitions seen by learn(), labelled accepted / rejected.
DEFINITIONS_LEARNED: Counter = Counter(
    "lookup_ner_definitions_total",
    "Entity definitions processed by learn(), by outcome",
    ["outcome"],
)

# Entity tokens emitted by recognize().
ENTITIES_RECOGNIZED: Counter = Counter(
    "lookup_ner_entities_recognized_total",
    "Entity tokens emitted by recognize(), by match kind",
    ["match_kind"],
)

# Snapshot imports, labelled ok or by the failing validation stage.
SNAPSHOT_IMPORTS: Counter = Counter(
    "lookup_ner_snapshot_imports_total",
    "Snapshot import attempts by outcome",
    ["outcome"],
)

# configure() calls rejected, labelled by offending field.
CONFIGURATION_ERRORS: Counter = Counter(
    "lookup_ner_configuration_errors_total",
    "configure() calls rejected by validation",
    ["field"],
)

# Latency per operation (seconds).
OPERATION_LATENCY: Histogram = Histogram(
    "lookup_ner_operation_seconds",
    "Processing time per recognizer operation in seconds",
    ["operation"],
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_definitions(accepted: int, rejected: int) -> None:
    """Add one learn() batch to the definitions counter."""
    if accepted:
        DEFINITIONS_LEARNED.labels(outcome="accepted").inc(accepted)
    if rejected:
        DEFINITIONS_LEARNED.labels(outcome="rejected").inc(rejected)


def record_entity_match(match_kind: str) -> None:
    """Increment the recognized-entities counter for *match_kind*."""
    ENTITIES_RECOGNIZED.labels(match_kind=match_kind).inc()


def record_snapshot_import(outcome: str) -> None:
    """Increment the snapshot import counter for *outcome* ("ok" or a stage name)."""
    SNAPSHOT_IMPORTS.labels(outcome=outcome).inc()


def record_configuration_error(field: str) -> None:
    """Increment the configuration error counter for *field*."""
    CONFIGURATION_ERRORS.labels(field=field).inc()


@contextmanager
def timed_operation(operation: str) -> Generator[None, None, None]:
    """
    Context manager that records operation latency.

    Usage::

        with timed_operation("recognize"):
            tokens = recognizer.recognize(tokens)
    """
    with OPERATION_LATENCY.labels(operation=operation).time():
        yield
