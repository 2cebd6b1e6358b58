"""
Snapshot Codec — export/import of learned entities and configuration.

Format (JSON array, always 6 elements):
    [config, headIndex, phraseIndex, {}, [], []]

The last three slots are reserved and always empty.

Import is staged; the first failing stage raises SnapshotError:
    1. missing_data       nothing to import
    2. invalid_structure  not a JSON string
    3. invalid_format     not an array of 6 elements
    4. invalid_element    an element has the wrong type or content
"""
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from jsonschema import Draft7Validator
from pydantic import ValidationError

from lookup_ner.config.constants import (
    SNAPSHOT_CONFIG_INDEX,
    SNAPSHOT_ELEMENT_COUNT,
    SNAPSHOT_HEAD_INDEX,
    SNAPSHOT_PHRASE_INDEX,
)
from lookup_ner.config.schemas import SNAPSHOT_ELEMENT_SCHEMAS
from lookup_ner.config.settings import SNAPSHOT_INDENT
from lookup_ner.entity_extraction.config_store import ConfigStore
from lookup_ner.entity_extraction.dictionary import EntityDictionary
from lookup_ner.models.entity import DictionaryEntry
from lookup_ner.models.recognizer_config import RecognizerConfig
from lookup_ner.models.validation import ValidationResult
from lookup_ner.monitoring.metrics import record_snapshot_import

logger = logging.getLogger(__name__)

MISSING_DATA = "missing_data"
INVALID_STRUCTURE = "invalid_structure"
INVALID_FORMAT = "invalid_format"
INVALID_ELEMENT = "invalid_element"

_ELEMENT_VALIDATORS = [Draft7Validator(schema) for schema in SNAPSHOT_ELEMENT_SCHEMAS]


class SnapshotError(ValueError):
    """Raised when a snapshot can not be imported. State is left untouched."""

    def __init__(self, stage: str, message: str, element_index: Optional[int] = None) -> None:
        self.stage = stage
        self.element_index = element_index
        super().__init__(f"Snapshot import failed ({stage}): {message}")


@dataclass
class SnapshotPayload:
    """A fully validated snapshot, ready to replace the recognizer state."""

    config: RecognizerConfig
    head_index: Dict[str, DictionaryEntry]
    phrase_index: Dict[str, DictionaryEntry]


# ======================================================================
# Export
# ======================================================================

def export_snapshot(config: ConfigStore, dictionary: EntityDictionary) -> str:
    """
    Serialize configuration and both indexes.

    Non-JSON extra fields are written with `str()`.
    """
    payload = [
        config.to_dict(),
        {word: entry.to_dict() for word, entry in dictionary.head_index.items()},
        {phrase: entry.to_dict() for phrase, entry in dictionary.phrase_index.items()},
        {},
        [],
        [],
    ]
    return json.dumps(payload, ensure_ascii=False, default=str, indent=SNAPSHOT_INDENT)


# ======================================================================
# Import
# ======================================================================

def _parse(data: Any) -> list:
    """Stages 1-3: presence, JSON structure, arity."""
    if data is None or (isinstance(data, (str, bytes)) and not data):
        raise SnapshotError(MISSING_DATA, "no snapshot data given")

    if not isinstance(data, (str, bytes, bytearray)):
        raise SnapshotError(
            INVALID_STRUCTURE,
            f"expected a JSON string, got {type(data).__name__}",
        )

    try:
        parsed = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SnapshotError(INVALID_STRUCTURE, f"invalid JSON: {e}") from e

    if not isinstance(parsed, list):
        raise SnapshotError(
            INVALID_FORMAT,
            f"expected an array of {SNAPSHOT_ELEMENT_COUNT} elements, got {type(parsed).__name__}",
        )
    if len(parsed) != SNAPSHOT_ELEMENT_COUNT:
        raise SnapshotError(
            INVALID_FORMAT,
            f"expected an array of {SNAPSHOT_ELEMENT_COUNT} elements, got {len(parsed)}",
        )
    return parsed


def _validate_elements(parsed: list) -> ValidationResult:
    """Stage 4: per-slot schema check, then conversion into typed state."""
    for index, (element, validator) in enumerate(zip(parsed, _ELEMENT_VALIDATORS)):
        errors = [e.message for e in validator.iter_errors(element)]
        if errors:
            return ValidationResult.failure(index, errors)

    try:
        config = RecognizerConfig.model_validate(parsed[SNAPSHOT_CONFIG_INDEX])
    except ValidationError as e:
        return ValidationResult.failure(SNAPSHOT_CONFIG_INDEX, [str(e)])

    indexes = []
    for index in (SNAPSHOT_HEAD_INDEX, SNAPSHOT_PHRASE_INDEX):
        try:
            indexes.append(
                {key: DictionaryEntry.from_dict(entry) for key, entry in parsed[index].items()}
            )
        except ValueError as e:
            return ValidationResult.failure(index, [str(e)])

    return ValidationResult(
        valid=True,
        payload=SnapshotPayload(config=config, head_index=indexes[0], phrase_index=indexes[1]),
    )


def import_snapshot(data: Any) -> SnapshotPayload:
    """
    Validate a snapshot produced by `export_snapshot()`.

    Nothing is applied here; the caller swaps in the returned payload, so a
    failure at any stage leaves the current state as it was.

    Args:
        data: JSON text of the 6-element snapshot array.

    Returns:
        SnapshotPayload with the parsed configuration and indexes.

    Raises:
        SnapshotError: At the first failing validation stage.
    """
    try:
        parsed = _parse(data)
        result = _validate_elements(parsed)
        if not result.valid:
            raise SnapshotError(
                INVALID_ELEMENT,
                f"element {result.location} is invalid: {result.errors}",
                element_index=result.location,
            )
    except SnapshotError as e:
        logger.error("%s", e)
        record_snapshot_import(e.stage)
        raise

    record_snapshot_import("ok")
    return result.payload
