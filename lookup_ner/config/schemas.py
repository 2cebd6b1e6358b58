"""
JSON Schemas for recognizer inputs.

Three schemas:
1. CONFIGURE_OPTIONS_SCHEMA  — options accepted by `configure()`
2. ENTITY_DEFINITION_SCHEMA  — shape of a learnable entity definition
3. SNAPSHOT_ELEMENT_SCHEMAS  — per-slot shape of an exported snapshot
"""
from typing import List

_STRING_ARRAY: dict = {
    "type": "array",
    "items": {"type": "string"},
}

# =============================================================================
# 1. configure() options
# =============================================================================
CONFIGURE_OPTIONS_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "tagsToIgnore": {
            **_STRING_ARRAY,
            "description": "Token tags skipped (but recorded) inside multi-word entities",
        },
        "valuesToIgnore": {
            **_STRING_ARRAY,
            "description": "Token values skipped (but recorded) inside multi-word entities",
        },
        "ignoreDiacritics": {
            "description": "Strip diacritics while normalizing; any value, coerced to bool",
        },
    },
}


# =============================================================================
# 2. Entity definition (input to learn())
# =============================================================================
ENTITY_DEFINITION_SCHEMA: dict = {
    "type": "object",
    "required": ["text", "entityType"],
    "properties": {
        "text": {
            "type": "string",
            # At least one non-whitespace character.
            "pattern": r"\S",
        },
        "entityType": {
            "not": {"type": "null"},
        },
    },
}


# =============================================================================
# 3. Snapshot elements
# =============================================================================
_MAP_ELEMENT: dict = {"type": "object"}
_LIST_ELEMENT: dict = {"type": "array"}

# Slots 0-3: config, head index, phrase index, reserved map.
# Slots 4-5: reserved lists.
SNAPSHOT_ELEMENT_SCHEMAS: List[dict] = [
    _MAP_ELEMENT,
    {"type": "object", "additionalProperties": {"type": "object"}},
    {"type": "object", "additionalProperties": {"type": "object"}},
    _MAP_ELEMENT,
    _LIST_ELEMENT,
    _LIST_ELEMENT,
]
