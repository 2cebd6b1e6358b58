"""
Config Store — recognition-time options with validate-before-write semantics.

Holds the three options the matcher reads:
- tagsToIgnore      tags of tokens skipped (but recorded) inside a phrase
- valuesToIgnore    values of tokens skipped (but recorded) inside a phrase
- ignoreDiacritics  normalization mode for definitions and token values
"""
import logging
from collections.abc import Mapping
from typing import Any, List, Optional

from jsonschema import Draft7Validator

from lookup_ner.config.schemas import CONFIGURE_OPTIONS_SCHEMA
from lookup_ner.entity_extraction.normalizer import normalize_phrase, normalize_text
from lookup_ner.models.recognizer_config import RecognizerConfig
from lookup_ner.models.validation import ValidationResult
from lookup_ner.monitoring.metrics import record_configuration_error

logger = logging.getLogger(__name__)

_OPTIONS_VALIDATOR = Draft7Validator(CONFIGURE_OPTIONS_SCHEMA)


class ConfigurationError(ValueError):
    """Raised when `configure()` receives options of the wrong shape."""

    def __init__(self, field: str, value: Any, errors: Optional[List[str]] = None) -> None:
        self.field = field
        self.value = value
        self.errors = errors or []
        super().__init__(f"Invalid configuration for '{field}': {value!r}")


def validate_config_options(options: Any) -> ValidationResult:
    """
    Check `options` against CONFIGURE_OPTIONS_SCHEMA without touching any state.

    Returns:
        ValidationResult whose `location` is the offending field name on failure.
    """
    if not isinstance(options, Mapping):
        return ValidationResult(
            valid=False,
            errors=[f"Options must be an object, got {type(options).__name__}"],
            location="options",
        )

    errors = sorted(
        _OPTIONS_VALIDATOR.iter_errors(dict(options)),
        key=lambda e: [str(p) for p in e.path],
    )
    if errors:
        first = errors[0]
        field = str(first.path[0]) if first.path else "options"
        return ValidationResult(
            valid=False,
            errors=[f"Schema violation at {list(e.path)}: {e.message}" for e in errors],
            location=field,
        )

    return ValidationResult(valid=True)


class ConfigStore:
    """Owns one RecognizerConfig; replaced only through a validated `configure()`."""

    def __init__(self) -> None:
        self.config = RecognizerConfig()

    def configure(self, options: Any) -> dict:
        """
        Validate and apply recognition-time options.

        An empty mapping restores the defaults. Otherwise both ignore lists are replaced
        (an absent one becomes empty) and `ignoreDiacritics` changes only when
        present. Tags outside IGNORABLE_TAGS are
        dropped, never rejected.

        Args:
            options: {"tagsToIgnore": [...], "valuesToIgnore": [...], "ignoreDiacritics": bool}

        Returns:
            The canonical configuration dict.

        Raises:
            ConfigurationError: If `options` is not a mapping or an ignore list is
                not an array of strings. The current configuration is kept.
        """
        result = validate_config_options(options)
        if not result.valid:
            field = result.location
            value = options if field == "options" else options.get(field)
            logger.error("Configuration rejected: %s", result.errors)
            record_configuration_error(field)
            raise ConfigurationError(field, value, result.errors)

        if not options:
            self.reset()
            return self.config.to_dict()

        self.config = RecognizerConfig(
            tags_to_ignore=list(options.get("tagsToIgnore", [])),
            values_to_ignore=list(options.get("valuesToIgnore", [])),
            ignore_diacritics=bool(
                options.get("ignoreDiacritics", self.config.ignore_diacritics)
            ),
        )
        logger.debug("Configuration applied: %s", self.config.to_dict())
        return self.config.to_dict()

    def reset(self) -> None:
        self.config = RecognizerConfig()

    def load(self, config: RecognizerConfig) -> None:
        self.config = config

    def is_ignorable(self, value: str, tag: str) -> bool:
        """True if a token with this value/tag is skipped inside a phrase."""
        return tag in self.config.tags_to_ignore or value in self.config.values_to_ignore

    def is_ignorable_tag(self, tag: str) -> bool:
        return tag in self.config.tags_to_ignore

    def normalize(self, value: str) -> str:
        return normalize_text(value, self.config.ignore_diacritics)

    def normalize_phrase(self, text: str) -> str:
        return normalize_phrase(text, self.config.ignore_diacritics)

    def to_dict(self) -> dict:
        return self.config.to_dict()
