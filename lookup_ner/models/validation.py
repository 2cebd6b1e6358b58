"""
ValidationResult — outcome of checking caller input before any state changes.
"""
from dataclasses import dataclass, field
from typing import Any, List, Optional, Union


@dataclass
class ValidationResult:
    """
    Result of validating configure options or an imported snapshot.

    `location` names what failed: an option name for configure(), an element
    index for snapshots. `payload` carries the converted input on success.
    """

    valid: bool
    errors: List[str] = field(default_factory=list)
    location: Optional[Union[str, int]] = None
    payload: Optional[Any] = None

    @classmethod
    def failure(cls, location: Union[str, int], errors: List[str]) -> "ValidationResult":
        return cls(valid=False, errors=errors, location=location)
