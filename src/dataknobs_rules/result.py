"""Validation error record returned by ``Validator.check``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ValidationError:
    """Aggregated validation failure for one checked value.

    This is returned as data, not raised, so callers can check many fields
    and collect independent records without interrupting control flow.

    Attributes:
        label: Display name of the field (explicit label or humanized key)
        value: The value that failed validation
        errors: Error messages in rule evaluation order, or the single
            catch-all message when one is set
    """

    label: str
    value: Any
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary."""
        return {"label": self.label, "value": self.value, "errors": list(self.errors)}

    def __str__(self) -> str:
        return f"{self.label}: {'; '.join(self.errors)}"
