"""Rule sets for specific value types.

Each type extends ``BASE_HANDLERS`` with a ``type`` handler and handlers for
its own rules, and adds matching builder methods. Evaluation is the same for
all of them; see ``Validator.check``.

Example:
    ```python
    username = StringRules().required().min_length(3).pattern(r"^[a-z0-9_]+$")
    age = NumberRules().integer().min(13).max(120)
    ```
"""

from __future__ import annotations

import re
from numbers import Real
from typing import Any, ClassVar

from .exceptions import ArgumentError
from .handlers import BASE_HANDLERS, HandlerTable
from .helpers import clean_object, is_numeric
from .registry import Registry
from .rules import RuleSet
from .specification import Bare


def _require_number(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ArgumentError(
            f'"{name}" must be a number',
            context={"argument": name, "received": type(value).__name__},
        )


def _require_length(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ArgumentError(
            f'"{name}" must be a non-negative integer',
            context={"argument": name, "received": repr(value)},
        )


# String rules

def check_string_type(value: Any, rule: Any, options: dict[str, Any]) -> str | None:
    return None if isinstance(value, str) else "Must be a string"


def check_min_length(value: str, minimum: int, options: dict[str, Any]) -> str | None:
    return f"Must be at least {minimum} characters" if len(value) < minimum else None


def check_max_length(value: str, maximum: int, options: dict[str, Any]) -> str | None:
    return f"Must be at most {maximum} characters" if len(value) > maximum else None


def check_pattern(value: str, pattern: str, options: dict[str, Any]) -> str | None:
    flags = options.get("flags", 0)
    return None if re.search(pattern, value, flags) else "Does not match required format"


STRING_HANDLERS = BASE_HANDLERS.extend(
    {
        "type": check_string_type,
        "min_length": check_min_length,
        "max_length": check_max_length,
        "pattern": check_pattern,
    },
    name="string",
)


class StringRules(RuleSet):
    """Rules for string values."""

    handlers: ClassVar[HandlerTable] = STRING_HANDLERS

    def __init__(self, rules: dict[str, Any] | None = None):
        super().__init__(rules)
        self._rules.setdefault("type", Bare(True))

    def min_length(self, length: int, message: str | None = None) -> StringRules:
        _require_length("length", length)
        return self.set_rule("min_length", length, clean_object({"message": message}))  # type: ignore[return-value]

    def max_length(self, length: int, message: str | None = None) -> StringRules:
        _require_length("length", length)
        return self.set_rule("max_length", length, clean_object({"message": message}))  # type: ignore[return-value]

    def pattern(self, regex: str, message: str | None = None, flags: int = 0) -> StringRules:
        """Require ``re.search(regex, value, flags)`` to find a match.

        Raises:
            ArgumentError: If regex is not a string or does not compile
        """
        if not isinstance(regex, str):
            raise ArgumentError(
                '"regex" must be a string',
                context={"argument": "regex", "received": type(regex).__name__},
            )
        try:
            re.compile(regex, flags)
        except re.error as e:
            raise ArgumentError(
                f"Invalid pattern {regex!r}: {e}",
                context={"argument": "regex", "received": regex},
            ) from e
        options = clean_object({"message": message, "flags": flags or None})
        return self.set_rule("pattern", regex, options)  # type: ignore[return-value]


# Number rules

def is_number(value: Any) -> bool:
    """True for real numbers (but not booleans) and numeric strings."""
    if isinstance(value, bool):
        return False
    if isinstance(value, Real):
        return True
    return isinstance(value, str) and is_numeric(value.strip())


def check_number_type(value: Any, rule: Any, options: dict[str, Any]) -> str | None:
    return None if is_number(value) else "Must be a number"


def check_min(value: Any, minimum: float, options: dict[str, Any]) -> str | None:
    return f"Must be at least {minimum}" if float(value) < minimum else None


def check_max(value: Any, maximum: float, options: dict[str, Any]) -> str | None:
    return f"Must be at most {maximum}" if float(value) > maximum else None


def check_integer(value: Any, rule: Any, options: dict[str, Any]) -> str | None:
    if rule and not float(value).is_integer():
        return "Must be a whole number"
    return None


NUMBER_HANDLERS = BASE_HANDLERS.extend(
    {
        "type": check_number_type,
        "min": check_min,
        "max": check_max,
        "integer": check_integer,
    },
    name="number",
)


class NumberRules(RuleSet):
    """Rules for numbers and numeric strings."""

    handlers: ClassVar[HandlerTable] = NUMBER_HANDLERS

    def __init__(self, rules: dict[str, Any] | None = None):
        super().__init__(rules)
        self._rules.setdefault("type", Bare(True))

    def min(self, minimum: float, message: str | None = None) -> NumberRules:
        _require_number("minimum", minimum)
        return self.set_rule("min", minimum, clean_object({"message": message}))  # type: ignore[return-value]

    def max(self, maximum: float, message: str | None = None) -> NumberRules:
        _require_number("maximum", maximum)
        return self.set_rule("max", maximum, clean_object({"message": message}))  # type: ignore[return-value]

    def integer(self, message: str | None = None) -> NumberRules:
        return self.set_rule("integer", True, clean_object({"message": message}))  # type: ignore[return-value]


rule_types: Registry[type[RuleSet]] = Registry("rule_types")
rule_types.register("any", RuleSet)
rule_types.register("string", StringRules)
rule_types.register("number", NumberRules)
