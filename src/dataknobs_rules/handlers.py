"""Rule handler tables.

A handler evaluates one named rule against a value::

    handler(value, rule, options) -> str | None

It returns an error message when the rule fails and a falsy value when it
passes. A ``HandlerTable`` maps rule names to handlers. Rule types share the
same evaluation algorithm in ``Validator`` and differ only in their tables:
a specialized type starts from ``BASE_HANDLERS`` and extends it.

Example:
    ```python
    def even(value, rule, options):
        return "Must be even" if rule and value % 2 else None

    EVEN_HANDLERS = BASE_HANDLERS.extend({"even": even}, name="even")
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from .helpers import is_empty, loose_str
from .registry import Registry

RuleHandler = Callable[[Any, Any, dict[str, Any]], str | None]


class HandlerTable(Registry[RuleHandler]):
    """Registry of rule handlers keyed by rule name."""

    def __init__(self, name: str, handlers: Mapping[str, RuleHandler] | None = None):
        super().__init__(name)
        for rule_name, handler in (handlers or {}).items():
            self.register(rule_name, handler)

    def extend(
        self, handlers: Mapping[str, RuleHandler], name: str | None = None
    ) -> HandlerTable:
        """Create a new table holding this table's handlers plus ``handlers``.

        Entries in ``handlers`` replace same-named entries of this table.
        This table is left untouched.

        Args:
            handlers: Additional handlers keyed by rule name
            name: Name of the new table (defaults to this table's name)

        Returns:
            New HandlerTable
        """
        table = HandlerTable(name or self.name, dict(self.items()))
        for rule_name, handler in handlers.items():
            table.register(rule_name, handler, allow_overwrite=True)
        return table


def check_custom(value: Any, predicate: Callable[[Any], Any], options: dict[str, Any]) -> str | None:
    """Run a caller supplied predicate; a string result is the error message."""
    error = predicate(value)
    return error if isinstance(error, str) else None


def check_required(value: Any, required: Any, options: dict[str, Any]) -> str | None:
    return "Is required" if required and is_empty(value) else None


def _strict_equal(left: Any, right: Any) -> bool:
    return type(left) is type(right) and left == right


def check_in(value: Any, possible: list[Any] | tuple[Any, ...], options: dict[str, Any]) -> str | None:
    """Loose membership: strict equality first, then string-coerced equality.

    The strict step requires matching types, so ``True`` never equals ``1``.
    """
    for item in possible:
        if _strict_equal(item, value) or loose_str(item) == loose_str(value):
            return None
    return "Does not match possible values"


BASE_HANDLERS = HandlerTable(
    "any",
    {
        "custom": check_custom,
        "required": check_required,
        "in": check_in,
    },
)
