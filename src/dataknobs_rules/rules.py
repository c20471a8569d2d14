"""Fluent, non-destructive rule set builder.

A ``RuleSet`` only records rules; it never runs them. Every builder call
returns a new rule set of the same class and leaves the receiver untouched,
so partially built sets can be shared and specialized freely::

    base = RuleSet().label("Role")
    admin_only = base.required().in_(["admin"])
    base.get_rule("required")
    # None

Evaluation is done by ``dataknobs_rules.validator.Validator``.
"""

from __future__ import annotations

from collections.abc import Callable
from types import MappingProxyType
from typing import Any, ClassVar

from .exceptions import ArgumentError
from .handlers import BASE_HANDLERS, HandlerTable
from .helpers import clean_object
from .specification import RuleSpecification, to_plain, wrap


class RuleSet:
    """Ordered mapping of rule names to rule specifications.

    The keys ``message`` and ``label`` are reserved: they hold the catch-all
    error message and the display label and are never evaluated as rules.

    Subclasses set ``handlers`` to a ``HandlerTable`` extending
    ``BASE_HANDLERS`` and add builder methods for their own rules.
    """

    handlers: ClassVar[HandlerTable] = BASE_HANDLERS

    def __init__(self, rules: dict[str, RuleSpecification] | None = None):
        self._rules: dict[str, RuleSpecification] = dict(rules or {})

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_dict()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleSet):
            return NotImplemented
        return type(self) is type(other) and self._rules == other._rules

    __hash__ = None  # type: ignore[assignment]

    # Utilities

    def set_rule(
        self, rule_name: str, rule: Any, options: dict[str, Any] | None = None
    ) -> RuleSet:
        """Return a new rule set with ``rule_name`` set to ``rule``.

        An existing rule of the same name is replaced entirely; its options
        are not merged with the new ones.

        Args:
            rule_name: Name of the rule
            rule: Rule argument
            options: Optional ``message`` override and extra options

        Returns:
            New rule set of the same class

        Raises:
            ArgumentError: If rule_name is not a string
        """
        if not isinstance(rule_name, str):
            raise ArgumentError(
                '"rule_name" argument should be a string',
                context={"argument": "rule_name", "received": type(rule_name).__name__},
            )
        rules = dict(self._rules)
        rules[rule_name] = wrap(rule, options)
        return self._derive(rules)

    def get_rule(self, rule_name: str) -> RuleSpecification | None:
        return self._rules.get(rule_name)

    def remove_rule(self, rule_name: str) -> RuleSet:
        """Return a new rule set without ``rule_name``."""
        rules = {name: spec for name, spec in self._rules.items() if name != rule_name}
        return self._derive(rules)

    def to_json(self) -> MappingProxyType[str, RuleSpecification]:
        """Read-only view of the rule map."""
        return MappingProxyType(self._rules)

    def to_dict(self) -> dict[str, Any]:
        """Plain dictionary form of the rules, in insertion order."""
        return {name: to_plain(spec) for name, spec in self._rules.items()}

    def _derive(self, rules: dict[str, RuleSpecification]) -> RuleSet:
        return type(self)(rules)

    # Error customizations

    def message(self, message: str) -> RuleSet:
        """Use a catch-all message that replaces every other error message."""
        if not isinstance(message, str):
            raise ArgumentError(
                '"message" should be a string',
                context={"argument": "message", "received": type(message).__name__},
            )
        return self.set_rule("message", message)

    def label(self, label: str) -> RuleSet:
        """Use ``label`` instead of the humanized field key in errors."""
        if not isinstance(label, str):
            raise ArgumentError(
                '"label" should be a string',
                context={"argument": "label", "received": type(label).__name__},
            )
        return self.set_rule("label", label)

    # Rules

    def custom(self, predicate: Callable[[Any], Any]) -> RuleSet:
        """Add a predicate returning an error message string, or anything else to pass.

        Exceptions raised by the predicate are not caught during validation.
        """
        if not callable(predicate):
            raise ArgumentError(
                '"predicate" must be callable',
                context={"argument": "predicate", "received": type(predicate).__name__},
            )
        return self.set_rule("custom", predicate)

    def required(self, message: str | None = None) -> RuleSet:
        return self.set_rule("required", True, clean_object({"message": message}))

    def optional(self) -> RuleSet:
        """Clear the required rule so empty values pass without further checks."""
        return self.remove_rule("required")

    def in_(self, possible_values: list[Any] | tuple[Any, ...], message: str | None = None) -> RuleSet:
        """Require the value to loosely match one of ``possible_values``.

        Matching tries equality first and then string-coerced equality, so
        ``"2"`` matches when ``2`` is listed.

        Raises:
            ArgumentError: If possible_values is not a list or tuple
        """
        if not isinstance(possible_values, (list, tuple)):
            raise ArgumentError(
                '"possible_values" must be a list or tuple',
                context={
                    "argument": "possible_values",
                    "received": type(possible_values).__name__,
                },
            )
        return self.set_rule("in", list(possible_values), clean_object({"message": message}))
