"""Evaluate values against a finished rule set."""

from __future__ import annotations

import logging
from typing import Any

from .handlers import HandlerTable
from .helpers import camel_to_label, is_empty
from .result import ValidationError
from .rules import RuleSet
from .specification import resolve, unwrap

logger = logging.getLogger(__name__)

# Rules evaluated ahead of the rest, each one short-circuiting on failure
_PRIORITY_RULES = ("required", "type")


class Validator:
    """Checks values against the rules of one ``RuleSet``.

    The rule map is copied at construction time and never modified, and all
    per-check state is local to ``check``, so one instance can be reused for
    any number of values and from several threads.

    Example:
        ```python
        validator = Validator(RuleSet().required().in_([1, 2, 3]))
        validator.check("count", "2")
        # None
        validator.check("count", 5)
        # ValidationError(label='Count', value=5, errors=['Does not match possible values'])
        ```
    """

    def __init__(self, rule_set: RuleSet, handlers: HandlerTable | None = None):
        """Initialize the validator.

        Args:
            rule_set: Finished rule set to evaluate
            handlers: Handler table to dispatch to (defaults to the rule set's)
        """
        self.rules = dict(rule_set.to_json())
        self.handlers = handlers if handlers is not None else rule_set.handlers

    def check(self, key: str, value: Any) -> ValidationError | None:
        """Validate ``value`` for the field named ``key``.

        Order of evaluation:

        1. ``required``: a failure is returned immediately.
        2. An empty value that is not required is valid; nothing else runs.
        3. ``type``: a failure is returned immediately.
        4. Every other rule, in rule set order, collecting all failures.

        Args:
            key: Field key, used to derive the default label
            value: Value to validate

        Returns:
            None if the value is valid, otherwise a ValidationError
        """
        required_error = self.check_rule(value, "required")
        if required_error:
            logger.debug(f"'{key}' failed required check")
            return self.format_error(key, value, required_error)

        if is_empty(value):
            return None

        type_error = self.check_rule(value, "type")
        if type_error:
            logger.debug(f"'{key}' failed type check, skipping remaining rules")
            return self.format_error(key, value, type_error)

        errors = []
        for rule_name in self.rules:
            if rule_name in _PRIORITY_RULES:
                continue
            error = self.check_rule(value, rule_name)
            if error:
                errors.append(error)

        if errors:
            return self.format_error(key, value, errors)
        return None

    def check_rule(self, value: Any, rule_name: str) -> str | None:
        """Evaluate a single rule.

        Returns:
            The rule's override message or the handler's message on failure,
            None when the rule passes, is not set, or has no handler
        """
        spec = self.rules.get(rule_name)
        if spec is None:
            return None

        handler = self.handlers.get_optional(rule_name)
        if handler is None:
            if rule_name not in ("message", "label"):
                logger.debug(f"No handler for rule '{rule_name}' in {self.handlers.name}, skipping")
            return None

        rule, message, options = resolve(spec)
        error = handler(value, rule, options)
        return (message or error) if error else None

    def format_error(self, key: str, value: Any, errors: str | list[str]) -> ValidationError:
        if isinstance(errors, str):
            errors = [errors]
        catch_all = unwrap(self.rules.get("message"))
        return ValidationError(
            label=unwrap(self.rules.get("label")) or camel_to_label(key),
            value=value,
            errors=[catch_all] if catch_all else errors,
        )
