"""Stored forms of a single rule.

A rule is stored either as a bare argument (``True``, a list, a callable) or
wrapped together with an override message and extra named options. The two
shapes are distinct types so a bare argument that happens to be a mapping
with a ``"rule"`` key is never mistaken for a wrapped one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class Bare:
    """A rule argument stored verbatim."""

    value: Any


@dataclass(frozen=True)
class WithOptions:
    """A rule argument stored with an override message and extra options."""

    rule: Any
    message: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Flatten into ``{**extra, "message": ..., "rule": ...}``.

        The message key is omitted when no override message was given.
        """
        data = dict(self.extra)
        if self.message is not None:
            data["message"] = self.message
        data["rule"] = self.rule
        return data


RuleSpecification = Union[Bare, WithOptions]


def wrap(rule: Any, options: dict[str, Any] | None = None) -> RuleSpecification:
    """Build the stored specification for a rule argument.

    Args:
        rule: Rule argument
        options: Optional ``message`` and extra named options

    Returns:
        ``Bare`` when there are no options, ``WithOptions`` otherwise
    """
    if not options:
        return Bare(rule)
    extra = dict(options)
    message = extra.pop("message", None)
    return WithOptions(rule=rule, message=message, extra=extra)


def resolve(spec: RuleSpecification) -> tuple[Any, str | None, dict[str, Any]]:
    """Split a specification into ``(rule, message, options)``."""
    if isinstance(spec, WithOptions):
        return spec.rule, spec.message, dict(spec.extra)
    return spec.value, None, {}


def unwrap(spec: RuleSpecification | None) -> Any:
    """Return the plain rule argument of a specification, or None."""
    if spec is None:
        return None
    return resolve(spec)[0]


def to_plain(spec: RuleSpecification) -> Any:
    """Plain data form of a specification, as used by ``RuleSet.to_dict``."""
    if isinstance(spec, WithOptions):
        return spec.to_dict()
    return spec.value
