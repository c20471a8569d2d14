"""Build rule sets and validators from configuration.

Configuration Options (per field):
    type (str): Rule type, one of the names in ``rule_types`` (default: any)
    label (str): Display label
    message (str): Catch-all message
    required (bool | str | dict): ``true``, a message string, or
        ``{message: ...}``; ``false`` leaves the field optional
    custom (str | callable | dict): Dotted import path of a predicate
    <rule> (any): Any other rule, either a bare argument or a mapping with a
        ``rule`` key plus ``message`` and extra options

Example Configuration:
    fields:
      username:
        type: string
        required: Please choose a username
        min_length: 3
        pattern:
          rule: "^[a-z0-9_]+$"
          message: Only lowercase letters, digits and underscores
      role:
        in: [admin, editor, viewer]
      age:
        type: number
        integer: true
        min: 13
"""

from __future__ import annotations

import importlib
import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any, Union

import yaml  # type: ignore[import-untyped]

from .exceptions import ConfigurationError, NotFoundError
from .rules import RuleSet
from .value_types import rule_types
from .validator import Validator

logger = logging.getLogger(__name__)

ConfigSource = Union[str, Path, Mapping[str, Any]]

# Rules whose builders take an optional message instead of a rule argument
_FLAG_RULES = ("required", "integer")


class FactoryBase(ABC):
    """Base class for factories that build rule objects from one field's config.

    ``create_all`` applies ``create`` to every entry of a ``fields`` section.
    """

    @abstractmethod
    def create(self, **config: Any) -> Any:
        """Build one object from a field configuration."""

    def create_all(self, fields: Mapping[str, Mapping[str, Any] | None]) -> dict[str, Any]:
        """Build one object per field, in configuration order.

        A field configured as ``None`` gets an empty configuration.

        Raises:
            ConfigurationError: If a field configuration is not a mapping
        """
        created = {}
        for field_name, field_config in fields.items():
            if field_config is None:
                field_config = {}
            if not isinstance(field_config, Mapping):
                raise ConfigurationError(
                    f"Field '{field_name}' configuration must be a mapping",
                    context={"field": field_name, "received": type(field_config).__name__},
                )
            logger.info(f"Creating rule set for field: {field_name}")
            created[field_name] = self.create(**field_config)
        return created


class RuleSetFactory(FactoryBase):
    """Factory for creating rule sets from a field configuration."""

    def create(self, **config: Any) -> RuleSet:
        """Create a RuleSet from configuration.

        Args:
            **config: Field configuration (see module docstring)

        Returns:
            RuleSet of the configured type

        Raises:
            ConfigurationError: If the type is unknown or a custom predicate
                cannot be loaded
        """
        type_name = config.pop("type", "any")
        try:
            rule_set_cls = rule_types.get(type_name)
        except NotFoundError as e:
            raise ConfigurationError(
                f"Unknown rule type: {type_name}",
                context={"type": type_name, "available_types": rule_types.list_keys()},
            ) from e

        rule_set = rule_set_cls()
        for rule_name, value in config.items():
            rule_set = self._apply_rule(rule_set, rule_name, value)
        return rule_set

    def _apply_rule(self, rule_set: RuleSet, rule_name: str, value: Any) -> RuleSet:
        """Add one configured rule to the rule set."""
        if rule_name == "label":
            return rule_set.label(value)
        if rule_name == "message":
            return rule_set.message(value)
        if rule_name == "optional":
            return rule_set.optional() if value else rule_set

        if rule_name == "custom":
            if isinstance(value, Mapping) and "rule" in value:
                value = {**value, "rule": self._load_callable(value["rule"])}
                return self._set_rule(rule_set, rule_name, value)
            return rule_set.custom(self._load_callable(value))

        if not rule_set.handlers.has(rule_name):
            logger.warning(
                f"No handler for rule '{rule_name}' in {rule_set.handlers.name} rules, "
                "it will not be evaluated"
            )
            return self._set_rule(rule_set, rule_name, value)

        builder = getattr(rule_set, "in_" if rule_name == "in" else rule_name, None)
        if builder is None:
            return self._set_rule(rule_set, rule_name, value)

        if rule_name in _FLAG_RULES:
            if value is False or value is None:
                return rule_set.remove_rule(rule_name)
            if isinstance(value, Mapping):
                return builder(value.get("message"))
            return builder(value if isinstance(value, str) else None)

        if isinstance(value, Mapping) and "rule" in value:
            kwargs = {key: option for key, option in value.items() if key != "rule"}
            try:
                return builder(value["rule"], **kwargs)
            except TypeError as e:
                raise ConfigurationError(
                    f"Invalid options for rule '{rule_name}': {e}",
                    context={"rule": rule_name, "options": sorted(kwargs)},
                ) from e
        return builder(value)

    def _set_rule(self, rule_set: RuleSet, rule_name: str, value: Any) -> RuleSet:
        if isinstance(value, Mapping) and "rule" in value:
            options = {key: option for key, option in value.items() if key != "rule"}
            return rule_set.set_rule(rule_name, value["rule"], options)
        return rule_set.set_rule(rule_name, value)

    def _load_callable(self, target: Any) -> Callable[[Any], Any]:
        """Resolve a predicate given as a callable or a dotted import path.

        Raises:
            ConfigurationError: If the path cannot be imported or is not callable
        """
        if callable(target):
            return target
        if not isinstance(target, str) or "." not in target:
            raise ConfigurationError(
                f"Invalid custom predicate path: {target!r}",
                context={"custom": target},
            )

        module_path, attr_name = target.rsplit(".", 1)
        try:
            module = importlib.import_module(module_path)
        except ImportError as e:
            raise ConfigurationError(
                f"Failed to import {target}: {e}", context={"custom": target}
            ) from e

        predicate = getattr(module, attr_name, None)
        if not callable(predicate):
            raise ConfigurationError(
                f"{attr_name} in {module_path} is missing or not callable",
                context={"custom": target},
            )
        return predicate


def read_config(path: str | Path) -> dict[str, Any]:
    """Read a YAML or JSON configuration file.

    Raises:
        ConfigurationError: If the file is missing, has an unsupported format,
            or does not hold a mapping at the top level
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {path}", context={"path": str(path)}
        )

    suffix = path.suffix.lower()
    with open(path) as f:
        if suffix in [".yaml", ".yml"]:
            data = yaml.safe_load(f)
        elif suffix == ".json":
            data = json.load(f)
        else:
            raise ConfigurationError(
                f"Unsupported file format: {suffix}", context={"path": str(path)}
            )
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigurationError(
            f"Configuration file must hold a mapping: {path}",
            context={"path": str(path), "received": type(data).__name__},
        )
    return dict(data)


def load_rule_sets(source: ConfigSource) -> dict[str, RuleSet]:
    """Build one rule set per configured field.

    Args:
        source: Mapping with a ``fields`` section, or a path to a YAML/JSON
            file holding one

    Returns:
        Rule sets keyed by field name, in configuration order

    Raises:
        ConfigurationError: If the configuration is malformed
    """
    data = source if isinstance(source, Mapping) else read_config(source)
    fields = data.get("fields")
    if not isinstance(fields, Mapping):
        raise ConfigurationError(
            "Configuration must contain a 'fields' mapping",
            context={"keys": list(data.keys())},
        )
    return rule_set_factory.create_all(fields)


def load_validators(source: ConfigSource) -> dict[str, Validator]:
    """Like ``load_rule_sets`` but wraps every rule set in a Validator."""
    return {name: Validator(rule_set) for name, rule_set in load_rule_sets(source).items()}


rule_set_factory = RuleSetFactory()
