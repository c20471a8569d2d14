"""Exception hierarchy for dataknobs_rules.

Two kinds of failure are kept apart in this package:

- Programmer errors made while assembling a rule set (a non-string rule name,
  a non-list ``in_`` argument, an unloadable config file). These are raised
  as exceptions from this module and are never recoverable at runtime.
- Validation failures of user data. These are *returned* by
  ``Validator.check`` as ``ValidationError`` records (see ``result``) and are
  never raised.

Example:
    ```python
    from dataknobs_rules.exceptions import ArgumentError, RulesError

    try:
        RuleSet().in_("abc")
    except ArgumentError as e:
        print(e, e.context)
        # "possible_values" must be a list or tuple {'argument': ...}
    ```
"""

from typing import Any, Dict


class RulesError(Exception):
    """Base exception for all dataknobs_rules errors.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context (argument names, types, etc.)
        details: Alternative to context (both are supported for compatibility)

    Example:
        ```python
        error = RulesError(
            "Rule set could not be built",
            context={"field": "email"}
        )
        str(error)
        # 'Rule set could not be built'
        error.context
        # {'field': 'email'}
        ```
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        """Initialize the exception with optional context.

        Args:
            message: Error message
            context: Optional context dictionary
            details: Optional details dictionary (takes precedence over context)
        """
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context


class ArgumentError(RulesError):
    """Raised when a builder method receives a malformed argument.

    Example:
        ```python
        raise ArgumentError(
            '"rule_name" argument should be a string',
            context={"argument": "rule_name", "received": "int"}
        )
        ```
    """

    pass


class ConfigurationError(RulesError):
    """Raised when a rule configuration is invalid or cannot be loaded.

    Common scenarios include:
    - Unknown rule type names
    - Unsupported or missing configuration files
    - ``custom`` import paths that cannot be resolved
    """

    pass


class NotFoundError(RulesError):
    """Raised when a requested item is not registered."""

    pass


class OperationError(RulesError):
    """Raised when a registry operation fails, e.g. a duplicate registration."""

    pass


__all__ = [
    "RulesError",
    "ArgumentError",
    "ConfigurationError",
    "NotFoundError",
    "OperationError",
]
