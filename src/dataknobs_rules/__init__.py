"""DataKnobs Rules package.

Composable, declarative value validation:

- **RuleSet**: Immutable fluent builder of named rules
- **Validator**: Evaluates a value against a finished rule set
- **ValidationError**: Aggregated error record returned (not raised) on failure
- **Typed rules**: ``StringRules`` and ``NumberRules`` extend the base handlers
- **Factories**: Build rule sets from YAML/JSON configuration

Example:
    ```python
    from dataknobs_rules import RuleSet, Validator

    validator = Validator(RuleSet().required().in_(["red", "green"]))
    validator.check("favoriteColor", "blue")
    # ValidationError(label='Favorite Color', value='blue',
    #                 errors=['Does not match possible values'])
    ```
"""

from dataknobs_rules.exceptions import (
    ArgumentError,
    ConfigurationError,
    NotFoundError,
    OperationError,
    RulesError,
)
from dataknobs_rules.factory import (
    FactoryBase,
    RuleSetFactory,
    load_rule_sets,
    load_validators,
    rule_set_factory,
)
from dataknobs_rules.handlers import BASE_HANDLERS, HandlerTable, RuleHandler
from dataknobs_rules.helpers import camel_to_label, clean_object, is_empty, is_numeric
from dataknobs_rules.registry import Registry
from dataknobs_rules.result import ValidationError
from dataknobs_rules.rules import RuleSet
from dataknobs_rules.specification import Bare, RuleSpecification, WithOptions, resolve
from dataknobs_rules.value_types import (
    NUMBER_HANDLERS,
    STRING_HANDLERS,
    NumberRules,
    StringRules,
    rule_types,
)
from dataknobs_rules.validator import Validator

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Builder and evaluator
    "RuleSet",
    "Validator",
    "ValidationError",
    # Typed rules
    "StringRules",
    "NumberRules",
    "rule_types",
    # Rule specifications
    "Bare",
    "WithOptions",
    "RuleSpecification",
    "resolve",
    # Handlers
    "HandlerTable",
    "RuleHandler",
    "BASE_HANDLERS",
    "STRING_HANDLERS",
    "NUMBER_HANDLERS",
    "Registry",
    # Helpers
    "camel_to_label",
    "clean_object",
    "is_empty",
    "is_numeric",
    # Configuration
    "FactoryBase",
    "RuleSetFactory",
    "rule_set_factory",
    "load_rule_sets",
    "load_validators",
    # Exceptions
    "RulesError",
    "ArgumentError",
    "ConfigurationError",
    "NotFoundError",
    "OperationError",
]
