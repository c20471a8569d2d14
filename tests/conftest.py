"""Shared fixtures for dataknobs_rules tests."""

import pytest

from dataknobs_rules import RuleSet


@pytest.fixture
def empty_values():
    """Values that count as "not provided"."""
    return [None, "", "   ", "\t\n", [], (), {}]


@pytest.fixture
def color_rules():
    """Rule set restricting a value to a few colors."""
    return RuleSet().in_(["red", "green", "blue"])


@pytest.fixture
def predicate_module(tmp_path, monkeypatch):
    """Write an importable module of custom predicates and return its name."""
    module_name = f"rule_checks_{tmp_path.name.replace('-', '_')}"
    (tmp_path / f"{module_name}.py").write_text(
        "def must_be_even(value):\n"
        "    return 'Must be even' if int(value) % 2 else None\n"
        "\n"
        "NOT_CALLABLE = 42\n"
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    return module_name
