"""Tests for the registry and handler tables."""

from threading import Thread

import pytest

from dataknobs_rules.exceptions import NotFoundError, OperationError
from dataknobs_rules.handlers import BASE_HANDLERS, HandlerTable
from dataknobs_rules.registry import Registry


def always_fails(value, rule, options):
    return "failed"


class TestRegistry:
    """Test basic Registry functionality."""

    def test_create_registry(self):
        """Test creating a registry."""
        registry = Registry[str]("test_registry")
        assert registry.name == "test_registry"
        assert registry.count() == 0
        assert len(registry) == 0

    def test_register_item(self):
        """Test registering an item."""
        registry = Registry[str]("test")
        registry.register("key1", "value1")

        assert registry.has("key1")
        assert "key1" in registry
        assert registry.get("key1") == "value1"

    def test_register_duplicate_raises_error(self):
        """Test that registering duplicate key raises error."""
        registry = Registry[str]("test")
        registry.register("key1", "value1")

        with pytest.raises(OperationError) as exc_info:
            registry.register("key1", "value2")

        assert "already registered" in str(exc_info.value)

    def test_register_duplicate_with_overwrite(self):
        """Test overwriting an existing item."""
        registry = Registry[str]("test")
        registry.register("key1", "value1")
        registry.register("key1", "value2", allow_overwrite=True)

        assert registry.get("key1") == "value2"

    def test_get_missing_raises_error(self):
        """Test that a missing key raises NotFoundError with context."""
        registry = Registry[str]("test")
        registry.register("key1", "value1")

        with pytest.raises(NotFoundError) as exc_info:
            registry.get("missing")

        assert exc_info.value.context["available_keys"] == ["key1"]

    def test_get_optional(self):
        """Test optional lookup."""
        registry = Registry[str]("test")
        assert registry.get_optional("missing") is None

    def test_unregister(self):
        """Test unregistering an item."""
        registry = Registry[str]("test")
        registry.register("key1", "value1")

        assert registry.unregister("key1") == "value1"
        assert not registry.has("key1")

        with pytest.raises(NotFoundError):
            registry.unregister("key1")

    def test_list_keys_and_items(self):
        """Test enumeration in registration order."""
        registry = Registry[int]("test")
        registry.register("b", 2)
        registry.register("a", 1)

        assert registry.list_keys() == ["b", "a"]
        assert registry.items() == [("b", 2), ("a", 1)]

    def test_repr(self):
        """Test string representation."""
        registry = Registry[int]("numbers")
        registry.register("one", 1)
        assert repr(registry) == "Registry(name='numbers', items=1)"

    def test_thread_safety(self):
        """Test concurrent registrations."""
        registry = Registry[int]("test")

        def register_items(start):
            for i in range(start, start + 100):
                registry.register(f"key{i}", i)

        threads = [Thread(target=register_items, args=(i * 100,)) for i in range(5)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert registry.count() == 500


class TestHandlerTable:
    """Test handler table composition."""

    def test_base_handlers(self):
        """Test the base handler names."""
        assert BASE_HANDLERS.list_keys() == ["custom", "required", "in"]

    def test_extend_adds_handlers(self):
        """Test that extend returns a new table with extra handlers."""
        table = BASE_HANDLERS.extend({"fails": always_fails}, name="failing")

        assert table is not BASE_HANDLERS
        assert table.name == "failing"
        assert table.list_keys() == ["custom", "required", "in", "fails"]
        assert not BASE_HANDLERS.has("fails")

    def test_extend_overrides_handlers(self):
        """Test that extend can replace a base handler without touching the base."""
        original = BASE_HANDLERS.get("in")
        table = BASE_HANDLERS.extend({"in": always_fails})

        assert table.get("in") is always_fails
        assert table.name == "any"
        assert BASE_HANDLERS.get("in") is original

    def test_construct_from_mapping(self):
        """Test building a table directly."""
        table = HandlerTable("custom_table", {"fails": always_fails})
        assert table.get("fails") is always_fails
        assert table.count() == 1
