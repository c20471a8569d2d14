"""Generic registry for managing named items.

Used for rule handler tables and for the table of named rule types.

Example:
    ```python
    from dataknobs_rules.registry import Registry

    registry = Registry[type]("rule_types")
    registry.register("string", StringRules)
    registry.get("string")
    # <class 'dataknobs_rules.value_types.StringRules'>
    ```
"""

import threading
from typing import Dict, Generic, List, TypeVar

from dataknobs_rules.exceptions import NotFoundError, OperationError

T = TypeVar("T")


class Registry(Generic[T]):
    """Thread-safe registry of items keyed by name.

    Attributes:
        name: Name of the registry (for logging/debugging)

    Args:
        name: Name for this registry instance
    """

    def __init__(self, name: str):
        """Initialize the registry.

        Args:
            name: Registry name for identification
        """
        self._name = name
        self._items: Dict[str, T] = {}
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        """Get registry name."""
        return self._name

    def register(self, key: str, item: T, allow_overwrite: bool = False) -> None:
        """Register an item by key.

        Args:
            key: Unique identifier for the item
            item: Item to register
            allow_overwrite: Whether to allow overwriting existing items

        Raises:
            OperationError: If item already exists and allow_overwrite is False
        """
        with self._lock:
            if not allow_overwrite and key in self._items:
                raise OperationError(
                    f"Item '{key}' already registered in {self._name}",
                    context={"key": key, "registry": self._name},
                )
            self._items[key] = item

    def unregister(self, key: str) -> T:
        """Unregister and return an item by key.

        Raises:
            NotFoundError: If item not found
        """
        with self._lock:
            if key not in self._items:
                raise NotFoundError(
                    f"Item not found: {key}",
                    context={"key": key, "registry": self._name},
                )
            return self._items.pop(key)

    def get(self, key: str) -> T:
        """Get an item by key.

        Raises:
            NotFoundError: If item not found
        """
        with self._lock:
            if key not in self._items:
                raise NotFoundError(
                    f"Item not found: {key}",
                    context={
                        "key": key,
                        "registry": self._name,
                        "available_keys": list(self._items.keys()),
                    },
                )
            return self._items[key]

    def get_optional(self, key: str) -> T | None:
        """Get an item by key, returning None if not found."""
        with self._lock:
            return self._items.get(key)

    def has(self, key: str) -> bool:
        """Check if item exists."""
        with self._lock:
            return key in self._items

    def list_keys(self) -> List[str]:
        """List all registered keys in registration order."""
        with self._lock:
            return list(self._items.keys())

    def items(self) -> List[tuple[str, T]]:
        """Get all key-item pairs."""
        with self._lock:
            return list(self._items.items())

    def count(self) -> int:
        """Get count of registered items."""
        with self._lock:
            return len(self._items)

    def __contains__(self, key: str) -> bool:
        """Support 'in' operator."""
        return self.has(key)

    def __len__(self) -> int:
        """Get number of items."""
        return self.count()

    def __repr__(self) -> str:
        """String representation."""
        return f"{self.__class__.__name__}(name='{self._name}', items={self.count()})"
