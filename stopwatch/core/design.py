"""Design registry and factory.

Provides discovery and instantiation of design implementations that are
registered globally during module initialization. Design packages call
register_design() in their __init__.py, so importing the package is
enough to make the design available by name.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Type

from stopwatch.core.exceptions import DesignError

if TYPE_CHECKING:
    from stopwatch.interfaces.design import Design


class DesignRegistry:
    """Registry of available design implementations.

    THREAD SAFETY: Not thread-safe. All registration should happen
    during module initialization before any threads are spawned.
    """

    def __init__(self):
        self._designs: dict[str, Type[Design]] = {}

    def register(self, name: str, design_class: Type[Design]) -> None:
        """Register a design implementation."""
        if name in self._designs:
            raise ValueError(f"Design '{name}' already registered")
        self._designs[name] = design_class

    def get(self, name: str) -> Type[Design]:
        """Get a design class by name."""
        if name not in self._designs:
            raise DesignError(name, available=list(self._designs.keys()))
        return self._designs[name]

    def list_designs(self) -> list[str]:
        """List all registered design names."""
        return list(self._designs.keys())

    def create(self, name: str, **kwargs) -> Any:
        """Instantiate a design by name."""
        design_class = self.get(name)
        return design_class(**kwargs)


# Global registry
_REGISTRY = DesignRegistry()


def register_design(name: str, design_class: Type[Design]) -> None:
    """Register a design globally."""
    _REGISTRY.register(name, design_class)


def get_design(name: str) -> Type[Design]:
    """Get a design class by name."""
    return _REGISTRY.get(name)


def create_design(name: str, **kwargs) -> Any:
    """Create a design instance by name."""
    return _REGISTRY.create(name, **kwargs)


def list_available_designs() -> list[str]:
    """List all registered designs."""
    return _REGISTRY.list_designs()


def verify_designs_registered() -> None:
    """Verify that at least one design is registered.

    Raises:
        RuntimeError: If no designs are registered
    """
    if not list_available_designs():
        raise RuntimeError(
            "No designs registered! Ensure design packages are imported. "
            "Example: import stopwatch.designs.stopwatch"
        )
