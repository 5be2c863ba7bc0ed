"""
Name Registry Provider Interface (Port).

Defines the contract the resolver uses to obtain the canonical names for a
Category. The production implementation reads the dictionaries embedded in
the package; tests substitute small synthetic registries.
"""

from typing import Protocol

from domain.models.category import Category
from domain.models.registry import NameRegistry


class NameRegistryProvider(Protocol):
    """
    Abstract interface for loading canonical name registries.

    Implementations must build each registry at most once and hand every
    caller the same fully-built, immutable instance afterwards.
    """

    def load(self, category: Category) -> NameRegistry:
        """
        Get the registry for a category, building it on first use.

        Args:
            category: Which dictionary to load

        Returns:
            The shared NameRegistry for that category
        """
        ...
