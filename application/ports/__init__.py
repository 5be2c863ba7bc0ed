"""
Interfaces (Ports) for poke-search.

This package defines abstract interfaces that decouple the resolution
logic from where canonical names come from. Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the resolver needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import NameRegistryProvider

    class NameLookup:
        def __init__(self, registry_provider: NameRegistryProvider):
            self.registry_provider = registry_provider
"""

# Canonical name registries
from application.ports.name_registry import NameRegistryProvider

__all__ = [
    "NameRegistryProvider",
]
