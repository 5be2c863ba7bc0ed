"""
Infrastructure Layer for poke-search.

This package contains concrete implementations of the application ports:
- registry/: Canonical name registries read from the embedded dictionaries
- dictionaries/: The YAML name dictionaries themselves
"""

from infrastructure.registry import EmbeddedNameRegistry

__all__ = [
    "EmbeddedNameRegistry",
]
