"""Canonical name registry providers."""

from infrastructure.registry.embedded_name_registry import (
    DEFAULT_DICTIONARIES_DIR,
    EmbeddedNameRegistry,
)

__all__ = [
    "DEFAULT_DICTIONARIES_DIR",
    "EmbeddedNameRegistry",
]
