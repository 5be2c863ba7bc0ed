"""
Fake Implementations for Testing.

This package provides in-memory fake implementations of the application
ports for fast, isolated testing. No embedded dictionaries required.

Usage:
    from tests.fakes import FakeNameRegistryProvider, create_registry_provider

    # Direct instantiation
    provider = FakeNameRegistryProvider({Category.TYPE: ["fire", "water"]})

    # Factory function with a small registry for every category
    provider = create_registry_provider()
"""
from typing import Dict, Iterable, Optional

from domain.models.category import Category
from tests.fakes.name_registry import FakeNameRegistryProvider

# Small but realistic slices of the shipped dictionaries
SAMPLE_NAMES: Dict[Category, tuple] = {
    Category.POKEMON: ("bulbasaur", "charizard", "charmander", "klefki", "lapras", "mr-mime", "pikachu"),
    Category.MOVE: ("fire-blast", "flamethrower", "kinesis", "psychic", "surf", "thunderbolt"),
    Category.ABILITY: ("blaze", "overgrow", "solar-power", "static", "torrent"),
    Category.ITEM: ("master-ball", "potion", "rare-candy", "tm01"),
    Category.TYPE: ("bug", "dragon", "fire", "flying", "psychic", "steel", "water"),
    Category.GENERATION: (
        "generation-i", "generation-ii", "generation-iii", "generation-iv", "generation-v",
        "generation-vi", "generation-vii", "generation-viii", "generation-ix",
    ),
    Category.MOVE_DAMAGE_CLASS: ("physical", "special", "status"),
}


def create_registry_provider(
    overrides: Optional[Dict[Category, Iterable[str]]] = None,
) -> FakeNameRegistryProvider:
    """
    Create a fake provider seeded with SAMPLE_NAMES.

    Args:
        overrides: Categories whose names should replace the sample names
    """
    registries: Dict[Category, Iterable[str]] = dict(SAMPLE_NAMES)
    registries.update(overrides or {})
    return FakeNameRegistryProvider(registries)


__all__ = [
    "FakeNameRegistryProvider",
    "SAMPLE_NAMES",
    "create_registry_provider",
]
