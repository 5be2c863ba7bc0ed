"""
Domain models for poke-search.

These models represent the core concepts of name resolution:
- Category: Which kind of name is being resolved (pokemon, move, ...)
- NameRegistry: The sorted, immutable list of canonical names for a category
- Resolved / Rejected: The two possible outcomes of resolving a user query

Usage:
    >>> from domain.models import Category, NameRegistry, Resolved

    >>> registry = NameRegistry(Category.TYPE, ["water", "fire"])
    >>> registry.contains("fire")
    True

    >>> outcome = Resolved(category=Category.TYPE, query="fire", canonical_name="fire")
    >>> outcome.is_resolved
    True
"""

from domain.models.category import Category
from domain.models.name_resolution import (
    Certainty,
    Rejected,
    RejectionReason,
    ResolutionOutcome,
    Resolved,
)
from domain.models.registry import NameRegistry

__all__ = [
    # Value objects
    "Category",
    "NameRegistry",
    # Outcomes
    "Resolved",
    "Rejected",
    "ResolutionOutcome",
    # Enums
    "Certainty",
    "RejectionReason",
]
