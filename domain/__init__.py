"""
Domain layer for poke-search.

This package contains pure domain models that are independent of
infrastructure concerns (embedded dictionaries, command line).
"""

from domain.models import (
    Category,
    Certainty,
    NameRegistry,
    Rejected,
    RejectionReason,
    ResolutionOutcome,
    Resolved,
)

__all__ = [
    "Category",
    "Certainty",
    "NameRegistry",
    "Rejected",
    "RejectionReason",
    "ResolutionOutcome",
    "Resolved",
]
