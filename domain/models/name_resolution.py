"""
Outcome value objects for name resolution.

Every command resolves the user's input before it does anything else. The
resolver answers with exactly one of two outcomes:

- Resolved: the input was canonical already, or a confident fuzzy match
  replaced it. The caller carries on with ``canonical_name``.
- Rejected: nothing matched, or the best match was not confident enough.
  The caller prints ``message`` verbatim and stops.

Usage:
    >>> outcome = resolver.resolve(Category.POKEMON, "charzard")
    >>> if outcome.is_resolved:
    ...     fetch_pokemon(outcome.canonical_name)
    ... else:
    ...     print(outcome.message)
"""

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from domain.models.category import Category


class Certainty(str, Enum):
    """Confidence tier of a fuzzy match once one has been found."""

    CERTAIN = "certain"
    UNCERTAIN = "uncertain"


class RejectionReason(str, Enum):
    """Why a query was rejected."""

    NOT_FOUND = "not_found"
    LOW_CONFIDENCE = "low_confidence"


class Resolved(BaseModel):
    """A query that maps onto a canonical name."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["resolved"] = "resolved"
    category: Category
    query: str = Field(..., description="Normalized query as received")
    canonical_name: str = Field(..., min_length=1)
    corrected: bool = Field(
        default=False,
        description="True when the name came from a fuzzy match rather than an exact hit",
    )
    score: float = Field(default=1.0, ge=0.0, le=1.0)

    @property
    def is_resolved(self) -> bool:
        return True


class Rejected(BaseModel):
    """A query the caller must not proceed with."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["rejected"] = "rejected"
    category: Category
    query: str
    message: str = Field(..., description="User-facing text, printed verbatim")
    reason: RejectionReason
    suggestion: Optional[str] = None
    score: Optional[float] = Field(default=None, ge=0.0, le=1.0)

    @property
    def is_resolved(self) -> bool:
        return False


ResolutionOutcome = Union[Resolved, Rejected]
