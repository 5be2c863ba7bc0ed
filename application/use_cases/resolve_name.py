"""
Resolve Name Use Case.

Turns a normalized user query into a ResolutionOutcome for one category:

1. Exact hit in the registry: resolved as-is, no fuzzy search.
2. No candidate clears the pre-filter: rejected, "doesn't exist".
3. Best candidate scores above the auto-accept threshold: resolved to the
   candidate (silent auto-correction).
4. Otherwise: rejected with a "Did you mean" suggestion.

The query is compared verbatim. Lowercasing and hyphen-joining are the
caller's job (see backend.core.normalize.parse_name).
"""
from typing import TYPE_CHECKING

from backend.core.constants import MATCH_AUTO_ACCEPT_THRESHOLD
from backend.core.messages import build_suggested_name, build_unknown_name
from domain.models.category import Category
from domain.models.name_resolution import (
    Certainty,
    Rejected,
    RejectionReason,
    ResolutionOutcome,
    Resolved,
)

if TYPE_CHECKING:
    from application.ports import NameRegistryProvider
    from backend.core.name_matcher import NameMatcher


def classify_certainty(score: float, threshold: float = MATCH_AUTO_ACCEPT_THRESHOLD) -> Certainty:
    """A score is Certain only when strictly greater than the threshold."""
    assert 0.0 <= score <= 1.0, f"score out of range: {score}"
    return Certainty.CERTAIN if score > threshold else Certainty.UNCERTAIN


class ResolveNameUseCase:
    """
    Use case for resolving user-supplied names against canonical registries.

    Holds no mutable state of its own, so one instance can be shared by every
    command for the lifetime of the process.
    """

    def __init__(
        self,
        registry_provider: "NameRegistryProvider",
        matcher: "NameMatcher",
        auto_accept_threshold: float = MATCH_AUTO_ACCEPT_THRESHOLD,
    ):
        """
        Initialize with required dependencies.

        Args:
            registry_provider: Source of canonical names per category
            matcher: Fuzzy matcher used when the exact lookup misses
            auto_accept_threshold: Score a match must exceed to be auto-accepted
        """
        self._registry_provider = registry_provider
        self._matcher = matcher
        self._auto_accept_threshold = auto_accept_threshold

    @property
    def auto_accept_threshold(self) -> float:
        return self._auto_accept_threshold

    def is_valid(self, category: Category, name: str) -> bool:
        """True if ``name`` is already a canonical identifier in the category."""
        return self._registry_provider.load(category).contains(name)

    def execute(self, category: Category, query: str) -> ResolutionOutcome:
        """
        Resolve a normalized query.

        Args:
            category: Which registry to resolve against
            query: Lowercase, hyphen-joined user input

        Returns:
            Resolved with the canonical name, or Rejected with a message
        """
        keyword = category.keyword

        if not query:
            return Rejected(
                category=category,
                query=query,
                message=build_unknown_name(keyword, query),
                reason=RejectionReason.NOT_FOUND,
            )

        if self.is_valid(category, query):
            return Resolved(category=category, query=query, canonical_name=query)

        match = self._matcher.find_best(category, query)
        if match is None:
            return Rejected(
                category=category,
                query=query,
                message=build_unknown_name(keyword, query),
                reason=RejectionReason.NOT_FOUND,
            )

        if classify_certainty(match.score, self._auto_accept_threshold) is Certainty.CERTAIN:
            return Resolved(
                category=category,
                query=query,
                canonical_name=match.candidate,
                corrected=True,
                score=match.score,
            )

        return Rejected(
            category=category,
            query=query,
            message=build_suggested_name(keyword, query, match.candidate),
            reason=RejectionReason.LOW_CONFIDENCE,
            suggestion=match.candidate,
            score=match.score,
        )
