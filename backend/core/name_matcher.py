"""
Name matcher: couples a category's registry with a similarity index.

By default a fresh index is built from the registry for every lookup. Set
``cache_indices`` to keep one index per category for the lifetime of the
matcher; results are identical either way.
"""
from typing import Dict, Optional, TYPE_CHECKING

from backend.core.constants import MATCH_PREFILTER_CUTOFF, SIMILARITY_WARP
from backend.core.similarity_index import Match, SimilarityIndex
from domain.models.category import Category

if TYPE_CHECKING:
    from application.ports import NameRegistryProvider


class NameMatcher:
    """Finds the closest canonical name for a query within one category."""

    def __init__(
        self,
        registry_provider: "NameRegistryProvider",
        prefilter_cutoff: float = MATCH_PREFILTER_CUTOFF,
        warp: float = SIMILARITY_WARP,
        cache_indices: bool = False,
    ):
        """
        Args:
            registry_provider: Source of canonical names per category
            prefilter_cutoff: Minimum score a candidate needs to be considered
            warp: Similarity warp exponent
            cache_indices: Keep built indices between lookups
        """
        self._provider = registry_provider
        self._prefilter_cutoff = prefilter_cutoff
        self._warp = warp
        self._cache_indices = cache_indices
        self._indices: Dict[Category, SimilarityIndex] = {}

    @property
    def prefilter_cutoff(self) -> float:
        return self._prefilter_cutoff

    def _index_for(self, category: Category) -> SimilarityIndex:
        index = self._indices.get(category)
        if index is not None:
            return index

        registry = self._provider.load(category)
        index = SimilarityIndex.build(registry.names, warp=self._warp)
        if self._cache_indices:
            self._indices[category] = index
        return index

    def find_best(self, category: Category, query: str) -> Optional[Match]:
        """
        Best candidate for ``query`` among the category's canonical names.

        Returns:
            Match scoring at least the pre-filter cutoff, or None
        """
        return self._index_for(category).search(query, self._prefilter_cutoff)

    def clear_cache(self):
        """Drop any cached indices."""
        self._indices.clear()
