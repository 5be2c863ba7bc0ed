"""
Padded-bigram similarity index.

Every indexed string is padded with one space on each side and broken into
overlapping two-character grams, counted as a multiset:

    "fire" -> " f", "fi", "ir", "re", "e "

Two strings are compared by the size of their multiset intersection
(``shared``) against the size of their multiset union (``all``):

    jaccard = shared / all
    score   = 1 - (1 - jaccard) ** warp

With ``warp == 1`` the score is plain Jaccard similarity. Larger warps push
near-identical strings towards 1.0 while leaving loose resemblances low,
which makes a single auto-accept threshold easier to place. The transform is
monotone, so the ranking of candidates never depends on the warp.

Scoring and cutoff filtering are delegated to ``rapidfuzz.process.extract``
with the bigram scorer plugged in as a custom scorer.
"""
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from rapidfuzz import process

from backend.core.constants import SIMILARITY_WARP

PAD = " "
ARITY = 2


@dataclass(frozen=True)
class Match:
    """Best candidate found by a search."""
    candidate: str
    score: float  # 0.0 to 1.0

    def __post_init__(self):
        assert 0.0 <= self.score <= 1.0, f"score out of range: {self.score}"


class BigramProfile:
    """The padded bigram multiset of a single string."""

    __slots__ = ("text", "grams", "size")

    def __init__(self, text: str):
        padded = PAD + text + PAD
        self.text = text
        self.grams = Counter(padded[i:i + ARITY] for i in range(len(padded) - ARITY + 1))
        self.size = len(padded) - ARITY + 1

    def __repr__(self) -> str:
        return f"BigramProfile({self.text!r})"


def bigram_similarity(
    query: BigramProfile,
    choice: BigramProfile,
    *,
    warp: float = SIMILARITY_WARP,
    **_kwargs,
) -> float:
    """
    Warped Jaccard similarity of two bigram profiles.

    Extra keyword arguments (``score_cutoff``, ``processor``) are passed by
    rapidfuzz to every scorer; filtering happens in rapidfuzz itself, so they
    are ignored here.

    Returns:
        Score between 0.0 (no shared bigrams) and 1.0 (identical multisets)
    """
    shared = sum((query.grams & choice.grams).values())
    union = query.size + choice.size - shared
    if shared == union:
        return 1.0
    return 1.0 - ((union - shared) / union) ** warp


class SimilarityIndex:
    """
    Immutable bigram index over a fixed list of strings.

    Build it with :meth:`build`; it is never updated in place. Searching an
    index built from an empty list always returns None.

    Examples:
        >>> index = SimilarityIndex.build(["dragon", "fire", "water"])
        >>> index.search("drahgna", 0.25).candidate
        'dragon'
        >>> index.search("zzz", 0.25) is None
        True
    """

    def __init__(self, profiles: Tuple[BigramProfile, ...], warp: float = SIMILARITY_WARP):
        self._profiles = profiles
        self._warp = warp

    @classmethod
    def build(cls, strings: Iterable[str], warp: float = SIMILARITY_WARP) -> "SimilarityIndex":
        """Decompose every string into its bigram profile."""
        return cls(tuple(BigramProfile(s) for s in strings), warp=warp)

    @property
    def warp(self) -> float:
        return self._warp

    def __len__(self) -> int:
        return len(self._profiles)

    def score(self, a: str, b: str) -> float:
        """Similarity of two arbitrary strings under this index's warp."""
        return bigram_similarity(BigramProfile(a), BigramProfile(b), warp=self._warp)

    def rank(self, query: str, min_score: float, limit: Optional[int] = None) -> List[Match]:
        """
        Score every indexed string against the query.

        Candidates scoring below ``min_score`` are dropped. The rest are
        ordered by descending score; equal scores keep index order, so the
        result is deterministic.

        Args:
            query: Already-normalized user input
            min_score: Pre-filter cutoff, inclusive
            limit: Maximum number of matches to return (None for all)

        Returns:
            Matches, best first
        """
        if not self._profiles:
            return []

        results = process.extract(
            BigramProfile(query),
            self._profiles,
            scorer=bigram_similarity,
            score_cutoff=min_score,
            limit=None,
            scorer_kwargs={"warp": self._warp},
        )
        # rapidfuzz gives no ordering guarantee between equal scores
        ordered = sorted(results, key=lambda r: (-r[1], r[2]))
        if limit is not None:
            ordered = ordered[:limit]
        return [Match(candidate=profile.text, score=score) for profile, score, _ in ordered]

    def search(self, query: str, min_score: float) -> Optional[Match]:
        """
        Find the single best candidate scoring at least ``min_score``.

        Returns:
            The best Match, or None when nothing clears the cutoff
        """
        matches = self.rank(query, min_score, limit=1)
        return matches[0] if matches else None
