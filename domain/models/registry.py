"""
NameRegistry value object.

The authoritative list of valid identifiers for one Category. Names are
lowercase and hyphen-joined, held sorted and unique so that exact lookups
can use a binary search.
"""

from bisect import bisect_left
from typing import Iterable, Iterator, Tuple

from domain.models.category import Category


class NameRegistry:
    """
    Immutable, sorted, de-duplicated collection of canonical names.

    Input order does not matter: names are sorted and de-duplicated on
    construction and stored in a tuple, so there is no way to mutate a
    registry after the fact.

    Examples:
        >>> registry = NameRegistry(Category.TYPE, ["fire", "bug", "fire"])
        >>> registry.names
        ('bug', 'fire')
        >>> registry.contains("fire")
        True
        >>> "water" in registry
        False
    """

    __slots__ = ("_category", "_names")

    def __init__(self, category: Category, names: Iterable[str]):
        self._category = category
        self._names: Tuple[str, ...] = tuple(sorted(set(names)))

    @property
    def category(self) -> Category:
        return self._category

    @property
    def names(self) -> Tuple[str, ...]:
        return self._names

    def contains(self, candidate: str) -> bool:
        """
        Binary search for an exact, already-normalized name.

        Args:
            candidate: Lowercase, hyphen-joined name

        Returns:
            True if the name is canonical for this category
        """
        index = bisect_left(self._names, candidate)
        return index < len(self._names) and self._names[index] == candidate

    def is_strictly_sorted(self) -> bool:
        """Check the ordering invariant the binary search relies on."""
        return all(a < b for a, b in zip(self._names, self._names[1:]))

    def __contains__(self, candidate: object) -> bool:
        return isinstance(candidate, str) and self.contains(candidate)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"NameRegistry({self._category.value!r}, {len(self._names)} names)"
