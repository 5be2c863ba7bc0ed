"""
Category value object for name resolution.

A Category selects which canonical dictionary a user-supplied name is
resolved against and which keyword is used when talking about it in
user-facing messages.
"""

from enum import Enum


class Category(str, Enum):
    """
    The closed set of name domains the resolver understands.

    Values match the PokeAPI resource names, so a resolved name can be
    passed straight to the matching endpoint.

    Examples:
        >>> Category.POKEMON.keyword
        'pokemon'
        >>> Category.MOVE_DAMAGE_CLASS.keyword
        'move damage category'
        >>> Category("type") is Category.TYPE
        True
    """

    POKEMON = "pokemon"
    MOVE = "move"
    ABILITY = "ability"
    ITEM = "item"
    TYPE = "type"
    GENERATION = "generation"
    MOVE_DAMAGE_CLASS = "move-damage-class"

    @property
    def keyword(self) -> str:
        """Human-readable name used in messages."""
        return _KEYWORDS[self]

    @property
    def dictionary_name(self) -> str:
        """File stem of the embedded dictionary holding this category's names."""
        return self.value.replace("-", "_")


_KEYWORDS = {
    Category.POKEMON: "pokemon",
    Category.MOVE: "move",
    Category.ABILITY: "ability",
    Category.ITEM: "item",
    Category.TYPE: "type",
    Category.GENERATION: "generation",
    Category.MOVE_DAMAGE_CLASS: "move damage category",
}
