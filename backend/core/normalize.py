"""
Caller-side input normalization.

The resolver compares names verbatim, so every command runs the user's text
through these helpers first.
"""
from typing import TYPE_CHECKING

from application.exceptions import InvalidGenerationError
from backend.core.roman_numeral import MAX_ROMAN, integer_to_roman
from domain.models.category import Category

if TYPE_CHECKING:
    from application.use_cases.resolve_name import ResolveNameUseCase

_GENERATION_PREFIXES = ("generation-", "gen-")


def parse_name(text: str) -> str:
    """
    Lowercase the text and join its space-separated words with hyphens.

    Punctuation is kept as typed, so "Mr. Mime" becomes "mr.-mime".
    """
    return "-".join(text.lower().split(" "))


def parse_generation(generation_name: str, resolver: "ResolveNameUseCase") -> str:
    """
    Turn loose generation input into a canonical generation identifier.

    Accepts "Generation IV", "gen iv", "gen 4", "4" and so on.

    Args:
        generation_name: Raw user input
        resolver: Used to check the result against the generation registry

    Returns:
        Canonical identifier such as "generation-iv"

    Raises:
        InvalidGenerationError: If the input does not name a known generation
    """
    stripped = parse_name(generation_name)
    for prefix in _GENERATION_PREFIXES:
        if stripped.startswith(prefix):
            stripped = stripped[len(prefix):]
            break

    try:
        number = int(stripped)
    except ValueError:
        numeral = stripped
    else:
        if not 1 <= number <= MAX_ROMAN:
            raise InvalidGenerationError(generation_name)
        numeral = integer_to_roman(number)

    generation_id = f"generation-{numeral}"
    if not resolver.is_valid(Category.GENERATION, generation_id):
        raise InvalidGenerationError(generation_name)
    return generation_id
