"""
Command-line entry point: resolve a name and print the canonical identifier.

    python -m backend pokemon charzard        -> charizard
    python -m backend move Fire Blast         -> fire-blast
    python -m backend gen 4                   -> generation-iv
    python -m backend pokemon peacachu        -> Unknown pokemon "peacachu"
                                                 Did you mean "pikachu"?

Exits 0 when the name resolves and 1 when it is rejected.
"""
import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from application.exceptions import InvalidGenerationError, NameResolutionError
from backend.main import ResolutionContext, create_context
from backend.settings import get_settings
from domain.models import Category

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_REJECTED = 1

# subcommand -> (category, help text, aliases)
SUBCOMMANDS = {
    "pokemon": (Category.POKEMON, "Resolve a pokemon name", []),
    "move": (Category.MOVE, "Resolve a move name", []),
    "ability": (Category.ABILITY, "Resolve an ability name", []),
    "item": (Category.ITEM, "Resolve an item name", []),
    "type": (Category.TYPE, "Resolve a type name", []),
    "generation": (Category.GENERATION, "Resolve a generation (e.g. 'gen 4', 'Generation IV')", ["gen"]),
    "damage-class": (Category.MOVE_DAMAGE_CLASS, "Resolve a move damage category", []),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="poke-search",
        description="Resolve pokemon, move, ability, item, type and generation names",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)
    for command, (category, help_text, aliases) in SUBCOMMANDS.items():
        sub = subparsers.add_parser(command, help=help_text, aliases=aliases)
        sub.add_argument("name", nargs="+", help=f"The {category.keyword} name (may contain spaces)")
        sub.set_defaults(category=category)
    return parser


def run(args: argparse.Namespace, context: ResolutionContext) -> int:
    """Resolve the parsed arguments and print the result."""
    category: Category = args.category
    text = " ".join(args.name)

    if category is Category.GENERATION:
        try:
            print(context.parse_generation(text))
        except InvalidGenerationError as e:
            print(e)
            return EXIT_REJECTED
        return EXIT_OK

    outcome = context.resolve_text(category, text)
    if not outcome.is_resolved:
        logger.debug(f"Rejected {category.value} '{outcome.query}' ({outcome.reason.value})")
        print(outcome.message)
        return EXIT_REJECTED

    if outcome.corrected:
        logger.info(
            f"Corrected {category.value} '{outcome.query}' -> '{outcome.canonical_name}' "
            f"(score: {outcome.score:.2f})"
        )
    print(outcome.canonical_name)
    return EXIT_OK


def main(argv: Optional[List[str]] = None, context: Optional[ResolutionContext] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = context.settings if context is not None else get_settings()
    except ValidationError as e:
        print(f"Error: Invalid settings: {e}", file=sys.stderr)
        return EXIT_REJECTED

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if context is None:
        context = create_context(settings)

    try:
        return run(args, context)
    except NameResolutionError as e:
        logger.debug("Name resolution failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_REJECTED


if __name__ == "__main__":
    sys.exit(main())
