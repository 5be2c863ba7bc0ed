"""
Resolution context factory.

Every command needs the same read-only collaborators: settings, the
canonical name registries, the fuzzy matcher and the resolution policy.
create_context() wires them together once at startup; the resulting
ResolutionContext is passed explicitly to whatever needs it.

Usage:
    from backend.main import create_context
    from backend.settings import Settings

    # Default context (uses get_settings())
    context = create_context()
    outcome = context.resolve(Category.POKEMON, "charzard")

    # Test context with custom settings
    test_settings = Settings(_env_file=None)
    test_context = create_context(settings=test_settings)
"""

import logging
from dataclasses import dataclass
from typing import Optional

from application.ports import NameRegistryProvider
from application.use_cases import ResolveNameUseCase
from backend.core.name_matcher import NameMatcher
from backend.core.normalize import parse_generation, parse_name
from backend.settings import Settings, get_settings
from domain.models import Category, ResolutionOutcome
from infrastructure.registry import EmbeddedNameRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolutionContext:
    """Read-only bundle of everything a command needs to resolve names."""
    settings: Settings
    registry_provider: NameRegistryProvider
    matcher: NameMatcher
    resolver: ResolveNameUseCase

    def resolve(self, category: Category, query: str) -> ResolutionOutcome:
        """Resolve an already-normalized query."""
        return self.resolver.execute(category, query)

    def resolve_text(self, category: Category, text: str) -> ResolutionOutcome:
        """Normalize raw user text with parse_name, then resolve it."""
        return self.resolver.execute(category, parse_name(text))

    def parse_generation(self, text: str) -> str:
        """Canonical generation identifier for loose input such as "gen 4"."""
        return parse_generation(text, self.resolver)


def create_context(
    settings: Optional[Settings] = None,
    registry_provider: Optional[NameRegistryProvider] = None,
) -> ResolutionContext:
    """
    Create the resolution context.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.
        registry_provider: Optional registry source. Defaults to the
                  dictionaries embedded in the package (or settings.dictionaries_dir).

    Returns:
        Fully wired ResolutionContext. Registries are still built lazily on
        first use.
    """
    if settings is None:
        settings = get_settings()

    if registry_provider is None:
        registry_provider = EmbeddedNameRegistry(settings.dictionaries_dir)

    matcher = NameMatcher(
        registry_provider,
        prefilter_cutoff=settings.match_prefilter_cutoff,
        warp=settings.match_similarity_warp,
        cache_indices=settings.match_cache_indices,
    )
    resolver = ResolveNameUseCase(
        registry_provider,
        matcher,
        auto_accept_threshold=settings.match_auto_accept_threshold,
    )

    logger.debug(
        "Resolution context ready (prefilter=%s, auto_accept=%s, warp=%s, cache_indices=%s)",
        settings.match_prefilter_cutoff,
        settings.match_auto_accept_threshold,
        settings.match_similarity_warp,
        settings.match_cache_indices,
    )

    return ResolutionContext(
        settings=settings,
        registry_provider=registry_provider,
        matcher=matcher,
        resolver=resolver,
    )
