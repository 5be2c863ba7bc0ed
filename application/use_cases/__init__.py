"""
Application Use Cases for poke-search.

Use cases orchestrate domain objects and ports. Dependencies are injected
via constructors for testability, and use cases return domain models.

Usage:
    from application.use_cases import ResolveNameUseCase

    resolver = ResolveNameUseCase(
        registry_provider=registry_provider,
        matcher=matcher,
    )
    outcome = resolver.execute(Category.POKEMON, "charzard")
"""

from application.use_cases.resolve_name import ResolveNameUseCase, classify_certainty

__all__ = [
    "ResolveNameUseCase",
    "classify_certainty",
]
