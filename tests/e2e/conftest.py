"""
E2E test fixtures and configuration.

These fixtures build the real resolution context over the dictionaries
embedded in the package, exactly as the command-line tool does.
"""
import pytest

from backend.main import ResolutionContext, create_context
from backend.settings import Settings


@pytest.fixture(scope="module")
def e2e_settings() -> Settings:
    """Default tuning, isolated from any .env file."""
    return Settings(_env_file=None)


@pytest.fixture(scope="module")
def context(e2e_settings: Settings) -> ResolutionContext:
    """Fresh context per module so build counts start at zero."""
    return create_context(settings=e2e_settings)
