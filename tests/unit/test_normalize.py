import pytest

from application.exceptions import InvalidGenerationError
from application.use_cases import ResolveNameUseCase
from backend.core.name_matcher import NameMatcher
from backend.core.normalize import parse_generation, parse_name
from tests.fakes import create_registry_provider


@pytest.fixture
def resolver() -> ResolveNameUseCase:
    provider = create_registry_provider()
    return ResolveNameUseCase(provider, NameMatcher(provider))


@pytest.mark.unit
class TestParseName:
    """Tests for the parse_name function."""

    def test_lowercases(self):
        assert parse_name("Charizard") == "charizard"

    def test_joins_words_with_hyphens(self):
        assert parse_name("Solar Power") == "solar-power"
        assert parse_name("Fire Blast") == "fire-blast"

    def test_keeps_punctuation(self):
        assert parse_name("Mr. Mime") == "mr.-mime"

    def test_splits_on_single_spaces(self):
        """Each space becomes a hyphen, including repeated ones."""
        assert parse_name("fire  blast") == "fire--blast"

    def test_already_canonical(self):
        assert parse_name("fire-blast") == "fire-blast"


@pytest.mark.unit
class TestParseGeneration:
    """Tests for the parse_generation function."""

    @pytest.mark.parametrize(
        "text",
        ["Generation IV", "Gen IV", "generation iv", "4", "generation 4", "gen 4", "generation-iv"],
    )
    def test_accepts_aliases(self, text: str, resolver: ResolveNameUseCase):
        assert parse_generation(text, resolver) == "generation-iv"

    def test_highest_generation(self, resolver: ResolveNameUseCase):
        assert parse_generation("9", resolver) == "generation-ix"

    @pytest.mark.parametrize("text", ["What", "1234", "Generation 123", "0", "gen -1", "10"])
    def test_rejects_unknown_generation(self, text: str, resolver: ResolveNameUseCase):
        with pytest.raises(InvalidGenerationError) as exc_info:
            parse_generation(text, resolver)

        assert str(exc_info.value) == f"'{text}' isn't a valid pokemon generation"
        assert exc_info.value.generation_name == text

    @pytest.mark.parametrize("text", ["4000", "generation 1000000000000000", "gen 99999999999999999999"])
    def test_rejects_numbers_beyond_roman_range(self, text: str, resolver: ResolveNameUseCase):
        """Huge numbers are invalid generations, not numerals to expand."""
        with pytest.raises(InvalidGenerationError) as exc_info:
            parse_generation(text, resolver)

        assert str(exc_info.value) == f"'{text}' isn't a valid pokemon generation"
