"""
Unit tests for the name resolution outcome models.
"""

import pytest
from pydantic import TypeAdapter, ValidationError

from application.exceptions import (
    DictionaryLoadError,
    InvalidGenerationError,
    NameResolutionError,
)
from domain.models import (
    Category,
    Rejected,
    RejectionReason,
    ResolutionOutcome,
    Resolved,
)


# =============================================================================
# Resolved Tests
# =============================================================================


@pytest.mark.unit
class TestResolved:
    """Tests for the Resolved outcome."""

    def test_defaults_describe_exact_match(self):
        outcome = Resolved(category=Category.TYPE, query="fire", canonical_name="fire")

        assert outcome.is_resolved is True
        assert outcome.corrected is False
        assert outcome.score == 1.0
        assert outcome.kind == "resolved"

    def test_canonical_name_required(self):
        with pytest.raises(ValidationError):
            Resolved(category=Category.TYPE, query="fire", canonical_name="")

    def test_score_must_be_in_unit_interval(self):
        with pytest.raises(ValidationError):
            Resolved(category=Category.TYPE, query="firre", canonical_name="fire", score=1.2)

    def test_is_frozen(self):
        outcome = Resolved(category=Category.TYPE, query="fire", canonical_name="fire")
        with pytest.raises(ValidationError):
            outcome.canonical_name = "water"


# =============================================================================
# Rejected Tests
# =============================================================================


@pytest.mark.unit
class TestRejected:
    """Tests for the Rejected outcome."""

    def test_not_found(self):
        outcome = Rejected(
            category=Category.POKEMON,
            query="zzz",
            message='Pokemon "zzz" doesn\'t exist',
            reason=RejectionReason.NOT_FOUND,
        )

        assert outcome.is_resolved is False
        assert outcome.suggestion is None
        assert outcome.score is None

    def test_serializes_enums_as_values(self):
        outcome = Rejected(
            category=Category.MOVE_DAMAGE_CLASS,
            query="phsical",
            message='Unknown move damage category "phsical"\nDid you mean "physical"?',
            reason=RejectionReason.LOW_CONFIDENCE,
            suggestion="physical",
            score=0.6,
        )

        data = outcome.model_dump(mode="json")

        assert data["category"] == "move-damage-class"
        assert data["reason"] == "low_confidence"
        assert data["kind"] == "rejected"


@pytest.mark.unit
class TestResolutionOutcome:
    """Round-trip through the discriminated union."""

    def test_json_picks_the_right_variant(self):
        adapter = TypeAdapter(ResolutionOutcome)

        resolved = adapter.validate_json(
            '{"kind": "resolved", "category": "type", "query": "fire", "canonical_name": "fire"}'
        )
        rejected = adapter.validate_json(
            '{"kind": "rejected", "category": "type", "query": "zz", '
            '"message": "Type \\"zz\\" doesn\'t exist", "reason": "not_found"}'
        )

        assert isinstance(resolved, Resolved)
        assert isinstance(rejected, Rejected)


# =============================================================================
# Exception Tests
# =============================================================================


@pytest.mark.unit
class TestExceptions:

    def test_hierarchy(self):
        assert issubclass(DictionaryLoadError, NameResolutionError)
        assert issubclass(InvalidGenerationError, NameResolutionError)

    def test_dictionary_load_error_message(self):
        error = DictionaryLoadError("type.yaml", "names must be sorted")
        assert str(error) == "Invalid name dictionary type.yaml: names must be sorted"

    def test_invalid_generation_message(self):
        assert str(InvalidGenerationError("gen 12")) == "'gen 12' isn't a valid pokemon generation"
