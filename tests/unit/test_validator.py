"""Unit tests for pantry_parser.validator module.

Tests RecipeQualityScore and RecipeValidator scoring logic.
"""

import pytest

from pantry_parser.models import RecipeRecord
from pantry_parser.validator import RecipeQualityScore, RecipeValidator


def make_score(score: float) -> RecipeQualityScore:
    return RecipeQualityScore(
        recipe_title="Test",
        has_title=True,
        ingredient_count=2,
        instruction_count=2,
        has_times=False,
        has_servings=False,
        issues=[],
        completeness_score=score,
    )


class TestRecipeQualityScore:
    """Tests for RecipeQualityScore thresholds and formatting."""

    @pytest.mark.parametrize(
        ("score", "label"),
        [(1.0, "HIGH"), (0.8, "HIGH"), (0.79, "ACCEPTABLE"), (0.6, "ACCEPTABLE"), (0.59, "LOW")],
    )
    def test_labels(self, score: float, label: str) -> None:
        assert make_score(score).label == label

    def test_str(self) -> None:
        assert str(make_score(0.85)) == (
            "Quality: HIGH (score: 0.85) - 2 ingredients, 2 instructions"
        )


class TestRecipeValidator:
    """Tests for RecipeValidator.score_recipe."""

    @pytest.fixture
    def validator(self) -> RecipeValidator:
        return RecipeValidator()

    def test_complete_recipe(self, validator: RecipeValidator) -> None:
        record = RecipeRecord(
            title="Soup",
            ingredients=["1 cup broth", "2 carrots"],
            instructions=["Chop.", "Simmer."],
            prepTime="PT10M",
            servings=2,
        )
        score = validator.score_recipe(record)

        assert score.completeness_score == 1.0
        assert score.is_high_quality
        assert score.issues == []

    def test_default_title_counts_as_missing(self, validator: RecipeValidator) -> None:
        record = RecipeRecord(
            title="Untitled Recipe",
            ingredients=["1 egg", "2 eggs"],
            instructions=["a", "b"],
        )
        score = validator.score_recipe(record)

        assert not score.has_title
        assert "Missing title" in score.issues
        assert score.completeness_score == 0.7

    def test_partial_credit_for_short_lists(self, validator: RecipeValidator) -> None:
        record = RecipeRecord(title="Toast", ingredients=["1 slice bread"], instructions=["Toast."])
        score = validator.score_recipe(record)

        assert score.completeness_score == 0.5
        assert "Insufficient ingredients (1 < 2)" in score.issues
        assert "Insufficient instructions (1 < 2)" in score.issues
        assert score.label == "LOW"

    def test_unmeasured_ingredients_flagged(self, validator: RecipeValidator) -> None:
        """A navigation menu mistaken for ingredients is reported."""
        record = RecipeRecord(title="Oops", ingredients=["Home", "About"], instructions=["a", "b"])
        score = validator.score_recipe(record)

        assert "Ingredients lack measurements or quantities" in score.issues

    def test_zero_minimums_give_full_list_credit(self) -> None:
        validator = RecipeValidator(min_ingredients=0, min_instructions=0)
        score = validator.score_recipe(RecipeRecord(title="Empty"))

        assert score.completeness_score == 0.85
        assert score.issues == []

    def test_custom_default_title(self) -> None:
        validator = RecipeValidator(default_title="Mystery Dish")
        score = validator.score_recipe(RecipeRecord(title="Untitled Recipe"))
        assert score.has_title


class TestValidateIngredients:
    """Tests for RecipeValidator.validate_ingredients."""

    def test_empty(self) -> None:
        assert not RecipeValidator().validate_ingredients([])

    def test_half_measured_is_enough(self) -> None:
        assert RecipeValidator().validate_ingredients(["2 eggs", "butter"])

    def test_keyword_without_digits(self) -> None:
        assert RecipeValidator().validate_ingredients(["pinch of salt", "pepper to taste"])

    def test_no_measurements(self) -> None:
        assert not RecipeValidator().validate_ingredients(["salt", "pepper", "2 eggs"])
