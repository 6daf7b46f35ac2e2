"""Quality scoring for extracted recipes.

The pipeline accepts any page with at least one ingredient or instruction,
which lets through thin results from the heuristic strategy (a navigation
menu mistaken for a method, say). The validator grades a record so that
callers can decide whether to show it, ask the user to check it, or try
another source.

Example:
    >>> validator = RecipeValidator()
    >>> score = validator.score_recipe(record)
    >>> if not score.is_acceptable:
    ...     print(f"Issues: {score.issues}")
"""

from dataclasses import dataclass

from .models import RecipeRecord
from .vocabulary import DEFAULT_TITLE, MEASUREMENT_KEYWORDS


@dataclass
class RecipeQualityScore:
    """Quality metrics for an extracted recipe.

    Attributes:
        recipe_title: Title of the recipe being scored
        has_title: Whether the page supplied a real title
        ingredient_count: Number of ingredient lines
        instruction_count: Number of instruction steps
        has_times: Whether prep or cook time is known
        has_servings: Whether servings are known
        issues: Specific quality issues found
        completeness_score: Overall quality score (0.0-1.0)
    """

    recipe_title: str
    has_title: bool
    ingredient_count: int
    instruction_count: int
    has_times: bool
    has_servings: bool
    issues: list[str]
    completeness_score: float

    @property
    def is_high_quality(self) -> bool:
        """True if completeness score >= 0.8."""
        return self.completeness_score >= 0.8

    @property
    def is_acceptable(self) -> bool:
        """True if completeness score >= 0.6."""
        return self.completeness_score >= 0.6

    @property
    def label(self) -> str:
        """HIGH, ACCEPTABLE or LOW."""
        if self.is_high_quality:
            return "HIGH"
        return "ACCEPTABLE" if self.is_acceptable else "LOW"

    def __str__(self) -> str:
        """Human-readable quality summary."""
        return (
            f"Quality: {self.label} (score: {self.completeness_score:.2f}) - "
            f"{self.ingredient_count} ingredients, {self.instruction_count} instructions"
        )


class RecipeValidator:
    """Validates recipes and scores their completeness.

    Example:
        >>> validator = RecipeValidator(min_ingredients=3, min_instructions=2)
        >>> print(validator.score_recipe(record))
    """

    def __init__(
        self,
        min_ingredients: int = 2,
        min_instructions: int = 2,
        default_title: str = DEFAULT_TITLE,
    ) -> None:
        """Initialize validator with quality thresholds.

        Args:
            min_ingredients: Ingredient count for full marks
            min_instructions: Instruction count for full marks
            default_title: Placeholder title that counts as "no title"
        """
        self.min_ingredients = min_ingredients
        self.min_instructions = min_instructions
        self.default_title = default_title

    def score_recipe(self, recipe: RecipeRecord) -> RecipeQualityScore:
        """Score a recipe's completeness.

        Weights: title 0.15, ingredients 0.35, instructions 0.35, timing and
        servings 0.075 each. Counts below the minimum earn partial credit.
        """
        issues: list[str] = []

        has_title = recipe.title != self.default_title
        if not has_title:
            issues.append("Missing title")

        ingredient_count = len(recipe.ingredients)
        if ingredient_count < self.min_ingredients:
            issues.append(f"Insufficient ingredients ({ingredient_count} < {self.min_ingredients})")
        elif ingredient_count and not self.validate_ingredients(recipe.ingredients):
            issues.append("Ingredients lack measurements or quantities")

        instruction_count = len(recipe.instructions)
        if instruction_count < self.min_instructions:
            issues.append(
                f"Insufficient instructions ({instruction_count} < {self.min_instructions})"
            )

        has_times = bool(recipe.prepTime or recipe.cookTime)
        has_servings = recipe.servings is not None

        completeness_score = 0.15 if has_title else 0.0
        completeness_score += 0.35 * self._ratio(ingredient_count, self.min_ingredients)
        completeness_score += 0.35 * self._ratio(instruction_count, self.min_instructions)
        if has_times:
            completeness_score += 0.075
        if has_servings:
            completeness_score += 0.075

        return RecipeQualityScore(
            recipe_title=recipe.title,
            has_title=has_title,
            ingredient_count=ingredient_count,
            instruction_count=instruction_count,
            has_times=has_times,
            has_servings=has_servings,
            issues=issues,
            completeness_score=round(completeness_score, 4),
        )

    @staticmethod
    def _ratio(count: int, minimum: int) -> float:
        if minimum == 0 or count >= minimum:
            return 1.0
        return count / minimum

    def validate_ingredients(self, ingredients: list[str]) -> bool:
        """Check that at least half the ingredients carry a quantity or unit.

        Example:
            >>> validator.validate_ingredients(["2 cups flour", "salt to taste"])
            True
        """
        if not ingredients:
            return False

        measured = 0
        for ingredient in ingredients:
            lowered = ingredient.lower()
            if any(char.isdigit() for char in lowered) or any(
                f" {keyword}" in f" {lowered}" for keyword in MEASUREMENT_KEYWORDS
            ):
                measured += 1

        return measured / len(ingredients) >= 0.5
