"""Data models for recipe extraction results.

``RecipeRecord`` is the only record type the pipeline returns. Strategies
produce a looser ``RecipeCandidate`` first, which the coordinator cleans up
and converts. When nothing usable is found the pipeline returns an
``ExtractionFailure`` instead of raising.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RecipeRecord(BaseModel):
    """A structured recipe extracted from a single web page.

    Field names follow the JSON shape consumed by the web client, hence the
    camelCase.
    """

    title: str = Field(
        min_length=1,
        description="Recipe name; falls back to a placeholder when the page has none",
        examples=["Tomato Soup", "Untitled Recipe"],
    )
    ingredients: list[str] = Field(
        default_factory=list,
        description="Ingredient lines in page order, trimmed and non-empty",
        examples=[["1 cup broth", "2 tbsp butter"]],
    )
    instructions: list[str] = Field(
        default_factory=list,
        description="Method steps in cooking order, trimmed and non-empty",
    )
    prepTime: str | None = Field(  # noqa: N815
        None,
        description="Raw duration token, e.g. 'PT10M' or '10 minutes'",
        examples=["PT10M", "10 minutes"],
    )
    cookTime: str | None = Field(  # noqa: N815
        None,
        description="Raw duration token, same format family as prepTime",
    )
    servings: int | None = Field(None, description="Number of servings when stated")
    imageUrl: str | None = Field(  # noqa: N815
        None,
        description="A single representative image reference",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping without the absent optional fields."""
        return self.model_dump(exclude_none=True)


@dataclass
class RecipeCandidate:
    """Unvalidated output of one extraction strategy.

    List entries may still be blank, padded, or not strings at all (JSON-LD
    payloads are arbitrary); the coordinator's post-processing pass deals
    with that.
    """

    title: str = ""
    ingredients: list[Any] = field(default_factory=list)
    instructions: list[Any] = field(default_factory=list)
    prepTime: Any = None  # noqa: N815
    cookTime: Any = None  # noqa: N815
    servings: Any = None
    imageUrl: Any = None  # noqa: N815

    @property
    def has_content(self) -> bool:
        """True when either ingredients or instructions are present."""
        return bool(self.ingredients) or bool(self.instructions)


class FailureKind(str, Enum):
    """Reasons an extraction can come back empty-handed."""

    NO_RECIPE_FOUND = "NoRecipeFound"


@dataclass(frozen=True)
class ExtractionFailure:
    """Signal that a page yielded no usable recipe.

    This is an expected, user-facing outcome rather than a fault.
    """

    kind: FailureKind = FailureKind.NO_RECIPE_FOUND
    message: str = "Could not extract recipe from the provided page"

    def to_dict(self) -> dict[str, str]:
        """Return the error body shown to API and CLI users."""
        return {"error": self.message, "kind": self.kind.value}


ExtractionResult = RecipeRecord | ExtractionFailure
