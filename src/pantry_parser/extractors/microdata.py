"""Microdata (``itemtype``/``itemprop``) recipe extraction."""

import logging

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..document import element_text
from ..models import RecipeCandidate
from .jsonld import parse_int_prefix

logger = logging.getLogger(__name__)

INGREDIENT_PROPS = '[itemprop="recipeIngredient"], [itemprop="ingredients"]'


def _prop(scope: Tag, name: str) -> Tag | None:
    return scope.select_one(f'[itemprop="{name}"]')


def _attr(element: Tag | None, attr: str) -> str | None:
    if element is None:
        return None
    value = element.get(attr)
    return value if isinstance(value, str) and value else None


def _texts(scope: Tag, selector: str) -> list[str]:
    return [text for text in (element_text(el) for el in scope.select(selector)) if text]


class MicrodataExtractor:
    """Extract recipes annotated with schema.org microdata.

    Only the first element whose ``itemtype`` mentions "Recipe" is used and
    every property lookup is scoped to its subtree.
    """

    name = "microdata"

    def extract(self, soup: BeautifulSoup) -> RecipeCandidate | None:
        """Return a candidate from the first Recipe scope, or None if there is none."""
        scope = soup.select_one('[itemtype*="Recipe"]')
        if scope is None:
            return None

        logger.debug(f"Found microdata Recipe scope: {scope.get('itemtype')}")

        name = _prop(scope, "name")
        recipe_yield = _prop(scope, "recipeYield")

        return RecipeCandidate(
            title=element_text(name) if name is not None else "",
            ingredients=_texts(scope, INGREDIENT_PROPS),
            instructions=_texts(scope, '[itemprop="recipeInstructions"]'),
            prepTime=_attr(_prop(scope, "prepTime"), "content"),
            cookTime=_attr(_prop(scope, "cookTime"), "content"),
            servings=(
                parse_int_prefix(element_text(recipe_yield)) if recipe_yield is not None else None
            ),
            imageUrl=_attr(_prop(scope, "image"), "src"),
        )
