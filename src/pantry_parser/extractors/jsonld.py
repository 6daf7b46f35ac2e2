"""JSON-LD recipe extraction.

Scans ``<script type="application/ld+json">`` blocks in document order and
maps the first schema.org ``Recipe`` node it finds onto a candidate. Blocks
that are not valid JSON are logged and skipped.
"""

import json
import logging
import math
import re
from enum import Enum
from typing import Any

from bs4 import BeautifulSoup

from ..models import RecipeCandidate

logger = logging.getLogger(__name__)

RECIPE_TYPE = "Recipe"

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


class PayloadShape(str, Enum):
    """Top-level shapes a JSON-LD payload can take."""

    ARRAY = "array"
    GRAPH = "graph"
    OBJECT = "object"
    OTHER = "other"


def classify_payload(data: Any) -> PayloadShape:
    """Work out which JSON-LD shape a parsed payload has."""
    if isinstance(data, list):
        return PayloadShape.ARRAY
    if isinstance(data, dict):
        if isinstance(data.get("@graph"), list):
            return PayloadShape.GRAPH
        return PayloadShape.OBJECT
    return PayloadShape.OTHER


def _is_recipe(node: Any) -> bool:
    return isinstance(node, dict) and node.get("@type") == RECIPE_TYPE


def _first_recipe(nodes: list[Any]) -> dict[str, Any] | None:
    for node in nodes:
        if _is_recipe(node):
            return node
    return None


def find_recipe_node(data: Any) -> dict[str, Any] | None:
    """Locate the Recipe object inside a parsed JSON-LD payload.

    Args:
        data: Result of ``json.loads`` on one script block

    Returns:
        The first node whose ``@type`` is ``"Recipe"``, or None
    """
    shape = classify_payload(data)
    if shape is PayloadShape.ARRAY:
        return _first_recipe(data)
    if shape is PayloadShape.GRAPH:
        node = _first_recipe(data["@graph"])
        if node is not None:
            return node
    if _is_recipe(data):
        return data
    return None


def get_str(node: dict[str, Any], key: str) -> str | None:
    """Return ``node[key]`` when it is a string, else None."""
    value = node.get(key)
    return value if isinstance(value, str) else None


def get_list(node: dict[str, Any], key: str) -> list[Any] | None:
    """Return ``node[key]`` when it is a list, else None."""
    value = node.get(key)
    return value if isinstance(value, list) else None


def parse_int_prefix(value: Any) -> int | None:
    """Parse the leading integer of a yield-like value.

    Leading whitespace and a sign are accepted; anything after the digits is
    ignored, so ``"4 servings"`` gives 4 while ``"Serves 4"`` gives None.
    A list contributes its first element.

    Example:
        >>> parse_int_prefix("12 cookies")
        12
        >>> parse_int_prefix(["6", "6 portions"])
        6
    """
    if isinstance(value, list):
        value = value[0] if value else None
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        # json.loads reads 1e400 as inf and accepts NaN
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _INT_PREFIX.match(value)
        if match:
            return int(match.group(1))
    return None


def _image_reference(value: Any) -> str | None:
    if isinstance(value, str):
        return value or None
    if isinstance(value, dict):
        return get_str(value, "url") or None
    return None


def resolve_image(node: dict[str, Any]) -> str | None:
    """First element of ``image`` if it is a list, else ``image`` itself.

    ImageObject mappings contribute their ``url``.
    """
    image = node.get("image")
    if isinstance(image, list):
        return _image_reference(image[0]) if image else None
    return _image_reference(image)


def _instruction_text(step: Any) -> Any:
    if isinstance(step, str):
        return step
    if isinstance(step, dict):
        text = step.get("text")
        return text if text is not None else ""
    return ""


def candidate_from_node(node: dict[str, Any]) -> RecipeCandidate:
    """Map a schema.org Recipe node onto a candidate."""
    instructions = get_list(node, "recipeInstructions")
    return RecipeCandidate(
        title=get_str(node, "name") or "",
        ingredients=list(get_list(node, "recipeIngredient") or []),
        instructions=[_instruction_text(step) for step in instructions or []],
        prepTime=node.get("prepTime"),
        cookTime=node.get("cookTime"),
        servings=parse_int_prefix(node.get("recipeYield")),
        imageUrl=resolve_image(node),
    )


class JsonLdExtractor:
    """Extract recipes from embedded JSON-LD metadata."""

    name = "json-ld"

    def extract(self, soup: BeautifulSoup) -> RecipeCandidate | None:
        """Return the first Recipe found across all JSON-LD blocks, or None."""
        scripts = soup.find_all("script", attrs={"type": "application/ld+json"})
        for index, script in enumerate(scripts):
            payload = script.string or script.get_text()
            if not payload or not payload.strip():
                continue

            try:
                data = json.loads(payload)
            except (ValueError, RecursionError) as e:
                logger.warning(f"Skipping malformed JSON-LD block {index}: {e}")
                continue

            node = find_recipe_node(data)
            if node is not None:
                logger.debug(f"Found Recipe in JSON-LD block {index}")
                return candidate_from_node(node)

        return None
