"""Heuristic recipe extraction for pages without structured metadata.

Ingredient and instruction lists are located by scoring every ``<ul>`` and
``<ol>`` on the page:

1. **Ingredients**: the list mentioning the most measurement keywords
2. **Instructions**: the first list of two or more items that is numbered
   or talks about steps/directions

Title and image come from common heading and Open Graph conventions, and
servings/timings from regexes over the page text.
"""

import logging
import re
from collections.abc import Sequence

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..document import element_text, meta_content, page_text
from ..models import RecipeCandidate
from ..vocabulary import (
    COOK_TIME_PATTERN,
    IMAGE_CONTAINER_SELECTOR,
    INSTRUCTION_KEYWORDS,
    MEASUREMENT_KEYWORDS,
    PREP_TIME_PATTERN,
    SERVINGS_PATTERN,
    STEP_PATTERN,
)

logger = logging.getLogger(__name__)


def measurement_score(text: str, keywords: Sequence[str] = MEASUREMENT_KEYWORDS) -> int:
    """Count how many measurement keywords occur in the text.

    Each keyword counts once no matter how often it appears.

    Example:
        >>> measurement_score("2 cups flour, 1 tsp salt")
        3
    """
    lowered = text.lower()
    return sum(1 for keyword in keywords if keyword in lowered)


def find_ingredients_list(lists: Sequence[Tag]) -> Tag | None:
    """Pick the list with the strictly highest measurement score.

    Ties go to the earlier list; if no list scores above zero, None.
    """
    best_list: Tag | None = None
    best_score = 0

    for candidate in lists:
        score = measurement_score(element_text(candidate))
        if score > best_score:
            best_score = score
            best_list = candidate

    return best_list


def looks_like_instructions(
    candidate: Tag, keywords: Sequence[str] = INSTRUCTION_KEYWORDS
) -> bool:
    """True for a list of 2+ items that is enumerated or mentions instruction words."""
    items = candidate.find_all("li")
    if len(items) < 2:
        return False

    if any(STEP_PATTERN.match(element_text(item).strip().lower()) for item in items):
        return True

    list_text = element_text(candidate).lower()
    return any(keyword in list_text for keyword in keywords)


def find_instructions_list(lists: Sequence[Tag], exclude: Tag | None = None) -> Tag | None:
    """Return the first list in document order that looks like instructions.

    The list already chosen for ingredients is passed as ``exclude``; quantity
    lines such as "2 cups flour" would otherwise pass the numbering test.
    """
    for candidate in lists:
        if candidate is exclude:
            continue
        if looks_like_instructions(candidate):
            return candidate
    return None


def list_items(candidate: Tag | None) -> list[str]:
    """Text of every ``<li>`` inside a list, blanks removed."""
    if candidate is None:
        return []
    return [text for text in (element_text(li) for li in candidate.find_all("li")) if text]


def _first_text(soup: BeautifulSoup, tag: str) -> str | None:
    element = soup.find(tag)
    if isinstance(element, Tag):
        text = element_text(element)
        if text.strip():
            return text
    return None


def resolve_title(soup: BeautifulSoup) -> str:
    """First ``<h1>``, then ``<h2>``, ``og:title``, ``<title>``, else empty."""
    return (
        _first_text(soup, "h1")
        or _first_text(soup, "h2")
        or meta_content(soup, "og:title")
        or _first_text(soup, "title")
        or ""
    )


def resolve_image(soup: BeautifulSoup) -> str | None:
    """``og:image``, else the first image inside an article/recipe/post container."""
    og_image = meta_content(soup, "og:image")
    if og_image:
        return og_image

    image = soup.select_one(IMAGE_CONTAINER_SELECTOR)
    if image is not None:
        src = image.get("src")
        if isinstance(src, str) and src:
            return src
    return None


def _search_servings(text: str) -> int | None:
    match = SERVINGS_PATTERN.search(text)
    if match is None:
        return None
    value = next(group for group in match.groups() if group is not None)
    return int(value)


def _search_time(pattern: re.Pattern[str], text: str) -> str | None:
    match = pattern.search(text)
    if match is None:
        return None
    return f"{match.group(1)} {match.group(2)}"


class HeuristicExtractor:
    """Extract recipes by scoring the page's lists and text.

    Always returns a candidate; the lists in it may be empty.
    """

    name = "heuristic"

    def extract(self, soup: BeautifulSoup) -> RecipeCandidate | None:
        """Build a candidate from DOM heuristics."""
        lists = soup.find_all(["ul", "ol"])
        ingredients_list = find_ingredients_list(lists)
        instructions_list = find_instructions_list(lists, exclude=ingredients_list)
        logger.debug(
            f"Scored {len(lists)} lists: ingredients={ingredients_list is not None}, "
            f"instructions={instructions_list is not None}"
        )

        text = page_text(soup)
        return RecipeCandidate(
            title=resolve_title(soup),
            ingredients=list_items(ingredients_list),
            instructions=list_items(instructions_list),
            prepTime=_search_time(PREP_TIME_PATTERN, text),
            cookTime=_search_time(COOK_TIME_PATTERN, text),
            servings=_search_servings(text),
            imageUrl=resolve_image(soup),
        )
