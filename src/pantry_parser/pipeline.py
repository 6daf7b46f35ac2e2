"""Strategy pipeline for recipe extraction.

The coordinator parses the page once and runs its strategies in a fixed
order of reliability:

1. **JSON-LD**: embedded schema.org metadata
2. **Microdata**: ``itemtype``/``itemprop`` annotations
3. **Heuristic**: list scoring over the visible page

The first strategy whose candidate has ingredients or instructions wins.
The winner is cleaned up uniformly, and a page that still has neither
ingredients nor instructions is reported as ``ExtractionFailure``.

Each call is independent: the pipeline keeps no per-call state on itself,
so one instance can serve concurrent requests.

Example:
    >>> pipeline = RecipePipeline()
    >>> result = pipeline.extract(html)
    >>> if isinstance(result, ExtractionFailure):
    ...     print(result.message)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from bs4 import BeautifulSoup

from .config import ExtractionConfig
from .document import parse_document
from .exceptions import ExtractionError, PantryParserError, RecipeNotFoundError
from .extractors import HeuristicExtractor, JsonLdExtractor, MicrodataExtractor
from .models import (
    ExtractionFailure,
    ExtractionResult,
    FailureKind,
    RecipeCandidate,
    RecipeRecord,
)
from .protocols import RecipeStrategy

logger = logging.getLogger(__name__)


@dataclass
class StrategyAttempt:
    """What one strategy produced during a run.

    Attributes:
        name: Strategy name
        found: Whether it returned a candidate at all
        has_content: Whether that candidate had ingredients or instructions
    """

    name: str
    found: bool
    has_content: bool


@dataclass
class ExtractionContext:
    """State accumulated while extracting one page.

    Attributes:
        config: Configuration used for this run
        soup: Parsed document
        attempts: Strategies tried, in order
        candidate: Candidate picked for post-processing, if any
        strategy: Name of the strategy that produced ``candidate``
        result: Final record or failure
    """

    config: ExtractionConfig
    soup: BeautifulSoup | None = None
    attempts: list[StrategyAttempt] = field(default_factory=list)
    candidate: RecipeCandidate | None = None
    strategy: str | None = None
    result: ExtractionResult | None = None


def default_strategies() -> list[RecipeStrategy]:
    """JSON-LD, then microdata, then heuristics."""
    return [JsonLdExtractor(), MicrodataExtractor(), HeuristicExtractor()]


def clean_entries(entries: Iterable[Any], boilerplate: Sequence[str]) -> list[str]:
    """Keep trimmed, non-empty string entries that are not boilerplate.

    Example:
        >>> clean_entries(["  1 egg ", "", None, "Advertisement"], ("Advertisement",))
        ['1 egg']
    """
    cleaned: list[str] = []
    for entry in entries:
        if not isinstance(entry, str):
            continue
        text = entry.strip()
        if text and text not in boilerplate:
            cleaned.append(text)
    return cleaned


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def _optional_servings(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return None
    return value


def finalize(candidate: RecipeCandidate, config: ExtractionConfig) -> RecipeRecord:
    """Apply the uniform post-processing pass to a strategy's candidate.

    Args:
        candidate: Raw strategy output
        config: Supplies the default title and boilerplate texts

    Returns:
        Cleaned record; its lists may be empty
    """
    title = candidate.title.strip() if isinstance(candidate.title, str) else ""
    return RecipeRecord(
        title=title or config.default_title,
        ingredients=clean_entries(candidate.ingredients or [], config.boilerplate),
        instructions=clean_entries(candidate.instructions or [], config.boilerplate),
        prepTime=_optional_str(candidate.prepTime),
        cookTime=_optional_str(candidate.cookTime),
        servings=_optional_servings(candidate.servings),
        imageUrl=_optional_str(candidate.imageUrl),
    )


class RecipePipeline:
    """Runs extraction strategies in order and post-processes the winner.

    Attributes:
        strategies: Ordered strategies to try
        config: Extraction configuration

    Example:
        >>> pipeline = RecipePipeline(config=ExtractionConfig(parser="lxml"))
        >>> ctx = pipeline.run(html)
        >>> print(ctx.strategy, ctx.result)
    """

    def __init__(
        self,
        strategies: Sequence[RecipeStrategy] | None = None,
        config: ExtractionConfig | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            strategies: Strategies in precedence order (defaults to the built-in three)
            config: Configuration (defaults to ``ExtractionConfig()``)
        """
        self.strategies = list(strategies) if strategies is not None else default_strategies()
        self.config = config or ExtractionConfig()

    def run(self, html: str | bytes) -> ExtractionContext:
        """Extract a recipe and return the full trace of the run.

        Args:
            html: Raw page HTML

        Returns:
            Context with attempts, chosen strategy and final result

        Raises:
            DocumentParseError: If the HTML cannot be parsed at all
            ExtractionError: If a strategy raises instead of returning
        """
        ctx = ExtractionContext(config=self.config)
        ctx.soup = parse_document(html, self.config.parser)

        for strategy in self.strategies:
            try:
                candidate = strategy.extract(ctx.soup)
            except PantryParserError:
                raise
            except Exception as e:
                logger.exception(f"Strategy {strategy.name} failed")
                raise ExtractionError(
                    f"Strategy {strategy.name} failed",
                    strategy=strategy.name,
                    error=str(e),
                ) from e

            has_content = candidate is not None and candidate.has_content
            ctx.attempts.append(
                StrategyAttempt(
                    name=strategy.name,
                    found=candidate is not None,
                    has_content=has_content,
                )
            )
            if candidate is None:
                logger.info(f"Strategy {strategy.name}: nothing found")
            else:
                logger.info(f"Strategy {strategy.name}: has_content={has_content}")

            # The last strategy's candidate is kept even when empty
            ctx.candidate = candidate
            ctx.strategy = strategy.name if candidate is not None else None
            if has_content:
                break

        if ctx.candidate is None:
            ctx.result = ExtractionFailure(FailureKind.NO_RECIPE_FOUND)
            logger.info("No strategy returned a recipe candidate")
            return ctx

        record = finalize(ctx.candidate, self.config)
        if not record.ingredients and not record.instructions:
            ctx.result = ExtractionFailure(FailureKind.NO_RECIPE_FOUND)
            logger.info("Recipe has no ingredients or instructions after cleanup")
        else:
            ctx.result = record
            logger.info(
                f"Extracted '{record.title}' via {ctx.strategy}: "
                f"{len(record.ingredients)} ingredients, "
                f"{len(record.instructions)} instructions"
            )
        return ctx

    def extract(self, html: str | bytes) -> ExtractionResult:
        """Extract a recipe, returning a record or ``ExtractionFailure``.

        Raises:
            DocumentParseError: If the HTML cannot be parsed at all
        """
        result = self.run(html).result
        assert result is not None
        return result

    def extract_or_raise(self, html: str | bytes) -> RecipeRecord:
        """Extract a recipe, raising when none is found.

        Raises:
            RecipeNotFoundError: If no strategy produced usable content
            DocumentParseError: If the HTML cannot be parsed at all
        """
        ctx = self.run(html)
        if isinstance(ctx.result, RecipeRecord):
            return ctx.result
        raise RecipeNotFoundError(
            "Could not extract recipe from the provided page",
            strategies=", ".join(attempt.name for attempt in ctx.attempts),
        )


def extract_recipe(html: str | bytes, config: ExtractionConfig | None = None) -> ExtractionResult:
    """Extract a recipe with the default strategies.

    Example:
        >>> result = extract_recipe(html)
        >>> isinstance(result, RecipeRecord)
        True
    """
    return RecipePipeline(config=config).extract(html)
