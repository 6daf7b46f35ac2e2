"""
Pantry Parser - Extract structured recipes from recipe web pages.

This package turns the raw HTML of a single recipe page into a structured
record (title, ingredients, instructions, timings, servings, image). It tries
embedded JSON-LD first, then microdata, then list-scoring heuristics, and
reports pages without a usable recipe as an ``ExtractionFailure``.
"""

__version__ = "0.1.0"

from .config import ExtractionConfig
from .exceptions import DocumentParseError, PantryParserError, RecipeNotFoundError
from .models import ExtractionFailure, ExtractionResult, FailureKind, RecipeRecord
from .pipeline import RecipePipeline, extract_recipe

__all__ = [
    "DocumentParseError",
    "ExtractionConfig",
    "ExtractionFailure",
    "ExtractionResult",
    "FailureKind",
    "PantryParserError",
    "RecipeNotFoundError",
    "RecipePipeline",
    "RecipeRecord",
    "extract_recipe",
]
