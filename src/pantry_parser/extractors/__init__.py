"""Recipe extraction strategies, in order of reliability."""

from .heuristic import HeuristicExtractor
from .jsonld import JsonLdExtractor
from .microdata import MicrodataExtractor

__all__ = [
    "HeuristicExtractor",
    "JsonLdExtractor",
    "MicrodataExtractor",
]
