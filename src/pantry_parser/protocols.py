"""Protocol definitions for pantry_parser.

The pipeline only depends on this interface, so extra strategies (for
example one backed by a language model, kept outside this package) can be
slotted in without changing the coordinator.

Example:
    >>> class TitleOnly:
    ...     name = "title-only"
    ...
    ...     def extract(self, soup: BeautifulSoup) -> RecipeCandidate | None:
    ...         return RecipeCandidate(title=soup.title.get_text())
    ...
    >>> isinstance(TitleOnly(), RecipeStrategy)
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from bs4 import BeautifulSoup

    from .models import RecipeCandidate


@runtime_checkable
class RecipeStrategy(Protocol):
    """Protocol for one way of pulling a recipe out of a parsed page.

    Attributes:
        name: Short identifier used in logs and extraction traces
    """

    name: str

    def extract(self, soup: BeautifulSoup) -> RecipeCandidate | None:
        """Extract a recipe candidate from the document.

        Args:
            soup: Parsed page

        Returns:
            A candidate (possibly with empty lists), or None when this
            strategy finds nothing to work with. "Nothing found" is never
            an exception.
        """
        ...
