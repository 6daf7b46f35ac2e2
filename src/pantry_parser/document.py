"""Thin helpers around BeautifulSoup for the extractors.

The extractors only need tag, attribute and text queries; those are plain
BeautifulSoup calls. This module owns the one place the markup gets parsed
so that parse failures map onto ``DocumentParseError``.
"""

from bs4 import BeautifulSoup, FeatureNotFound, ParserRejectedMarkup
from bs4.element import Tag

from .exceptions import DocumentParseError


def parse_document(html: str | bytes, parser: str = "html.parser") -> BeautifulSoup:
    """Parse raw page markup into a queryable document.

    Args:
        html: Page HTML as text or undecoded bytes
        parser: BeautifulSoup tree builder name

    Returns:
        Parsed document

    Raises:
        DocumentParseError: If the input is not markup or the parser rejects it
    """
    if not isinstance(html, str | bytes):
        raise DocumentParseError(
            "HTML input must be str or bytes", input_type=type(html).__name__
        )

    try:
        return BeautifulSoup(html, parser)
    except ParserRejectedMarkup as e:
        raise DocumentParseError("Parser rejected markup", parser=parser, error=str(e)) from e
    except FeatureNotFound as e:
        raise DocumentParseError("HTML parser is not installed", parser=parser) from e


def element_text(element: Tag) -> str:
    """Concatenated text of an element and its descendants, untrimmed."""
    return element.get_text()


def page_text(soup: BeautifulSoup) -> str:
    """Plain text of the whole page."""
    return soup.get_text()


def meta_content(soup: BeautifulSoup, prop: str) -> str | None:
    """Return the ``content`` of ``<meta property=prop>``, if any."""
    meta = soup.find("meta", attrs={"property": prop})
    if isinstance(meta, Tag):
        content = meta.get("content")
        if isinstance(content, str) and content:
            return content
    return None
