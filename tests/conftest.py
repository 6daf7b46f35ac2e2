"""Pytest configuration and fixtures for pantry_parser tests.

This module provides shared fixtures for testing the pantry_parser package:
- HTML pages covering each extraction strategy
- Environment cleanup for configuration tests
"""

import sys
from pathlib import Path

import pytest

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Remove PANTRY_PARSER_* variables and isolate HOME and the working directory.

    Use this fixture when testing configuration loading so that no user or
    project config file interferes with test expectations.
    """
    import os

    for key in list(os.environ.keys()):
        if key.startswith("PANTRY_PARSER_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def mock_env(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Provide a helper to set PANTRY_PARSER_* environment variables.

    Example:
        def test_env_loading(clean_env, mock_env):
            mock_env["PARSER"] = "lxml"
            # PANTRY_PARSER_PARSER is now set
    """

    class EnvSetter(dict[str, str]):
        def __setitem__(self, key: str, value: str) -> None:
            super().__setitem__(key, value)
            monkeypatch.setenv(f"PANTRY_PARSER_{key}", value)

    return EnvSetter()


# ============================================================================
# HTML Page Fixtures
# ============================================================================


@pytest.fixture
def jsonld_page() -> str:
    """A page whose recipe is only described by JSON-LD."""
    return (
        "<html><head>"
        '<script type="application/ld+json">'
        '{"@type":"Recipe","name":"Soup","recipeIngredient":["1 cup broth"],'
        '"recipeInstructions":["Boil it"]}'
        "</script>"
        "</head><body></body></html>"
    )


@pytest.fixture
def heuristic_page() -> str:
    """A page with no structured data, one ingredient list and one numbered list."""
    return """
    <html>
      <head><title>Bread | My Blog</title></head>
      <body>
        <h1>Bread</h1>
        <ul><li>2 cups flour</li><li>1 tsp salt</li></ul>
        <ul><li>Home</li><li>About</li></ul>
        <ol><li>Step 1: mix</li><li>Step 2: bake</li></ol>
      </body>
    </html>
    """


@pytest.fixture
def microdata_page() -> str:
    """A microdata recipe preceded by a JSON-LD block that is not valid JSON."""
    return """
    <html>
      <head>
        <script type="application/ld+json">{"@type": "Recipe", "name": </script>
      </head>
      <body>
        <div itemscope itemtype="http://schema.org/Recipe">
          <h2 itemprop="name">Pancakes</h2>
          <img itemprop="image" src="/pancakes.jpg">
          <meta itemprop="prepTime" content="PT5M">
          <meta itemprop="cookTime" content="PT10M">
          <span itemprop="recipeYield">4 servings</span>
          <ul>
            <li itemprop="recipeIngredient">1 cup milk</li>
            <li itemprop="recipeIngredient">1 egg</li>
          </ul>
          <div itemprop="recipeInstructions">Whisk everything together.</div>
          <div itemprop="recipeInstructions">Fry in a hot pan.</div>
        </div>
      </body>
    </html>
    """


@pytest.fixture
def title_only_page() -> str:
    """A page with a heading and no lists at all."""
    return "<html><body><h1>Just a title</h1><p>Nothing to cook here.</p></body></html>"


@pytest.fixture
def make_jsonld_page():
    """Return a helper that wraps JSON texts in a page as JSON-LD blocks."""

    def _make(*payloads: str) -> str:
        scripts = "".join(
            f'<script type="application/ld+json">{payload}</script>' for payload in payloads
        )
        return f"<html><head>{scripts}</head><body></body></html>"

    return _make
