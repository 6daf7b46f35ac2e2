"""Unit tests for pantry_parser.cli module.

Tests argument parsing, logging setup, source reading and exit codes.
"""

import io
import json
import logging
import sys
from pathlib import Path

import pytest

from pantry_parser.cli import (
    EXIT_BAD_INPUT,
    EXIT_NO_RECIPE,
    main,
    parse_args,
    read_source,
    setup_logging,
)


@pytest.fixture
def page_file(tmp_path: Path):
    """Return a helper that writes HTML to a file and returns its path."""

    def _write(html: str, name: str = "page.html") -> Path:
        path = tmp_path / name
        path.write_text(html, encoding="utf-8")
        return path

    return _write


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_configures_file_handler(self, tmp_path: Path) -> None:
        """setup_logging adds a FileHandler to root logger and creates the file."""
        log_file = tmp_path / "test.log"

        root_logger = logging.getLogger()
        original_handlers = root_logger.handlers.copy()
        root_logger.handlers.clear()

        try:
            setup_logging(str(log_file))

            handler_types = [type(h).__name__ for h in root_logger.handlers]
            assert "FileHandler" in handler_types
            assert log_file.exists()
        finally:
            for handler in root_logger.handlers:
                handler.close()
            root_logger.handlers = original_handlers


class TestParseArgs:
    """Tests for parse_args function."""

    def test_defaults(self) -> None:
        args = parse_args(["page.html"])

        assert args.source == "page.html"
        assert args.json is False
        assert args.config is None
        assert args.parser is None
        assert args.log_file is None

    def test_all_options(self) -> None:
        args = parse_args(
            ["-", "--json", "--config", "c.toml", "--parser", "lxml", "--log-file", "x.log"]
        )

        assert args.source == "-"
        assert args.json is True
        assert args.config == "c.toml"
        assert args.parser == "lxml"
        assert args.log_file == "x.log"

    def test_source_is_required(self) -> None:
        with pytest.raises(SystemExit):
            parse_args([])


class TestReadSource:
    """Tests for read_source function."""

    def test_reads_file_as_bytes(self, page_file) -> None:
        path = page_file("<h1>Hi</h1>")
        assert read_source(str(path)) == b"<h1>Hi</h1>"

    def test_reads_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "stdin", io.StringIO("<h1>Hi</h1>"))
        assert read_source("-") == "<h1>Hi</h1>"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            read_source(str(tmp_path / "missing.html"))


class TestMain:
    """Tests for the main entry point."""

    def test_json_output(self, clean_env, page_file, jsonld_page, capsys) -> None:
        main([str(page_file(jsonld_page)), "--json"])

        assert json.loads(capsys.readouterr().out) == {
            "title": "Soup",
            "ingredients": ["1 cup broth"],
            "instructions": ["Boil it"],
        }

    def test_stdin_source(self, clean_env, monkeypatch, jsonld_page, capsys) -> None:
        monkeypatch.setattr(sys, "stdin", io.StringIO(jsonld_page))
        main(["-", "--json"])

        assert json.loads(capsys.readouterr().out)["title"] == "Soup"

    def test_rich_output(self, clean_env, page_file, heuristic_page, capsys) -> None:
        main([str(page_file(heuristic_page))])

        out = capsys.readouterr().out
        assert "Bread" in out
        assert "2 cups flour" in out
        assert "Step 2: bake" in out

    def test_no_recipe_exit_code(self, clean_env, page_file, title_only_page, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([str(page_file(title_only_page)), "--json"])

        assert exc_info.value.code == EXIT_NO_RECIPE
        assert json.loads(capsys.readouterr().out) == {
            "error": "Could not extract recipe from the provided page",
            "kind": "NoRecipeFound",
        }

    def test_no_recipe_rich_output(self, clean_env, page_file, title_only_page, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([str(page_file(title_only_page))])

        assert exc_info.value.code == EXIT_NO_RECIPE
        assert "No recipe found" in capsys.readouterr().out

    def test_missing_file_exit_code(self, clean_env, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "missing.html")])

        assert exc_info.value.code == EXIT_BAD_INPUT

    def test_invalid_parser_exit_code(self, clean_env, page_file, jsonld_page) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([str(page_file(jsonld_page)), "--parser", "regex"])

        assert exc_info.value.code == EXIT_BAD_INPUT

    def test_missing_config_exit_code(self, clean_env, page_file, jsonld_page, tmp_path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([str(page_file(jsonld_page)), "--config", str(tmp_path / "nope.toml")])

        assert exc_info.value.code == EXIT_BAD_INPUT

    def test_config_file_is_applied(self, clean_env, page_file, tmp_path, capsys) -> None:
        """Settings from --config reach the pipeline."""
        config = tmp_path / "custom.toml"
        config.write_text('default_title = "Mystery Dish"\n')
        html = (
            '<script type="application/ld+json">'
            '{"@type": "Recipe", "recipeIngredient": ["1 egg"]}</script>'
        )

        main([str(page_file(html)), "--json", "--config", str(config)])

        assert json.loads(capsys.readouterr().out)["title"] == "Mystery Dish"
