#!/usr/bin/env python3
"""CLI for pantry-parser: extract a structured recipe from a saved web page.

The CLI is responsible for:
- Argument parsing
- Reading the page from a file or stdin (it never fetches URLs)
- Rich display of the record, or JSON output for scripts
- Mapping outcomes onto exit codes

Exit codes: 0 when a recipe was extracted, 1 when the page has no recipe,
2 when the input or configuration is unusable.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .config import ExtractionConfig
from .durations import format_duration
from .exceptions import ConfigurationError, DocumentParseError, ExtractionError
from .models import ExtractionFailure, RecipeRecord
from .pipeline import ExtractionContext, RecipePipeline
from .validator import RecipeQualityScore, RecipeValidator

EXIT_OK = 0
EXIT_NO_RECIPE = 1
EXIT_BAD_INPUT = 2

console = Console()


def setup_logging(log_file: str = "pantry_parser.log") -> None:
    """Send detailed logs to a file; the console is reserved for Rich output.

    Args:
        log_file: Path to the log file. Defaults to "pantry_parser.log".
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.FileHandler(log_file, mode="w")],
    )


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Extract a structured recipe from a saved recipe web page",
        prog="pantry-parse",
    )
    parser.add_argument("source", type=str, help="Path to an HTML file, or - for stdin")
    parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON instead of a table"
    )
    parser.add_argument("--config", type=str, default=None, help="Path to a TOML config file")
    parser.add_argument(
        "--parser",
        type=str,
        default=None,
        help="HTML parser to use (html.parser, lxml, html5lib)",
    )
    parser.add_argument("--log-file", type=str, default=None, help="Log file path")
    return parser.parse_args(argv)


def read_source(source: str) -> str | bytes:
    """Read page HTML from a file path or stdin.

    Files are read as bytes so the parser can detect the page encoding.

    Raises:
        FileNotFoundError: If the path does not exist
    """
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_bytes()


def display_error(title: str, message: str) -> None:
    """Display an error panel."""
    console.print()
    console.print(Panel(message, title=f"[bold red]{title}[/bold red]", border_style="red"))
    console.print()


def display_recipe(
    record: RecipeRecord, strategy: str | None, score: RecipeQualityScore
) -> None:
    """Display an extracted recipe with its metadata and quality."""
    console.print()
    console.print(
        Panel.fit(
            f"[bold cyan]{record.title}[/bold cyan]\n[dim]Source: {strategy}[/dim]",
            title="[bold]Pantry Recipe Parser[/bold]",
            border_style="cyan",
        )
    )

    details = Table(show_header=False)
    details.add_column("Field", style="cyan", width=14)
    details.add_column("Value", style="green")
    details.add_row("Prep time", format_duration(record.prepTime) or "-")
    details.add_row("Cook time", format_duration(record.cookTime) or "-")
    details.add_row("Servings", str(record.servings) if record.servings is not None else "-")
    details.add_row("Image", record.imageUrl or "-")
    details.add_row("Quality", f"{score.label} ({score.completeness_score:.2f})")
    console.print(details)

    ingredients = Table(title="Ingredients", show_header=False)
    ingredients.add_column("Ingredient")
    for ingredient in record.ingredients:
        ingredients.add_row(ingredient)
    console.print(ingredients)

    instructions = Table(title="Instructions", show_header=False)
    instructions.add_column("#", style="cyan", justify="right")
    instructions.add_column("Step")
    for number, step in enumerate(record.instructions, 1):
        instructions.add_row(str(number), step)
    console.print(instructions)

    for issue in score.issues:
        console.print(f"[yellow]![/yellow] {issue}")
    console.print()


def render(ctx: ExtractionContext, as_json: bool) -> int:
    """Print the outcome of a run and return the exit code."""
    result = ctx.result

    if isinstance(result, ExtractionFailure):
        if as_json:
            sys.stdout.write(json.dumps(result.to_dict(), indent=2) + "\n")
        else:
            display_error("No recipe found", result.message)
        return EXIT_NO_RECIPE

    assert isinstance(result, RecipeRecord)
    if as_json:
        sys.stdout.write(json.dumps(result.to_dict(), indent=2, ensure_ascii=False) + "\n")
    else:
        validator = RecipeValidator(
            min_ingredients=ctx.config.min_ingredients,
            min_instructions=ctx.config.min_instructions,
            default_title=ctx.config.default_title,
        )
        display_recipe(result, ctx.strategy, validator.score_recipe(result))
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for the pantry-parse command.

    Raises:
        SystemExit: With a non-zero code when no recipe was extracted
    """
    args = parse_args(argv)

    try:
        config = ExtractionConfig.load(args.config)
        if args.parser:
            config.update(parser=args.parser)
        if args.log_file:
            config.update(log_file=args.log_file)
    except ConfigurationError as e:
        display_error("Configuration error", str(e))
        raise SystemExit(EXIT_BAD_INPUT) from e

    setup_logging(str(config.log_file))

    try:
        html = read_source(args.source)
    except OSError as e:
        display_error(
            "Error",
            f"[bold red]Could not read:[/bold red]\n{args.source}\n\n[dim]{e}[/dim]",
        )
        raise SystemExit(EXIT_BAD_INPUT) from e

    logging.info(f"Extracting recipe from {args.source}")
    try:
        ctx = RecipePipeline(config=config).run(html)
    except (DocumentParseError, ExtractionError) as e:
        logging.exception("Could not process input document")
        display_error("Parse error", str(e))
        raise SystemExit(EXIT_BAD_INPUT) from e

    code = render(ctx, args.json)
    if code != EXIT_OK:
        raise SystemExit(code)


if __name__ == "__main__":
    main()
