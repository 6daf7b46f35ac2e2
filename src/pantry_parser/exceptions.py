"""Custom exceptions for pantry_parser.

Expected outcomes such as "this page has no recipe" are returned as values
(see ``pantry_parser.models.ExtractionFailure``). The exceptions here cover
the conditions that genuinely cannot be recovered from inside the pipeline,
plus an opt-in exception for callers that prefer raising over tagged results.

Example:
    >>> try:
    ...     raise DocumentParseError("Could not parse page", parser="lxml")
    ... except PantryParserError as e:
    ...     print(f"Error in {e.context}: {e}")
"""


class PantryParserError(Exception):
    """Base exception for all pantry_parser errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about where/when the error occurred
    """

    def __init__(self, message: str, **context: str | int | float | bool | None) -> None:
        """Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error description
            **context: Additional context (e.g., strategy="json-ld", parser="lxml")
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """Format error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class DocumentParseError(PantryParserError):
    """The input could not be turned into a document model.

    Raised when:
    - The input is neither text nor bytes
    - The configured HTML parser rejects the markup outright

    No extractor can run without a document, so this is the one error the
    pipeline lets propagate.
    """

    pass


class ExtractionError(PantryParserError):
    """Error while extracting a recipe from a parsed document.

    Raised when:
    - A strategy raises instead of returning a candidate or None
    """

    pass


class RecipeNotFoundError(ExtractionError):
    """No strategy produced usable ingredients or instructions.

    Only raised by ``RecipePipeline.extract_or_raise``; ``extract`` reports
    the same outcome as ``ExtractionFailure(FailureKind.NO_RECIPE_FOUND)``.

    Example:
        >>> raise RecipeNotFoundError(
        ...     "Could not extract recipe from the provided page",
        ...     strategies="json-ld, microdata, heuristic",
        ... )
    """

    pass


class ConfigurationError(PantryParserError):
    """Error in configuration or settings.

    Raised when:
    - Configuration file is invalid
    - Settings have invalid values
    - An unknown setting is updated
    """

    pass
