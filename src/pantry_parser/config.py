"""Configuration management for pantry_parser.

Configuration priority (highest to lowest):
1. Explicit arguments (CLI flags, ``update()``)
2. Environment variables (PANTRY_PARSER_*)
3. Project config file (.pantry-parser.toml)
4. User config file (~/.config/pantry-parser/config.toml)
5. Default values

Example:
    >>> config = ExtractionConfig.load()
    >>> config.update(parser="lxml")
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .exceptions import ConfigurationError
from .vocabulary import ADVERTISEMENT_TEXT, DEFAULT_TITLE

VALID_PARSERS = ("html.parser", "lxml", "html5lib")


@dataclass
class ExtractionConfig:
    """Configuration for recipe extraction.

    Attributes:
        parser: BeautifulSoup tree builder used to parse pages
        default_title: Title given to records whose page has none
        boilerplate: Exact entry texts dropped from ingredients/instructions
        min_ingredients: Ingredient count the quality validator expects
        min_instructions: Instruction count the quality validator expects
        log_file: Where the CLI writes its log

    Example:
        >>> config = ExtractionConfig(boilerplate=("Advertisement", "Sponsored"))
    """

    # Parsing
    parser: str = "html.parser"

    # Post-processing
    default_title: str = DEFAULT_TITLE
    boilerplate: tuple[str, ...] = (ADVERTISEMENT_TEXT,)

    # Quality settings
    min_ingredients: int = 2
    min_instructions: int = 2

    # Output settings
    log_file: Path = field(default_factory=lambda: Path("pantry_parser.log"))

    def __post_init__(self) -> None:
        """Validate configuration values after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate configuration values.

        Raises:
            ConfigurationError: If any configuration value is invalid
        """
        if self.parser not in VALID_PARSERS:
            raise ConfigurationError(
                f"Invalid parser: {self.parser}",
                parser=self.parser,
                valid_parsers=", ".join(VALID_PARSERS),
            )

        if not isinstance(self.default_title, str) or not self.default_title.strip():
            raise ConfigurationError("default_title must be a non-blank string")

        # TOML and env values arrive as lists or a single string
        if isinstance(self.boilerplate, str):
            self.boilerplate = (self.boilerplate,)
        elif not isinstance(self.boilerplate, tuple):
            self.boilerplate = tuple(self.boilerplate)
        if not all(isinstance(entry, str) for entry in self.boilerplate):
            raise ConfigurationError("boilerplate entries must be strings")

        if self.min_ingredients < 0:
            raise ConfigurationError(
                "min_ingredients must be non-negative",
                min_ingredients=self.min_ingredients,
            )

        if self.min_instructions < 0:
            raise ConfigurationError(
                "min_instructions must be non-negative",
                min_instructions=self.min_instructions,
            )

        if not isinstance(self.log_file, Path):  # type: ignore[reportUnnecessaryIsInstance]
            self.log_file = Path(self.log_file)

    @classmethod
    def load(
        cls,
        config_path: str | Path | None = None,
        load_user_config: bool = True,
        load_env: bool = True,
    ) -> "ExtractionConfig":
        """Load configuration from file(s) and environment variables.

        Args:
            config_path: Path to project config file (optional)
            load_user_config: Whether to load user config file
            load_env: Whether to load environment variables

        Returns:
            Loaded and validated configuration

        Raises:
            ConfigurationError: If configuration is invalid
        """
        config_dict: dict[str, Any] = {}

        if load_user_config:
            user_config_path = Path.home() / ".config" / "pantry-parser" / "config.toml"
            if user_config_path.exists():
                config_dict.update(cls._load_toml(user_config_path))

        if config_path:
            project_path = Path(config_path)
            if not project_path.exists():
                raise ConfigurationError("Config file not found", path=str(project_path))
            config_dict.update(cls._load_toml(project_path))
        else:
            default_path = Path(".pantry-parser.toml")
            if default_path.exists():
                config_dict.update(cls._load_toml(default_path))

        if load_env:
            config_dict.update(cls._load_env())

        unknown = set(config_dict) - set(cls.__dataclass_fields__)
        if unknown:
            raise ConfigurationError(
                "Unknown configuration keys",
                keys=", ".join(sorted(unknown)),
            )

        return cls(**config_dict)

    @staticmethod
    def _load_toml(path: Path) -> dict[str, Any]:
        """Load configuration from TOML file.

        A ``[pantry-parser]`` table is used when present, otherwise the
        top-level keys.

        Raises:
            ConfigurationError: If TOML file is invalid
        """
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {path}",
                path=str(path),
                error=str(e),
            ) from e

        if "pantry-parser" in data:
            return data["pantry-parser"]
        return data

    @staticmethod
    def _load_env() -> dict[str, Any]:
        """Load configuration from PANTRY_PARSER_* environment variables.

        For example:
        - PANTRY_PARSER_PARSER=lxml
        - PANTRY_PARSER_MIN_INGREDIENTS=3
        - PANTRY_PARSER_BOILERPLATE=Advertisement,Sponsored
        """
        config: dict[str, Any] = {}
        prefix = "PANTRY_PARSER_"

        for key, value in os.environ.items():
            if not key.startswith(prefix):
                continue

            config_key = key[len(prefix) :].lower()

            if config_key == "boilerplate":
                config[config_key] = tuple(
                    entry.strip() for entry in value.split(",") if entry.strip()
                )
            elif value.isdigit():
                config[config_key] = int(value)
            else:
                config[config_key] = value

        return config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a plain dictionary."""
        result: dict[str, Any] = {}
        for key, value in self.__dict__.items():
            if isinstance(value, Path):
                result[key] = str(value)
            elif isinstance(value, tuple):
                result[key] = list(value)
            else:
                result[key] = value
        return result

    def update(self, **kwargs: Any) -> None:
        """Update configuration values.

        Raises:
            ConfigurationError: If a key is unknown or a value is invalid
        """
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)
            else:
                raise ConfigurationError(
                    f"Unknown configuration key: {key}",
                    key=key,
                    valid_keys=", ".join(self.__dataclass_fields__.keys()),
                )

        self._validate()
