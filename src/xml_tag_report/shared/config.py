"""Configuration for XML tag reporting.

This module provides the report configuration object. A bare run uses the
built-in file and field lists; the CLI layers a JSON configuration file and
command-line overrides on top of them.
"""

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

# Sample document shipped with the package, resolved against DATA_DIR
DEFAULT_FILES = ["usuarios-554-1721673238.xml"]
DEFAULT_TAGS = ["cd_corretor", "nm_usuario", "cd_usuario"]
DEFAULT_PLACEHOLDER = "N/A"
DEFAULT_SEPARATOR = ", "
OUTPUT_FORMATS = ("text", "json", "csv")

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.field_name = field_name


@dataclass
class ReportConfig:
    """Settings for one report run."""

    files: List[str] = field(default_factory=lambda: list(DEFAULT_FILES))
    tags: List[str] = field(default_factory=lambda: list(DEFAULT_TAGS))
    base_dir: Path = DATA_DIR
    placeholder: str = DEFAULT_PLACEHOLDER
    separator: str = DEFAULT_SEPARATOR
    concurrent: bool = False
    output_format: str = "text"

    def __post_init__(self) -> None:
        """Validate report configuration."""
        if not isinstance(self.base_dir, (str, Path)):
            raise ConfigValidationError("base_dir must be a path string", "base_dir")
        if not isinstance(self.files, (list, tuple)):
            raise ConfigValidationError("files must be a list of paths", "files")
        for path in self.files:
            if not isinstance(path, (str, Path)):
                raise ConfigValidationError(f"invalid file path: {path!r}", "files")
        if not isinstance(self.tags, (list, tuple)):
            raise ConfigValidationError("tags must be a list of names", "tags")
        for name in ("placeholder", "separator", "output_format"):
            if not isinstance(getattr(self, name), str):
                raise ConfigValidationError(f"{name} must be a string", name)
        if not isinstance(self.concurrent, bool):
            raise ConfigValidationError("concurrent must be true or false", "concurrent")

        self.base_dir = Path(self.base_dir)
        self.files = [str(path) for path in self.files]
        self.tags = list(self.tags)

        if not self.tags:
            raise ConfigValidationError("tags must not be empty", "tags")
        for tag in self.tags:
            if not isinstance(tag, str) or not tag.strip():
                raise ConfigValidationError(f"invalid tag name: {tag!r}", "tags")
        if len(set(self.tags)) != len(self.tags):
            raise ConfigValidationError("tags must be unique", "tags")
        if not self.placeholder:
            raise ConfigValidationError("placeholder must not be empty", "placeholder")
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigValidationError(
                f"output_format must be one of {list(OUTPUT_FORMATS)}",
                "output_format"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a JSON-compatible dictionary."""
        data = asdict(self)
        data["base_dir"] = str(self.base_dir)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base_dir: Optional[Path] = None) -> "ReportConfig":
        """Create configuration from a dictionary.

        Args:
            data: Configuration values; unknown keys are rejected
            base_dir: Directory used when ``data`` has no ``base_dir`` entry

        Returns:
            ReportConfig instance created from dictionary
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigValidationError(f"unknown configuration keys: {unknown}")

        values = dict(data)
        if "base_dir" in values:
            if not isinstance(values["base_dir"], (str, Path)):
                raise ConfigValidationError("base_dir must be a path string", "base_dir")
            values["base_dir"] = Path(values["base_dir"])
            if base_dir is not None and not values["base_dir"].is_absolute():
                values["base_dir"] = base_dir / values["base_dir"]
        elif base_dir is not None:
            values["base_dir"] = base_dir

        try:
            return cls(**values)
        except TypeError as e:
            raise ConfigValidationError(f"invalid configuration: {e}") from e

    @classmethod
    def from_file(cls, config_path: Path) -> "ReportConfig":
        """Load configuration from a JSON file.

        Relative ``files`` entries and a relative ``base_dir`` resolve against
        the directory holding the configuration file. A file that sets neither
        keeps the built-in sample list and its directory.
        """
        try:
            with config_path.open(encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigError(f"Could not read config file {config_path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Config file {config_path} is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ConfigValidationError("config file must contain a JSON object")

        if "files" not in data and "base_dir" not in data:
            return cls.from_dict(data)
        return cls.from_dict(data, base_dir=config_path.resolve().parent)
