"""Configuration management for artist-credits."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final, Literal, cast, get_args

from artist_credits.config.file_ops import write_text_file
from artist_credits.config.paths import default_config_path
from artist_credits.platform.logging import logger

OutputFormat = Literal["tree", "json", "credit"]

OUTPUT_FORMATS: Final[tuple[str, ...]] = get_args(OutputFormat)
OUTPUT_FORMAT_DEFAULT: Final[OutputFormat] = "tree"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # Default rendering for the ``parse`` command
    output_format: OutputFormat = OUTPUT_FORMAT_DEFAULT

    # Report tokens left after the top-level artist list as warnings
    warn_on_trailing_tokens: bool = True

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths and reject unknown output formats.

        Only fields flagged with ``metadata={"path": True}`` by
        ``_path_field`` are converted to ``Path``.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        if self.output_format not in OUTPUT_FORMATS:
            logger.warning(
                "Unknown output_format %r, falling back to %r",
                self.output_format,
                OUTPUT_FORMAT_DEFAULT,
            )
            self.output_format = OUTPUT_FORMAT_DEFAULT

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            content = self._render_toml(config_dict)
            write_text_file(target, content)
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# artist-credits Configuration File")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append("# Where to store the application logs")
        lines.append('# Example: log_file = "/path/to/logs/artist_credits.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Default output of the parse command")
        lines.append("# One of: " + ", ".join(OUTPUT_FORMATS))
        lines.append(f"output_format = {self._format_toml_value(config['output_format'])}")
        lines.append("")

        lines.append("# Warn when text remains after the top-level artist list")
        lines.append("# Set to false to report leftover tokens at debug level only")
        lines.append(
            "warn_on_trailing_tokens = "
            + self._format_toml_value(config["warn_on_trailing_tokens"])
        )
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        A commented default file is written when none exists yet.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    raw = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(raw) - known)
                if unknown:
                    logger.warning(
                        "Ignoring unknown configuration keys in %s: %s",
                        config_file,
                        ", ".join(unknown),
                    )
                config_dict = {key: value for key, value in raw.items() if key in known}

                logger.debug("Configuration loaded from %s", config_file)
                instance = cls(**cast(dict[str, Any], config_dict))

                cls._instance = instance
                cls._loaded_from = config_file
                return instance

            config = cls()
            config.save()
            logger.debug("Created default configuration at %s", config_file)
            cls._instance = config
            cls._loaded_from = config_file
            return config

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


__all__ = ["Config", "OUTPUT_FORMATS", "OUTPUT_FORMAT_DEFAULT", "OutputFormat"]
