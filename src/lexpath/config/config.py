"""Configuration management for lexpath."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from lexpath.config.paths import default_config_path
from lexpath.platform.logging import logger

MANIFEST_INDENT_DEFAULT: int = 2


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
    """Runtime configuration for the CLI and manifest writer."""

    # Filesystem URI given to paths parsed without one (None = local filesystem root)
    default_filesystem_uri: str | None = None

    # Log file path
    log_file: Path | None = _path_field()

    # Indentation used when writing output.json manifests
    manifest_indent: int = MANIFEST_INDENT_DEFAULT

    _instance: ClassVar[Config | None] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects and clamp invalid values."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

        if not self.default_filesystem_uri:
            self.default_filesystem_uri = None

        if not isinstance(self.manifest_indent, int) or self.manifest_indent < 0:
            self.manifest_indent = MANIFEST_INDENT_DEFAULT

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to file.

        Args:
            target: Destination file. Defaults to ``default_config_path()``.

        Returns:
            Path: The file that was written.
        """
        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target or default_config_path()
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            _ = destination.write_text(self._render_toml(config_dict), encoding="utf-8")
            logger.info("Configuration saved to %s", destination)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# lexpath Configuration File")
        lines.append("")

        lines.append("# Filesystem URI used for paths given without one (optional)")
        lines.append('# Example: default_filesystem_uri = "zip:file:///tmp/app.zip!/"')
        if config["default_filesystem_uri"] is not None:
            lines.append(
                f"default_filesystem_uri = {self._format_toml_value(config['default_filesystem_uri'])}"
            )
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/lexpath.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Indentation of written output.json manifests")
        lines.append(f"manifest_indent = {self._format_toml_value(config['manifest_indent'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""

        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls) -> Config:
        """Load configuration from file, creating a default one if it is missing.

        Returns:
            Config: Loaded configuration object.

        Raises:
            tomllib.TOMLDecodeError: If the file is not valid TOML.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
                instance = cls(**{key: value for key, value in config_dict.items() if key in known})
                logger.debug("Configuration loaded from %s", config_file)
            else:
                instance = cls()
                _ = instance.save(config_file)
                logger.info("Created default configuration at %s", config_file)

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        cls._instance = instance
        cls._loaded_from = config_file
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` re-reads the file."""

        cls._instance = None
        cls._loaded_from = None


__all__ = ["Config", "MANIFEST_INDENT_DEFAULT"]
