"""Configuration management for staticdeploy."""

import os
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from staticdeploy.config.file_ops import write_text_file
from staticdeploy.config.paths import default_config_path
from staticdeploy.platform.logging import logger


FAST_PATH_MARKERS_DEFAULT: tuple[str, ...] = ("Hyva_Theme",)
FAST_PATH_VENDORS_DEFAULT: tuple[str, ...] = ("Hyva",)
TOOLCHAIN_BINARY_DEFAULT: str = "bin/magento"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


def _default_workers() -> int:
    return os.cpu_count() or 1


@dataclass
class Config:
    """Application configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # Worker pool size used when the command line does not supply --jobs
    workers: int = field(default_factory=_default_workers)

    # Copy development artefacts (.ts, .less, node_modules, ...) as well
    include_dev: bool = False

    # Theme classification
    fast_path_markers: list[str] = field(default_factory=lambda: list(FAST_PATH_MARKERS_DEFAULT))
    fast_path_vendors: list[str] = field(default_factory=lambda: list(FAST_PATH_VENDORS_DEFAULT))

    # Fallback toolchain, relative to the installation root unless absolute
    toolchain_binary: str = TOOLCHAIN_BINARY_DEFAULT

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to file.

        Args:
            target: Destination file. Defaults to the portable config path.

        Returns:
            Path: The file that was written.
        """
        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target or default_config_path()
        try:
            write_text_file(destination, self._render_toml(config_dict))
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", destination)
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# staticdeploy configuration file")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/var/log/staticdeploy.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Number of parallel deployment workers")
        lines.append(f"workers = {self._format_toml_value(config['workers'])}")
        lines.append("")

        lines.append("# Copy development files (.ts, .less, .md, node_modules, ...)")
        lines.append(f"include_dev = {self._format_toml_value(config['include_dev'])}")
        lines.append("")

        lines.append("# Strings in theme.xml that mark a theme for direct file copy")
        lines.append(
            f"fast_path_markers = {self._format_toml_value(config['fast_path_markers'])}"
        )
        lines.append("# Vendors whose themes (and their descendants) use direct file copy")
        lines.append(
            f"fast_path_vendors = {self._format_toml_value(config['fast_path_vendors'])}"
        )
        lines.append("")

        lines.append("# External toolchain used for themes that need compilation")
        lines.append(
            f"toolchain_binary = {self._format_toml_value(config['toolchain_binary'])}"
        )
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""

        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        if isinstance(value, (list, tuple)):
            return "[" + ", ".join(self._format_toml_value(item) for item in value) + "]"
        return str(value)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        Args:
            config_file: Explicit file to read. Defaults to the portable path.

        Returns:
            Config: Loaded configuration object, or defaults when the file is absent.
        """
        target = config_file or default_config_path()
        if cls._instance is not None and cls._loaded_from == target:
            return cls._instance

        if not target.exists():
            logger.debug("No configuration file at %s; using defaults", target)
            instance = cls()
        else:
            try:
                with open(target, "rb") as f:
                    raw = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise

            known = {f.name for f in fields(cls)}
            for key in sorted(set(raw) - known):
                logger.warning("Ignoring unknown configuration key '%s' in %s", key, target)
            instance = cls(**{key: value for key, value in raw.items() if key in known})
            logger.debug("Configuration loaded from %s", target)

        cls._instance = instance
        cls._loaded_from = target
        return instance


# Global configuration instance
config = Config.load()
