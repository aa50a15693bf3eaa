"""
Configuration file support for product-config.

Provides hierarchical configuration loading from:
1. Project config: .product-config.toml or product-config.toml in project root
2. User config: ~/.config/product-config/config.toml

CLI arguments override config file values, and project config overrides user config.
"""

import sys
import warnings
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Any

from .exceptions import ConfigurationError
from .pricing import as_price

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]

# Config file names to search for in project directories
CONFIG_FILENAMES = [".product-config.toml", "product-config.toml"]

# User-level config path
USER_CONFIG_PATH = Path.home() / ".config" / "product-config" / "config.toml"

# All known config keys for validation
KNOWN_KEYS = {
    "defaults": {"verbose", "quiet"},
    "validation": {"min_price", "inclusive"},
}


@dataclass
class DefaultsConfig:
    """Default options for CLI commands."""

    verbose: bool = False
    quiet: bool = False


@dataclass
class ValidationConfig:
    """Price threshold used to build the validation policy."""

    min_price: Decimal = Decimal(0)
    inclusive: bool = False


@dataclass
class Config:
    """Merged configuration from all sources."""

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)

    # Track which file each setting came from (for --show)
    _sources: dict = field(default_factory=dict, repr=False)

    @classmethod
    def load(cls, start_dir: Path | None = None) -> "Config":
        """
        Load configuration with precedence: project > user > defaults.

        Args:
            start_dir: Directory to start searching from (default: current directory)

        Returns:
            Merged configuration object
        """
        if start_dir is None:
            start_dir = Path.cwd()

        config = cls()
        sources: dict[str, str] = {}

        # Load user config first (lower precedence)
        if USER_CONFIG_PATH.exists():
            user_data = _load_toml_file(USER_CONFIG_PATH)
            if user_data:
                _merge_config(config, user_data, str(USER_CONFIG_PATH), sources)

        # Load project config (higher precedence)
        project_config = _find_project_config(start_dir)
        if project_config:
            project_data = _load_toml_file(project_config)
            if project_data:
                _merge_config(config, project_data, str(project_config), sources)

        config._sources = sources
        return config

    def get_source(self, key: str) -> str:
        """Get the source file for a config key."""
        return self._sources.get(key, "default")


def _find_project_config(start_dir: Path) -> Path | None:
    """
    Find project config by walking up the directory tree.

    Stops at .git directory or filesystem root.
    """
    current = start_dir.resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        # Stop at .git directory (project root)
        if (current / ".git").exists():
            break

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def _load_toml_file(path: Path) -> dict[str, Any] | None:
    """
    Load a TOML file.

    Returns:
        Parsed TOML data, or None when no TOML parser is available

    Raises:
        ConfigurationError: If the file cannot be read or is not valid TOML
    """
    if tomllib is None:
        warnings.warn(
            "tomli package not installed. Config file support requires 'pip install tomli' for Python < 3.11.",
            stacklevel=2,
        )
        return None

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(
            f"Invalid TOML in {path}: {e}",
            context={"file": str(path)},
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read config file {path}: {e}",
            context={"file": str(path)},
        ) from e


def _merge_config(
    config: Config, data: dict[str, Any], source: str, sources: dict[str, str]
) -> None:
    """
    Merge loaded config data into Config object.

    Args:
        config: Config object to update
        data: Raw config data from TOML
        source: Source file path (for tracking)
        sources: Dict to update with source info
    """
    for key in data:
        if key not in KNOWN_KEYS:
            warnings.warn(f"Unknown config key '{key}' in {source}", stacklevel=3)

    if "defaults" in data:
        defaults_data = data["defaults"]
        _warn_unknown_keys(defaults_data, KNOWN_KEYS["defaults"], "defaults", source)

        if "verbose" in defaults_data:
            config.defaults.verbose = _require_bool(defaults_data, "defaults", "verbose", source)
            sources["defaults.verbose"] = source
        if "quiet" in defaults_data:
            config.defaults.quiet = _require_bool(defaults_data, "defaults", "quiet", source)
            sources["defaults.quiet"] = source

    if "validation" in data:
        validation_data = data["validation"]
        _warn_unknown_keys(validation_data, KNOWN_KEYS["validation"], "validation", source)

        if "min_price" in validation_data:
            raw = validation_data["min_price"]
            try:
                config.validation.min_price = as_price(raw)
            except ValueError as e:
                raise ConfigurationError(
                    "Invalid value for validation.min_price",
                    context={"file": source, "value": raw},
                    suggestions=["Use a number, e.g. min_price = 0"],
                ) from e
            sources["validation.min_price"] = source
        if "inclusive" in validation_data:
            config.validation.inclusive = _require_bool(
                validation_data, "validation", "inclusive", source
            )
            sources["validation.inclusive"] = source


def _require_bool(data: dict[str, Any], section: str, key: str, source: str) -> bool:
    """Return a boolean setting, rejecting strings and numbers."""
    value = data[key]
    if not isinstance(value, bool):
        raise ConfigurationError(
            f"Invalid value for {section}.{key}: expected true or false",
            context={"file": source, "value": repr(value)},
            suggestions=[f"Use an unquoted TOML boolean, e.g. {key} = false"],
        )
    return value


def _warn_unknown_keys(data: dict[str, Any], known: set[str], section: str, source: str) -> None:
    """Warn about unknown keys in a config section."""
    for key in data:
        if key not in known:
            warnings.warn(f"Unknown config key '{section}.{key}' in {source}", stacklevel=4)


def get_config_paths() -> dict[str, Path | None]:
    """
    Get paths to config files that would be loaded.

    Returns:
        Dict with 'user' and 'project' keys
    """
    project_config = _find_project_config(Path.cwd())

    return {
        "user": USER_CONFIG_PATH if USER_CONFIG_PATH.exists() else None,
        "project": project_config,
    }
