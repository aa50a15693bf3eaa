"""
Config command for the product-config CLI.

Usage:
    product-config config --show     Show effective configuration with sources
    product-config config --paths    Show config file paths
"""

from pathlib import Path

from product_config.config import CONFIG_FILENAMES, USER_CONFIG_PATH, Config, get_config_paths


def run(args, config: Config) -> int:
    """Run the config command from parsed arguments."""
    if args.paths:
        return _show_paths()
    return _show_config(config)


def _show_config(config: Config) -> int:
    """Show effective configuration with sources."""
    print("# Effective product-config configuration")
    print()

    print("[defaults]")
    _print_value("verbose", config.defaults.verbose, config.get_source("defaults.verbose"))
    _print_value("quiet", config.defaults.quiet, config.get_source("defaults.quiet"))
    print()

    print("[validation]")
    _print_value(
        "min_price", config.validation.min_price, config.get_source("validation.min_price")
    )
    _print_value(
        "inclusive", config.validation.inclusive, config.get_source("validation.inclusive")
    )

    return 0


def _print_value(key: str, value, source: str) -> None:
    """Print a config value with its source."""
    if isinstance(value, bool):
        formatted = "true" if value else "false"
    else:
        formatted = str(value)

    source_display = Path(source).name if source != "default" else source
    print(f"{key} = {formatted}  # from: {source_display}")


def _show_paths() -> int:
    """Show config file paths."""
    paths = get_config_paths()

    print("Config file paths:")
    print()

    print(f"User config: {USER_CONFIG_PATH}")
    print("  Status: exists" if paths["user"] else "  Status: not found")
    print()

    print(f"Project config search: {', '.join(CONFIG_FILENAMES)}")
    if paths["project"]:
        print(f"  Found: {paths['project']}")
    else:
        print("  Status: not found")

    return 0
