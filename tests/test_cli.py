"""Tests for the product-config command line."""

import argparse
import io
import logging

import pytest
from rich.console import Console

from product_config import __version__
from product_config.cli import main, resolve_log_level
from product_config.cli.utils import format_error, print_error, render_error
from product_config.config import Config
from product_config.exceptions import ConfigurationError, UnsupportedOperationError


@pytest.fixture(autouse=True)
def reset_package_logger():
    """main() sets the package logger level; put it back after each test."""
    logger = logging.getLogger("product_config")
    level = logger.level
    yield logger
    logger.setLevel(level)
class TestMain:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "product-config" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestDemoCommand:
    def test_valid(self, capsys):
        assert main(["demo"]) == 0
        out = capsys.readouterr().out
        assert out.splitlines() == ["Configuration is valid.", "Total Price: $850"]

    def test_threshold_makes_it_invalid(self, capsys):
        assert main(["demo", "--min-price", "200"]) == 1
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "Configuration is invalid:",
            "- Component '16GB RAM' is invalid due to price constraints.",
            "- Component '1TB SSD' is invalid due to price constraints.",
        ]

    def test_inclusive_threshold(self, capsys):
        assert main(["demo", "--min-price", "150", "--inclusive"]) == 0
        assert capsys.readouterr().out.startswith("Configuration is valid.")

    def test_threshold_from_project_config(self, isolated_config, capsys):
        (isolated_config / ".product-config.toml").write_text("[validation]\nmin_price = 1000\n")
        assert main(["demo"]) == 1
        out = capsys.readouterr().out
        assert "- Composite 'Gaming Computer' is invalid due to price constraints." in out

    def test_bad_min_price(self, capsys):
        assert main(["demo", "--min-price", "lots"]) == 1
        assert "Invalid --min-price value: lots" in capsys.readouterr().err

    def test_bad_config_file(self, isolated_config, capsys):
        (isolated_config / ".product-config.toml").write_text("[validation\n")
        assert main(["demo"]) == 1
        assert "Invalid TOML" in capsys.readouterr().err


class TestConfigCommand:
    def test_show_defaults(self, capsys):
        assert main(["config", "--show"]) == 0
        out = capsys.readouterr().out
        assert "[validation]" in out
        assert "min_price = 0  # from: default" in out
        assert "inclusive = false  # from: default" in out

    def test_show_project_values(self, isolated_config, capsys):
        (isolated_config / ".product-config.toml").write_text("[validation]\nmin_price = 25\n")
        assert main(["config"]) == 0
        assert "min_price = 25  # from: .product-config.toml" in capsys.readouterr().out

    def test_paths(self, capsys):
        assert main(["config", "--paths"]) == 0
        out = capsys.readouterr().out
        assert "User config:" in out
        assert ".product-config.toml, product-config.toml" in out


class TestErrorOutput:
    def test_format_product_config_error(self):
        assert format_error(ConfigurationError("bad")) == "Error: bad"

    def test_format_other_error(self):
        assert format_error(ValueError("oops")) == "Error: ValueError: oops"

    def test_print_error_plain(self, capsys):
        print_error(ConfigurationError("bad"), use_rich=False)
        assert capsys.readouterr().err.strip() == "Error: bad"

    def test_print_error_rich_sections(self):
        buffer = io.StringIO()
        console = Console(file=buffer, width=120, color_system=None)
        error = UnsupportedOperationError(
            "Cannot add a component to a simple component.",
            context={"component": "Intel i9 CPU"},
            suggestions=["Use an Assembly to group components"],
        )

        print_error(error, use_rich=True, console=console)

        out = buffer.getvalue()
        assert "Error: Cannot add a component to a simple component." in out
        assert "Context:" in out
        assert "component" in out
        assert "Intel i9 CPU" in out
        assert "Suggestions:" in out
        assert "- Use an Assembly to group components" in out
        assert out.index("Context:") < out.index("Suggestions:")

    def test_print_error_rich_ignores_other_errors(self, capsys):
        buffer = io.StringIO()
        console = Console(file=buffer, width=120, color_system=None)
        print_error(ValueError("oops"), use_rich=True, console=console)
        assert buffer.getvalue() == ""
        assert capsys.readouterr().err.strip() == "Error: ValueError: oops"

    def test_render_error_without_context(self):
        buffer = io.StringIO()
        console = Console(file=buffer, width=120, color_system=None)
        console.print(render_error(ConfigurationError("bad [value]")))
        out = buffer.getvalue()
        assert out.strip() == "Error: bad [value]"
        assert "Context:" not in out
        assert "Suggestions:" not in out


class TestLogLevel:
    """Log level comes from the command line first, then [defaults]."""

    def _args(self, verbose=False, quiet=False):
        return argparse.Namespace(verbose=verbose, quiet=quiet)

    def test_default_is_warning(self):
        assert resolve_log_level(self._args(), Config()) == logging.WARNING

    def test_config_verbose(self):
        config = Config()
        config.defaults.verbose = True
        assert resolve_log_level(self._args(), config) == logging.DEBUG

    def test_config_quiet(self):
        config = Config()
        config.defaults.quiet = True
        assert resolve_log_level(self._args(), config) == logging.ERROR

    def test_cli_quiet_beats_config_verbose(self):
        config = Config()
        config.defaults.verbose = True
        assert resolve_log_level(self._args(quiet=True), config) == logging.ERROR

    def test_cli_verbose_beats_config_quiet(self):
        config = Config()
        config.defaults.quiet = True
        assert resolve_log_level(self._args(verbose=True), config) == logging.DEBUG

    def test_main_applies_config_verbose(self, isolated_config, reset_package_logger, capsys):
        (isolated_config / ".product-config.toml").write_text("[defaults]\nverbose = true\n")
        assert main(["demo"]) == 0
        assert reset_package_logger.level == logging.DEBUG

    def test_main_quiet_flag_wins(self, isolated_config, reset_package_logger, capsys):
        (isolated_config / ".product-config.toml").write_text("[defaults]\nverbose = true\n")
        assert main(["--quiet", "demo"]) == 0
        assert reset_package_logger.level == logging.ERROR

    def test_verbose_and_quiet_conflict(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["-v", "-q", "demo"])
        assert exc_info.value.code == 2
