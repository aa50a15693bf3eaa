"""Error output for CLI commands."""

from __future__ import annotations

import sys
import traceback
from typing import TYPE_CHECKING

from product_config.exceptions import ProductConfigError

if TYPE_CHECKING:
    from rich.console import Console, Group

__all__ = ["format_error", "print_error", "render_error"]


def render_error(e: ProductConfigError) -> Group:
    """
    Build a Rich renderable for a product-config error.

    The message comes first, then a two-column ``Context`` grid and a
    bulleted ``Suggestions`` list when the error carries them. Values are
    rendered as plain text, so brackets in component names are not read as
    markup.
    """
    from rich.console import Group
    from rich.padding import Padding
    from rich.table import Table
    from rich.text import Text

    parts = [Text.assemble(("Error: ", "bold red"), e.message)]

    if e.context:
        grid = Table.grid(padding=(0, 2))
        grid.add_column(style="cyan", no_wrap=True)
        grid.add_column()
        for key, value in e.context.items():
            grid.add_row(Text(str(key)), Text(str(value)))
        parts.append(Text("Context:", style="bold"))
        parts.append(Padding(grid, (0, 0, 0, 2)))

    if e.suggestions:
        parts.append(Text("Suggestions:", style="bold"))
        for suggestion in e.suggestions:
            parts.append(Text.assemble("  - ", (suggestion, "green")))

    return Group(*parts)


def print_error(
    e: Exception,
    verbose: bool = False,
    use_rich: bool | None = None,
    console: Console | None = None,
) -> None:
    """
    Print an exception to stderr.

    product-config errors go through ``render_error`` on a terminal; anything
    else, and any non-terminal output, uses ``format_error``.

    Args:
        e: The exception to print
        verbose: If True, print the full stack trace instead
        use_rich: Override automatic TTY detection (None = auto-detect)
        console: Console to print to (default: a new stderr console)
    """
    if verbose:
        print(traceback.format_exc(), file=sys.stderr)
        return

    if console is None:
        from rich.console import Console

        console = Console(stderr=True)

    if use_rich is None:
        use_rich = console.is_terminal

    if use_rich and isinstance(e, ProductConfigError):
        console.print(render_error(e))
    else:
        print(format_error(e), file=sys.stderr)


def format_error(e: Exception) -> str:
    """Format an exception for display as plain text."""
    if isinstance(e, ProductConfigError):
        return f"Error: {e}"
    return f"Error: {type(e).__name__}: {e}"
