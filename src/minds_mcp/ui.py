"""Rich terminal UI and logging helpers for minds-mcp.

stdout carries the MCP protocol while the server runs, so logs and
diagnostics always go to ``err_console``.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def setup_logging(level: str = "WARNING") -> None:
    """Route all logging through a Rich handler on stderr.

    Args:
        level: Log level name for the root logger
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True, show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO, which would echo URLs on each tool call
    logging.getLogger("httpx").setLevel(logging.WARNING)


def create_table(
    title: str = "",
    show_header: bool = True,
    header_style: str = "bold magenta",
) -> Table:
    """Create a Rich table with minds-mcp styling.

    Args:
        title: Optional table title
        show_header: Whether to show header row
        header_style: Style for header

    Returns:
        Configured Table instance
    """
    return Table(
        title=title,
        show_header=show_header,
        header_style=header_style,
        border_style="green",
    )


def error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[red]✗[/red] {message}")
