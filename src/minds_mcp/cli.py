"""Main CLI entry point for minds-mcp.

Provides the `minds-mcp` command for serving and inspecting the Minds tools.
"""

import asyncio
from typing import Optional

import typer

from minds_mcp import __version__
from minds_mcp.core.config import MindsConfig
from minds_mcp.server import create_server, run_server
from minds_mcp.ui import console, create_table, error

app = typer.Typer(
    name="minds-mcp",
    help="Model Context Protocol server for the Minds data platform.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print(f"minds-mcp {__version__}")
        raise typer.Exit()


def load_config(
    base_url: Optional[str],
    api_key: Optional[str],
    log_level: Optional[str],
) -> MindsConfig:
    """Resolve configuration, exiting with code 1 when it is invalid."""
    try:
        return MindsConfig.from_env(base_url=base_url, api_key=api_key, log_level=log_level)
    except ValueError as e:
        error(str(e))
        raise typer.Exit(1)


BaseUrlOption = typer.Option(
    None, "--base-url", "-u", help="Minds API base URL", envvar="MINDS_BASE_URL"
)
ApiKeyOption = typer.Option(
    None, "--api-key", "-k", help="Minds API token", envvar="MINDS_API_KEY"
)
LogLevelOption = typer.Option(
    None, "--log-level", "-l", help="Log level (DEBUG, INFO, WARNING, ERROR)", envvar="MINDS_LOG_LEVEL"
)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """minds-mcp: the Minds API as MCP tools.

    Examples:
        minds-mcp serve            Serve the tools over stdio
        minds-mcp tools            List the registered tools
        minds-mcp config           Show the resolved configuration
    """


@app.command("serve")
def serve_cmd(
    base_url: Optional[str] = BaseUrlOption,
    api_key: Optional[str] = ApiKeyOption,
    log_level: Optional[str] = LogLevelOption,
) -> None:
    """Serve the Minds tools over stdio until the client disconnects."""
    run_server(load_config(base_url, api_key, log_level))


@app.command("tools")
def tools_cmd() -> None:
    """List the tools this server registers."""
    config = load_config(None, None, None)
    tools = asyncio.run(create_server(config).list_tools())

    table = create_table(title=f"Minds tools ({len(tools)})")
    table.add_column("Tool", style="cyan", no_wrap=True)
    table.add_column("Description")
    for tool in tools:
        table.add_row(tool.name, tool.description or "")
    console.print(table)


@app.command("config")
def config_cmd(
    base_url: Optional[str] = BaseUrlOption,
    api_key: Optional[str] = ApiKeyOption,
    log_level: Optional[str] = LogLevelOption,
) -> None:
    """Show the resolved configuration (token masked)."""
    config = load_config(base_url, api_key, log_level)

    table = create_table(title="minds-mcp configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("base_url", config.base_url)
    table.add_row("api_key", config.masked_api_key or "[red](not set)[/red]")
    table.add_row("log_level", config.log_level)
    console.print(table)


if __name__ == "__main__":
    app()
