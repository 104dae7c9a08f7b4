"""Standardized CLI option definitions for consistent shorthand mappings."""

import typer

CONFIG_OPTION = typer.Option(
    "config.toml", "--config", "-c", help="Path to the TOML configuration file"
)

# Authentication options
TOKEN_OPTION = typer.Option(
    None,
    "--token",
    "-t",
    help="GitHub API token (overrides config, defaults to GITHUB_TOKEN env var)",
)

STATE_OPTION = typer.Option(
    "open", "--state", "-s", help="Issue state: open, closed, or all"
)

# Output options
OUTPUT_OPTION = typer.Option(
    None, "--output", "-o", help="JSON output path (overrides config)"
)

JS_OUTPUT_OPTION = typer.Option(
    None, "--js-output", help="JavaScript output path (overrides config)"
)

DRY_RUN_OPTION = typer.Option(
    False, "--dry-run", "-d", help="Print the JSON instead of writing files"
)

LOG_LEVEL_OPTION = typer.Option(
    None,
    "--log-level",
    help="Log level: DEBUG, INFO, WARNING, ERROR (defaults to INFO)",
)
