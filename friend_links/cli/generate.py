"""CLI commands for generating friend link data from GitHub issues."""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import load_config
from ..exceptions import ConfigError, GitHubFetchError, InvalidIssueBodyError
from ..generation.grouping import generate_friend_links
from ..generation.validator import extract_json_block, parse_json
from ..github_client.client import GitHubClient
from ..logging import setup_logging
from ..storage.writer import OutputWriter, render_js, render_json
from .options import (
    CONFIG_OPTION,
    DRY_RUN_OPTION,
    JS_OUTPUT_OPTION,
    LOG_LEVEL_OPTION,
    OUTPUT_OPTION,
    STATE_OPTION,
    TOKEN_OPTION,
)

console = Console()
# Keeps stdout clean for the JSON printed by --dry-run
err_console = Console(stderr=True)


def _mask(token: str | None) -> str:
    if not token:
        return "(not set)"
    return token[:4] + "*" * max(len(token) - 4, 4)


def generate(
    config_path: Path = CONFIG_OPTION,
    token: str | None = TOKEN_OPTION,
    state: str = STATE_OPTION,
    output: Path | None = OUTPUT_OPTION,
    js_output: Path | None = JS_OUTPUT_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
    log_level: str | None = LOG_LEVEL_OPTION,
) -> None:
    """Fetch issues, validate their data blocks and write the grouped data.

    Examples:
        friend-links generate --config config.toml
        friend-links generate -c config.toml --js-output site/links.js
        friend-links generate --dry-run > links.json
    """
    setup_logging(log_level)
    ui = err_console if dry_run else console

    try:
        config = load_config(config_path)
    except ConfigError as e:
        ui.print(f"❌ Configuration error: {escape(str(e))}")
        raise typer.Exit(1)

    token = token or config.github.resolve_token()
    json_path = output or config.output.json_path
    js_path = js_output or config.output.js_path

    params_table = Table(title="Generation Parameters")
    params_table.add_column("Parameter", style="cyan")
    params_table.add_column("Value", style="green")
    params_table.add_row(
        "Repository", f"{config.github.owner}/{config.github.repository}"
    )
    params_table.add_row("Token", _mask(token))
    params_table.add_row("State", state)
    params_table.add_row("Label", config.generation.label)
    params_table.add_row(
        "Sort By",
        "updated time" if config.generation.sort_by_updated_time else "created time",
    )
    params_table.add_row(
        "Groups", ", ".join(group.label for group in config.groups) or "None"
    )
    if not dry_run:
        params_table.add_row("JSON Output", str(json_path))
        params_table.add_row("JS Output", str(js_path) if js_path else "Disabled")
    ui.print(params_table)

    try:
        ui.print("🔑 Initializing GitHub client...")
        client = GitHubClient(token=token)

        ui.print("🔎 Fetching issues...")
        issues = client.list_repository_issues(
            config.github.owner, config.github.repository, state=state
        )
    except (ValueError, GitHubFetchError) as e:
        ui.print(f"❌ Error: {escape(str(e))}")
        raise typer.Exit(1)
    except Exception as e:
        ui.print(f"❌ Unexpected error: {escape(str(e))}")
        ui.print("Please check your GitHub token and network connection.")
        raise typer.Exit(1)

    ui.print(f"✅ Found {len(issues)} issues")

    groups = generate_friend_links(issues, config.generation, config.groups)

    results_table = Table(title="Generated Groups")
    results_table.add_column("Group", style="cyan")
    results_table.add_column("Name", style="white")
    results_table.add_column("Entries", justify="right", style="yellow")
    for group in groups:
        results_table.add_row(group.group, group.group_name, str(len(group.entries)))
    ui.print(results_table)

    # Render everything before writing so a failure leaves no partial output
    try:
        json_text = render_json(groups)
        js_text = render_js(groups) if js_path and not dry_run else None
    except (TypeError, ValueError, RecursionError) as e:
        ui.print(f"❌ Error rendering output: {escape(str(e))}")
        raise typer.Exit(1)

    if dry_run:
        typer.echo(json_text)
        return

    writer = OutputWriter()
    writer.write_text(json_text, json_path)
    if js_path and js_text is not None:
        writer.write_text(js_text, js_path)

    total = sum(len(group.entries) for group in groups)
    console.print(f"✨ Successfully generated {len(groups)} groups with {total} entries!")


def check(
    body_file: Path = typer.Argument(
        ..., help="Markdown file containing an issue body"
    ),
) -> None:
    """Check whether an issue body embeds a valid data block."""
    try:
        body = body_file.read_text(encoding="utf-8")
    except OSError as e:
        console.print(f"❌ Error reading {escape(str(body_file))}: {escape(str(e))}")
        raise typer.Exit(1)

    try:
        json_text = extract_json_block(body)
    except InvalidIssueBodyError as e:
        console.print(f"❌ FAIL: {escape(e.reason)}")
        raise typer.Exit(1)

    console.print("✅ PASS")
    typer.echo(json.dumps(parse_json(json_text), indent=2, ensure_ascii=False))
