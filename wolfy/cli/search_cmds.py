"""CLI commands: search, launch."""

from __future__ import annotations

import sys

import click
from rich.table import Table
from rich.text import Text

from wolfy.cli import cli, console, default_history, default_manifest, get_launcher
from wolfy.exceptions import ConfigError, CorpusError, LaunchError
from wolfy.search.models import RankedItem


def _highlight(result: RankedItem) -> Text:
    """Item name with matched characters emphasized."""
    text = Text(result.item.name)
    for index in result.matched_indices:
        text.stylize("bold yellow", index, index + 1)
    return text


@cli.command()
@click.argument("query", default="")
@click.option("--limit", "-n", type=click.IntRange(min=1), default=None, help="Max results")
@click.option("--exact", is_flag=True, help="Token substring matching instead of fuzzy")
@click.option("--manifest", default=default_manifest, help="Item manifest (YAML/JSON)")
@click.option("--history", default=default_history, help="History file path")
def search(query, limit, exact, manifest, history) -> None:
    """Rank items for QUERY (empty QUERY browses by usage)."""
    overrides = {"fuzzy": False} if exact else {}
    if limit is not None:
        overrides["max_results"] = limit
    try:
        launcher = get_launcher(manifest, history, **overrides)
        results = launcher.search(query)
    except (ConfigError, CorpusError) as e:
        console.print(f"[red]✗ {e}[/]")
        sys.exit(1)

    if not results:
        console.print("[yellow]No matches.[/]")
        return

    table = Table(title=f"🔎 {query}" if query.strip() else "🔎 Most used")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Name")
    table.add_column("Score", style="cyan", justify="right")
    table.add_column("ID", style="dim")
    for rank, result in enumerate(results, 1):
        table.add_row(str(rank), _highlight(result), f"{result.score:.1f}", result.item.id)
    console.print(table)


@cli.command()
@click.argument("item_id")
@click.option("--manifest", default=default_manifest, help="Item manifest (YAML/JSON)")
@click.option("--history", default=default_history, help="History file path")
def launch(item_id, manifest, history) -> None:
    """Record a launch of ITEM_ID."""
    try:
        launcher = get_launcher(manifest, history)
        persisted = launcher.launch(item_id)
    except (ConfigError, CorpusError, LaunchError) as e:
        console.print(f"[red]✗ {e}[/]")
        sys.exit(1)

    count = launcher.history.launch_count(item_id)
    if persisted:
        console.print(f"[green]✓[/] Launched [bold]{item_id}[/] (count {count})")
    else:
        console.print(f"[yellow]![/] Launched [bold]{item_id}[/] but history was not saved")
