"""CLI commands: history, history-clear, freq."""

from __future__ import annotations

import sys
from datetime import datetime, timezone

import click
from rich.table import Table

from wolfy.cli import cli, console, default_history
from wolfy.config import SearchSettings
from wolfy.exceptions import ConfigError
from wolfy.history.backing import FileBackingStore
from wolfy.history.store import UsageHistoryStore


def _open_store(history: str) -> UsageHistoryStore:
    try:
        settings = SearchSettings.from_env()
    except ConfigError as e:
        console.print(f"[red]✗ {e}[/]")
        sys.exit(1)
    store = UsageHistoryStore(FileBackingStore(history), max_entries=settings.history_max_entries)
    store.load()
    return store


def _format_ts(ts: int) -> str:
    if ts <= 0:
        return "—"
    return datetime.fromtimestamp(ts, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S")


@cli.command("history")
@click.option("--limit", "-n", default=10, help="Number of entries")
@click.option("--history", default=default_history, help="History file path")
def history_cmd(limit, history) -> None:
    """Show the most recent launches."""
    store = _open_store(history)
    records = store.recent_launches(limit)
    if not records:
        console.print("[yellow]No launches recorded yet.[/]")
        return
    table = Table(title="🕘 Recent launches")
    table.add_column("ID", style="bold")
    table.add_column("Count", style="cyan", justify="right")
    table.add_column("Last launch (UTC)")
    for record in records:
        table.add_row(record.item_id, str(record.count), _format_ts(record.timestamp))
    console.print(table)


@cli.command("history-clear")
@click.option("--history", default=default_history, help="History file path")
@click.confirmation_option(prompt="Erase all launch history?")
def history_clear(history) -> None:
    """Erase all launch history."""
    store = _open_store(history)
    if store.clear():
        console.print("[green]✓[/] History cleared")
    else:
        console.print(f"[red]✗ Could not write {history}[/]")
        sys.exit(1)


@cli.command("freq")
@click.option("--history", default=default_history, help="History file path")
def freq(history) -> None:
    """Show normalized launch frequencies."""
    frequencies = _open_store(history).frequency_map()
    if not frequencies:
        console.print("[yellow]No launches recorded yet.[/]")
        return
    table = Table(title="📊 Launch frequency")
    table.add_column("ID", style="bold")
    table.add_column("Frequency", style="cyan", justify="right")
    for item_id, value in sorted(frequencies.items(), key=lambda kv: (-kv[1], kv[0])):
        table.add_row(item_id, f"{value:.3f}")
    console.print(table)
