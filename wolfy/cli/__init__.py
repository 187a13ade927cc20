"""
WOLFY CLI — Package init.

Re-exports the main CLI group and shared utilities.
"""

from __future__ import annotations

import dataclasses
import logging

import click
from rich.console import Console

from wolfy import __version__, config
from wolfy.config import SearchSettings
from wolfy.launcher import Launcher

console = Console()


def default_manifest() -> str:
    return str(config.MANIFEST_PATH)


def default_history() -> str:
    return str(config.HISTORY_PATH)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s — %(message)s",
        datefmt="%H:%M:%S",
    )


def get_launcher(manifest: str, history: str, **overrides) -> Launcher:
    """Create a launcher over the given manifest and history files."""
    settings = SearchSettings.from_env()
    if overrides:
        settings = dataclasses.replace(settings, **overrides)
    return Launcher.from_paths(manifest, history, settings=settings)


# ─── Main Group ──────────────────────────────────────────────────

@click.group()
@click.version_option(__version__, prog_name="wolfy")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose) -> None:
    """WOLFY — fuzzy launcher search with usage history."""
    setup_logging(verbose)


# ─── Register all sub-modules ───────────────────────────────────
from wolfy.cli import search_cmds  # noqa: E402, F401
from wolfy.cli import history_cmds  # noqa: E402, F401


if __name__ == "__main__":
    cli()
