"""
WOLFY — Configuration.
Shared settings and paths for the search core and its CLI.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from wolfy.exceptions import ConfigError

DEFAULT_MAX_RESULTS = 50
DEFAULT_HISTORY_WEIGHT = 30.0
DEFAULT_HISTORY_MAX_ENTRIES = 100
DEFAULT_HISTORY_LOCK_TIMEOUT = 0.05

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from e


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigError(f"{name} must be a boolean flag, got {raw!r}")


# ─── Paths ───────────────────────────────────────────────────────────

WOLFY_DIR = Path(os.environ.get("WOLFY_DIR", str(Path.home() / ".wolfy"))).expanduser()
HISTORY_PATH = Path(os.environ.get("WOLFY_HISTORY", str(WOLFY_DIR / "history.tsv"))).expanduser()
MANIFEST_PATH = Path(os.environ.get("WOLFY_MANIFEST", str(WOLFY_DIR / "apps.yaml"))).expanduser()


@dataclass(frozen=True)
class SearchSettings:
    """Immutable search configuration, built once and injected."""

    max_results: int = DEFAULT_MAX_RESULTS
    fuzzy: bool = True
    history_weight: float = DEFAULT_HISTORY_WEIGHT
    history_max_entries: int = DEFAULT_HISTORY_MAX_ENTRIES
    history_lock_timeout: float = DEFAULT_HISTORY_LOCK_TIMEOUT

    def __post_init__(self) -> None:
        if self.max_results <= 0:
            raise ConfigError(f"max_results must be > 0, got {self.max_results}")
        if self.history_max_entries <= 0:
            raise ConfigError(
                f"history_max_entries must be > 0, got {self.history_max_entries}"
            )
        if self.history_weight < 0:
            raise ConfigError(f"history_weight must be >= 0, got {self.history_weight}")
        if self.history_lock_timeout < 0:
            raise ConfigError(
                f"history_lock_timeout must be >= 0, got {self.history_lock_timeout}"
            )

    @classmethod
    def from_env(cls) -> SearchSettings:
        """Build settings from ``WOLFY_*`` environment variables."""
        return cls(
            max_results=_env_int("WOLFY_MAX_RESULTS", DEFAULT_MAX_RESULTS),
            fuzzy=_env_bool("WOLFY_FUZZY", True),
            history_weight=_env_float("WOLFY_HISTORY_WEIGHT", DEFAULT_HISTORY_WEIGHT),
            history_max_entries=_env_int(
                "WOLFY_HISTORY_MAX_ENTRIES", DEFAULT_HISTORY_MAX_ENTRIES
            ),
            history_lock_timeout=_env_float(
                "WOLFY_HISTORY_LOCK_TIMEOUT", DEFAULT_HISTORY_LOCK_TIMEOUT
            ),
        )


def reload() -> None:
    """Re-read path settings from the environment."""
    global WOLFY_DIR, HISTORY_PATH, MANIFEST_PATH
    WOLFY_DIR = Path(os.environ.get("WOLFY_DIR", str(Path.home() / ".wolfy"))).expanduser()
    HISTORY_PATH = Path(
        os.environ.get("WOLFY_HISTORY", str(WOLFY_DIR / "history.tsv"))
    ).expanduser()
    MANIFEST_PATH = Path(
        os.environ.get("WOLFY_MANIFEST", str(WOLFY_DIR / "apps.yaml"))
    ).expanduser()
