"""
WOLFY — Manifest item provider.

Loads the corpus from a YAML or JSON manifest:

    apps:
      - name: Google Chrome
        path: /usr/bin/google-chrome
        description: Web browser
        keywords: [browser, web]
        category: Internet
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from wolfy.corpus.base import ItemProvider
from wolfy.exceptions import CorpusError
from wolfy.history.models import check_item_id
from wolfy.search.models import SearchableItem, item_id_for

logger = logging.getLogger("wolfy.corpus.manifest")


class ItemRecord(BaseModel):
    id: str | None = Field(None, max_length=128, description="Stable id; derived from name+path if omitted")
    name: str = Field(..., max_length=512, description="Display name")
    path: str = Field("", description="Executable or shortcut path")
    description: str | None = None
    keywords: list[str] = Field(default_factory=list)
    category: str | None = None
    icon_path: str | None = None
    working_dir: str | None = None
    arguments: str | None = None

    @field_validator("name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Must not be empty or whitespace only")
        return v

    @field_validator("id")
    @classmethod
    def storable_id(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return check_item_id(v)

    def to_item(self) -> SearchableItem:
        return SearchableItem(
            id=self.id or item_id_for(self.name, self.path),
            name=self.name,
            description=self.description,
            keywords=tuple(self.keywords),
            category=self.category,
            path=self.path,
            icon_path=self.icon_path,
            working_dir=self.working_dir,
            arguments=self.arguments,
        )


class ManifestItemProvider(ItemProvider):
    """Reads items from a manifest file, caching the parsed snapshot."""

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()
        self._items: Optional[list[SearchableItem]] = None
        self._lock = threading.Lock()

    def discover_all(self) -> list[SearchableItem]:
        with self._lock:
            if self._items is None:
                self._items = self._load()
            return list(self._items)

    def find_by_id(self, item_id: str) -> Optional[SearchableItem]:
        for item in self.discover_all():
            if item.id == item_id:
                return item
        return None

    def count(self) -> int:
        return len(self.discover_all())

    def refresh(self) -> None:
        with self._lock:
            self._items = None

    # ─── Internal Helpers ─────────────────────────────────────────

    def _load(self) -> list[SearchableItem]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise CorpusError(f"Cannot read manifest {self.path}: {e}") from e

        try:
            if self.path.suffix.lower() == ".json":
                data = json.loads(text)
            else:
                data = yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise CorpusError(f"Cannot parse manifest {self.path}: {e}") from e

        records = self._records(data)
        items: list[SearchableItem] = []
        seen: set[str] = set()
        for index, raw in enumerate(records):
            try:
                item = ItemRecord.model_validate(raw).to_item()
            except ValidationError as e:
                raise CorpusError(f"Invalid item #{index} in {self.path}: {e}") from e
            if item.id in seen:
                logger.warning("Duplicate item id %s in %s, keeping first", item.id, self.path)
                continue
            seen.add(item.id)
            items.append(item)

        logger.info("Loaded %d items from %s", len(items), self.path)
        return items

    def _records(self, data: Any) -> list:
        if data is None:
            return []
        if isinstance(data, dict):
            data = data.get("apps", [])
        if not isinstance(data, list):
            raise CorpusError(f"Manifest {self.path} must hold a list of items under 'apps'")
        return data
