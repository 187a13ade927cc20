# This file is part of WOLFY.
# Licensed under the Business Source License 1.1 (BSL 1.1).
# See top-level LICENSE file for details.
# Change Date: 2030-01-01 (Transitions to Apache 2.0)

"""Search data models: corpus items, match outcomes, ranked results."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from typing import Optional


def item_id_for(name: str, path: str) -> str:
    """Stable 16-hex-digit id for a ``(name, path)`` pair."""
    digest = hashlib.sha256(f"{name}\x00{path}".encode("utf-8")).hexdigest()
    return digest[:16]


@dataclass(frozen=True)
class SearchableItem:
    """A launchable corpus entry. Read-only to the search core."""

    id: str
    name: str
    description: Optional[str] = None
    keywords: tuple[str, ...] = ()
    category: Optional[str] = None
    path: str = ""
    icon_path: Optional[str] = None
    working_dir: Optional[str] = None
    arguments: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("SearchableItem.name must not be empty")
        if not isinstance(self.keywords, tuple):
            object.__setattr__(self, "keywords", tuple(self.keywords))

    @classmethod
    def create(
        cls,
        name: str,
        path: str = "",
        *,
        description: Optional[str] = None,
        keywords: Optional[list[str]] = None,
        category: Optional[str] = None,
        icon_path: Optional[str] = None,
        working_dir: Optional[str] = None,
        arguments: Optional[str] = None,
    ) -> SearchableItem:
        """Build an item whose id is derived from its name and path."""
        return cls(
            id=item_id_for(name, str(path)),
            name=name,
            description=description,
            keywords=tuple(keywords or ()),
            category=category,
            path=str(path),
            icon_path=icon_path,
            working_dir=working_dir,
            arguments=arguments,
        )

    def searchable_text(self) -> str:
        """Name, description, keywords and category joined by spaces."""
        parts = [self.name]
        if self.description:
            parts.append(self.description)
        parts.extend(k for k in self.keywords if k)
        if self.category:
            parts.append(self.category)
        return " ".join(parts)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "keywords": list(self.keywords),
            "category": self.category,
            "path": self.path,
        }


@dataclass(frozen=True)
class MatchResult:
    """Outcome of matching one query against one candidate string."""

    matched: bool
    score: int = 0
    matched_indices: tuple[int, ...] = ()

    @classmethod
    def no_match(cls) -> MatchResult:
        return cls(matched=False)


NO_MATCH = MatchResult.no_match()


@dataclass(frozen=True)
class RankedItem:
    """One scored corpus item in a result set."""

    item: SearchableItem
    score: float
    matched_indices: tuple[int, ...] = field(default=())

    def to_dict(self) -> dict:
        return {
            **self.item.to_dict(),
            "score": round(self.score, 4),
            "matched_indices": list(self.matched_indices),
        }
