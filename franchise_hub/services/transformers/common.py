"""Helpers shared by the companion-app transformers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional
from uuid import UUID

from pydantic import BaseModel
from sqlmodel import SQLModel

Row = dict[str, Any]

# Filled in by the transformer or the persistence layer, never copied from a record
SYSTEM_COLUMNS = frozenset({"id", "league_id", "created_at", "updated_at"})


def data_columns(model: type[SQLModel], *, exclude: Iterable[str] = ()) -> tuple[str, ...]:
    """Column names a transformer copies from an external record."""
    skipped = SYSTEM_COLUMNS | set(exclude)
    return tuple(name for name in model.model_fields if name not in skipped)


def copy_columns(record: BaseModel, columns: Iterable[str]) -> Row:
    """Copy ``columns`` from a validated record; absent fields become None."""
    data = record.model_dump()
    return {name: data.get(name) for name in columns}


def external_id(value: Any) -> Optional[str]:
    """Madden ids are stored as strings; None stays None."""
    if value is None:
        return None
    return str(value)


def resolve_team_id(team_id_map: Mapping[str, UUID], madden_team_id: Any) -> Optional[UUID]:
    """Internal team UUID for a Madden team id, or None when unknown."""
    key = external_id(madden_team_id)
    if key is None:
        return None
    return team_id_map.get(key)


@dataclass(frozen=True)
class ImportWindow:
    """Week and season taken from an import URL.

    The URL is authoritative: its values replace whatever week markers the
    payload carries. ``stage_index`` mirrors the season-type index.
    """

    week_index: int
    season_index: int

    def apply(self, row: Row) -> Row:
        row["week_index"] = self.week_index
        row["season_index"] = self.season_index
        row["stage_index"] = self.season_index
        return row
