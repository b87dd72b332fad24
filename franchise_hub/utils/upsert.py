"""Natural-key upsert and partition-replace helpers.

Every helper takes the request's ``AsyncSession`` explicitly and runs inside
``async with db.begin()``. The preferred path is a single
``INSERT ... ON CONFLICT (<natural key>) DO UPDATE``; when the database has no
unique constraint matching that key (schema drift) the helpers fall back to
delete-then-insert and log a warning.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Sequence
from typing import Any

from sqlalchemy import Table, and_, delete, insert, or_, select, tuple_, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from franchise_hub.schemas.base import utcnow

logger = logging.getLogger(__name__)

Row = dict[str, Any]

# PostgreSQL: invalid_column_reference raised for an unmatched ON CONFLICT target
_MISSING_CONSTRAINT_SQLSTATE = "42P10"
_MISSING_CONSTRAINT_MARKERS = (
    "no unique or exclusion constraint matching the on conflict specification",
    "on conflict clause does not match any primary key or unique constraint",
)
_NEVER_UPDATED = frozenset({"id", "created_at"})


def is_missing_constraint_error(exc: BaseException) -> bool:
    """Return True when the DB rejected ON CONFLICT for lack of a unique key."""
    if not isinstance(exc, DBAPIError):
        return False
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate == _MISSING_CONSTRAINT_SQLSTATE:
        return True
    text = str(exc).lower()
    return any(marker in text for marker in _MISSING_CONSTRAINT_MARKERS)


def table_for(model: type[SQLModel]) -> Table:
    return model.__table__  # type: ignore[attr-defined,return-value]


def dialect_insert(db: AsyncSession, table: Table):
    """Return a dialect-specific INSERT supporting ON CONFLICT."""
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        return pg_insert(table)
    if dialect == "sqlite":
        return sqlite_insert(table)
    raise RuntimeError(f"ON CONFLICT upserts are not supported on {dialect!r}")


def dedupe_rows(rows: Iterable[Row], key_columns: Sequence[str]) -> list[Row]:
    """Keep the last row per natural key; rows with a null key part are all kept."""
    keyed: dict[tuple[Any, ...], Row] = {}
    unkeyed: list[Row] = []
    for row in rows:
        key = tuple(row.get(column) for column in key_columns)
        if any(part is None for part in key):
            unkeyed.append(row)
            continue
        keyed.pop(key, None)
        keyed[key] = row
    return [*keyed.values(), *unkeyed]


def prepare_rows(table: Table, rows: Iterable[Row]) -> list[Row]:
    """Give every row the same column set plus an id and fresh timestamps.

    Executemany needs uniform parameter sets; unknown keys are dropped.
    """
    columns = [column.name for column in table.columns]
    now = utcnow()
    prepared: list[Row] = []
    for row in rows:
        values = {name: row.get(name) for name in columns}
        if "id" in values and values["id"] is None:
            values["id"] = uuid.uuid4()
        if "created_at" in values and values["created_at"] is None:
            values["created_at"] = now
        if "updated_at" in values:
            values["updated_at"] = now
        prepared.append(values)
    return prepared


def upsert_statement(db: AsyncSession, table: Table, key_columns: Sequence[str]):
    stmt = dialect_insert(db, table)
    excluded = stmt.excluded
    set_ = {
        column.name: excluded[column.name]
        for column in table.columns
        if column.name not in key_columns and column.name not in _NEVER_UPDATED
    }
    return stmt.on_conflict_do_update(index_elements=list(key_columns), set_=set_)


def _partition_clause(table: Table, partition: dict[str, Any]):
    clauses = []
    for name, value in partition.items():
        column = table.c[name]
        clauses.append(column.is_(None) if value is None else column == value)
    return and_(*clauses)


def _group_by_partition(
    rows: Sequence[Row], partition_columns: Sequence[str]
) -> dict[tuple[Any, ...], list[Row]]:
    groups: dict[tuple[Any, ...], list[Row]] = {}
    for row in rows:
        key = tuple(row[column] for column in partition_columns)
        groups.setdefault(key, []).append(row)
    return groups


def _stale_rows_clause(table: Table, identity_columns: Sequence[str], rows: Sequence[Row]):
    """Match rows whose identity is null or absent from ``rows``."""
    if len(identity_columns) == 1:
        column = table.c[identity_columns[0]]
        keep = [row[identity_columns[0]] for row in rows if row[identity_columns[0]] is not None]
        return or_(column.is_(None), column.not_in(keep))
    columns = [table.c[name] for name in identity_columns]
    keep_tuples = [
        tuple(row[name] for name in identity_columns)
        for row in rows
        if all(row[name] is not None for name in identity_columns)
    ]
    return or_(*(column.is_(None) for column in columns), tuple_(*columns).not_in(keep_tuples))


async def replace_partition(
    db: AsyncSession,
    model: type[SQLModel],
    rows: Sequence[Row],
    *,
    key_columns: Sequence[str],
    partition_columns: Sequence[str],
) -> list[Row]:
    """Make each (league, week, season) partition hold exactly ``rows``.

    Rows are grouped by ``partition_columns``; only partitions present in the
    batch are touched. An empty batch is a no-op and deletes nothing.

    Returns:
        The rows written, after de-duplication on ``key_columns``.
    """
    if not rows:
        return []

    table = table_for(model)
    prepared = prepare_rows(table, dedupe_rows(rows, key_columns))
    identity_columns = [name for name in key_columns if name not in partition_columns]
    if not identity_columns:
        raise ValueError("key_columns must extend partition_columns")
    partitions = _group_by_partition(prepared, partition_columns)

    try:
        async with db.begin():
            for partition_key, partition_rows in partitions.items():
                partition = dict(zip(partition_columns, partition_key))
                stmt = delete(table).where(_partition_clause(table, partition))
                # NULL partition values never match ON CONFLICT, so clear those outright
                if None not in partition_key:
                    stmt = stmt.where(
                        _stale_rows_clause(table, identity_columns, partition_rows)
                    )
                await db.execute(stmt)
            await db.execute(upsert_statement(db, table, key_columns), prepared)
    except DBAPIError as exc:
        if not is_missing_constraint_error(exc):
            raise
        logger.warning(
            f"No unique constraint on {table.name}({', '.join(key_columns)}); "
            "falling back to delete-then-insert"
        )
        async with db.begin():
            for partition_key in partitions:
                partition = dict(zip(partition_columns, partition_key))
                await db.execute(delete(table).where(_partition_clause(table, partition)))
            await db.execute(insert(table), prepared)

    logger.info(
        f"Replaced {len(prepared)} {table.name} rows across {len(partitions)} partition(s)"
    )
    return prepared


async def upsert_rows(
    db: AsyncSession,
    model: type[SQLModel],
    rows: Sequence[Row],
    *,
    key_columns: Sequence[str],
) -> list[Row]:
    """Insert rows that are new on ``key_columns`` and update the rest in place.

    Existing surrogate ids and ``created_at`` are preserved.
    """
    if not rows:
        return []

    table = table_for(model)
    prepared = prepare_rows(table, dedupe_rows(rows, key_columns))

    try:
        async with db.begin():
            await db.execute(upsert_statement(db, table, key_columns), prepared)
    except DBAPIError as exc:
        if not is_missing_constraint_error(exc):
            raise
        logger.warning(
            f"No unique constraint on {table.name}({', '.join(key_columns)}); "
            "falling back to per-row select/update/insert"
        )
        async with db.begin():
            for row in prepared:
                match = and_(*(table.c[name] == row[name] for name in key_columns))
                result = await db.execute(select(table.c.id).where(match))
                existing_id = result.scalars().first()
                if existing_id is None:
                    await db.execute(insert(table).values(**row))
                    continue
                changes = {
                    name: value
                    for name, value in row.items()
                    if name not in _NEVER_UPDATED
                }
                await db.execute(
                    update(table).where(table.c.id == existing_id).values(**changes)
                )

    logger.info(f"Upserted {len(prepared)} {table.name} rows")
    return prepared
