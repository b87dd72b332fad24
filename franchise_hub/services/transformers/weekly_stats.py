"""Weekly stat transformer shared by the seven stat categories.

Each category's wire model already binds Madden keys to column names, so one
function serves every category: copy the category's columns, stamp the
league, and, for URL-addressed imports, overwrite week/season/stage with the
URL's values. Decimal fields (passer rating, percentages) pass through as
received.
"""

from typing import Optional, Sequence
from uuid import UUID

from franchise_hub.models.fields import StatCategory
from franchise_hub.models.weekly_stats import MaddenStat
from franchise_hub.schemas.weekly_stats import STAT_TABLES
from franchise_hub.services.transformers.common import (
    ImportWindow,
    Row,
    copy_columns,
    data_columns,
)

STAT_COLUMNS: dict[StatCategory, tuple[str, ...]] = {
    category: data_columns(table) for category, table in STAT_TABLES.items()
}


def transform_weekly_stat(
    category: StatCategory,
    record: MaddenStat,
    league_id: UUID,
    window: Optional[ImportWindow] = None,
) -> Row:
    row = copy_columns(record, STAT_COLUMNS[category])
    row["league_id"] = league_id
    if window is not None:
        window.apply(row)
    return row


def transform_weekly_stats(
    category: StatCategory,
    records: Sequence[MaddenStat],
    league_id: UUID,
    window: Optional[ImportWindow] = None,
) -> list[Row]:
    return [transform_weekly_stat(category, record, league_id, window) for record in records]
