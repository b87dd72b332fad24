"""Schedule transformer: ``gameScheduleInfoList`` records to ``schedules`` rows."""

from typing import Optional, Sequence
from uuid import UUID

from franchise_hub.models.schedules import MaddenSchedule
from franchise_hub.schemas.schedules import Schedule
from franchise_hub.services.transformers.common import (
    ImportWindow,
    Row,
    copy_columns,
    data_columns,
)

SCHEDULE_COLUMNS = data_columns(Schedule)


def transform_schedule(
    record: MaddenSchedule, league_id: UUID, window: Optional[ImportWindow] = None
) -> Row:
    row = copy_columns(record, SCHEDULE_COLUMNS)
    row["league_id"] = league_id
    if window is not None:
        window.apply(row)
    return row


def transform_schedules(
    records: Sequence[MaddenSchedule],
    league_id: UUID,
    window: Optional[ImportWindow] = None,
) -> list[Row]:
    return [transform_schedule(record, league_id, window) for record in records]
