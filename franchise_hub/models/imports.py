"""Response payloads for import endpoints."""

from typing import Optional

from pydantic import BaseModel


class ImportResult(BaseModel):
    message: str
    count: int


class PartitionImportResult(ImportResult):
    """Import into a week-scoped table; echoes the partition that was replaced."""

    week: Optional[int] = None
    season: Optional[int] = None
    season_type: Optional[str] = None
