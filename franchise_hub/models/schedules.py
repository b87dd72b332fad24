"""Wire model for schedule exports."""

from typing import Optional

from franchise_hub.models.companion import MaddenRecord

SCHEDULES_LIST_KEY = "gameScheduleInfoList"


class MaddenSchedule(MaddenRecord):
    schedule_id: Optional[str] = None
    week_index: Optional[int] = None
    season_index: Optional[int] = None
    stage_index: Optional[int] = None
    home_team_id: Optional[str] = None
    away_team_id: Optional[str] = None
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    status: Optional[int] = None
    is_game_of_the_week: Optional[bool] = None
