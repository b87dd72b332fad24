"""
Enumerations shared by the wire models, services and routes.
"""
from enum import Enum, IntEnum
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator


class Platform(str, Enum):
    ps5 = "ps5"
    xbsx = "xbsx"

    @property
    def label(self) -> str:
        return {
            "ps5": "PlayStation 5",
            "xbsx": "Xbox Series X|S",
        }[self.value]


class LeagueRole(str, Enum):
    owner = "owner"
    commissioner = "commissioner"
    member = "member"


class GameStatus(IntEnum):
    """Madden game state codes carried on schedule rows."""

    SCHEDULED = 1
    IN_PROGRESS = 2
    FINAL = 3

    @classmethod
    def label_for(cls, value: Optional[int]) -> Optional[str]:
        if value is None:
            return None
        try:
            return cls(value).name.replace("_", " ").title()
        except ValueError:
            return None


class StatCategory(str, Enum):
    """Weekly stat categories exported by the companion app."""

    defense = "defense"
    receiving = "receiving"
    rushing = "rushing"
    passing = "passing"
    kicking = "kicking"
    punting = "punting"
    team = "team"

    @property
    def list_key(self) -> str:
        """Name of the array the companion app wraps records in."""
        return {
            "defense": "defensiveStatInfoList",
            "receiving": "receivingStatInfoList",
            "rushing": "rushingStatInfoList",
            "passing": "passingStatInfoList",
            "kicking": "kickingStatInfoList",
            "punting": "puntingStatInfoList",
            "team": "teamStatInfoList",
        }[self.value]

    @property
    def label(self) -> str:
        return "team" if self is StatCategory.team else f"{self.value} stats"

    @classmethod
    def from_route(cls, segment: str) -> "StatCategory":
        """Resolve a URL segment; the week routes spell team stats "teamstats"."""
        normalized = segment.strip().lower()
        if normalized in {"teamstats", "team-stats"}:
            return cls.team
        if normalized == "defensive":
            return cls.defense
        return cls(normalized)


def season_index_for(season_type: str) -> int:
    """Map a URL season type to the season index stored on imported rows.

    ``reg`` is 1, ``post`` is 2 and anything else (preseason) is 0.
    """
    return {"reg": 1, "post": 2}.get(season_type.strip().lower(), 0)


def _bool_to_int(value: Any) -> Any:
    # On/off traits arrive as JSON booleans, graded traits as integers
    if isinstance(value, bool):
        return int(value)
    return value


TRAIT_VALUE = Annotated[Optional[int], BeforeValidator(_bool_to_int)]
