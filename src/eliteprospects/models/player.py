"""Player profile models."""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from ..utils import clean_cell, to_number

COUNTING_STATS = (
    "games_played",
    "goals",
    "assists",
    "points",
    "penalty_minutes",
    "plus_minus",
    "games_played_playoffs",
    "goals_playoffs",
    "assists_playoffs",
    "points_playoffs",
    "penalty_minutes_playoffs",
    "plus_minus_playoffs",
)

Stat = int | str | None


class RosterRow(BaseModel):
    """A player row supplied by the roster listing."""

    model_config = ConfigDict(extra="allow", frozen=True)

    name: str
    player_url: str
    team: str | None = None
    team_url: str | None = None
    league: str | None = None
    position: str | None = None
    season: str | None = None

    # Roster-level totals for the listed season
    games_played: Stat = None
    goals: Stat = None
    assists: Stat = None
    points: Stat = None
    penalty_minutes: Stat = None
    plus_minus: Stat = None
    games_played_playoffs: Stat = None
    goals_playoffs: Stat = None
    assists_playoffs: Stat = None
    points_playoffs: Stat = None
    penalty_minutes_playoffs: Stat = None
    plus_minus_playoffs: Stat = None

    @field_validator("team", "team_url", "league", "position", "season", mode="before")
    @classmethod
    def clean_text(cls, value: Any) -> Any:
        return clean_cell(value)

    @field_validator(*COUNTING_STATS, mode="before")
    @classmethod
    def clean_stat(cls, value: Any) -> Any:
        return to_number(value)

    @property
    def extra_fields(self) -> dict[str, Any]:
        """Caller-supplied fields outside the known roster columns."""
        return dict(self.model_extra or {})


class PlayerVitals(BaseModel):
    """Biography block of a player profile."""

    model_config = ConfigDict(frozen=True)

    birthday: date | None = None
    birth_place: str | None = None
    birth_country: str | None = None
    position_: str | None = None
    height: int | None = None  # inches
    weight: int | None = None  # pounds
    shot_handedness: str | None = None
    name_: str
    player_url_: str


class SeasonStat(BaseModel):
    """One row of a player's statistics table."""

    model_config = ConfigDict(frozen=True)

    team: str | None = None
    league: str | None = None
    captaincy: str | None = None
    season: str | None = None
    season_short: int | None = None
    age: float | None = None

    games_played: Stat = None
    goals: Stat = None
    assists: Stat = None
    points: Stat = None
    penalty_minutes: Stat = None
    plus_minus: Stat = None
    games_played_playoffs: Stat = None
    goals_playoffs: Stat = None
    assists_playoffs: Stat = None
    points_playoffs: Stat = None
    penalty_minutes_playoffs: Stat = None
    plus_minus_playoffs: Stat = None


class PlayerRecord(BaseModel):
    """Vitals, roster data and season history for one player."""

    model_config = ConfigDict(extra="allow", frozen=True)

    name: str
    team: str | None = None
    league: str | None = None
    position: str | None = None
    shot_handedness: str | None = None
    birth_place: str | None = None
    birth_country: str | None = None
    birthday: date | None = None
    height: int | None = None
    weight: int | None = None
    season: str | None = None
    season_short: int | None = None
    age: float | None = None

    games_played: Stat = None
    goals: Stat = None
    assists: Stat = None
    points: Stat = None
    penalty_minutes: Stat = None
    plus_minus: Stat = None
    games_played_playoffs: Stat = None
    goals_playoffs: Stat = None
    assists_playoffs: Stat = None
    points_playoffs: Stat = None
    penalty_minutes_playoffs: Stat = None
    plus_minus_playoffs: Stat = None

    player_url: str
    team_url: str | None = None

    name_: str | None = None
    position_: str | None = None
    player_url_: str | None = None

    player_statistics: list[SeasonStat] = []

    @property
    def seasons_played(self) -> int:
        return len(self.player_statistics)

    @property
    def captaincies(self) -> list[SeasonStat]:
        """Season rows carrying a captaincy annotation."""
        return [s for s in self.player_statistics if s.captaincy]
