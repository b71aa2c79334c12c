"""Merge vitals, season history and roster rows into player records."""

from collections.abc import Sequence
from typing import Any

import pandas as pd

from .models import COUNTING_STATS, PlayerRecord, PlayerVitals, RosterRow, SeasonStat
from .parsers import age_for_season, season_short

OUTPUT_COLUMNS = (
    "name",
    "team",
    "league",
    "position",
    "shot_handedness",
    "birth_place",
    "birth_country",
    "birthday",
    "height",
    "weight",
    "season",
    "season_short",
    "age",
    *COUNTING_STATS,
    "player_url",
    "team_url",
    "name_",
    "position_",
    "player_url_",
)

# Duplicates of name, position and player_url
REDUNDANT_COLUMNS = ("name_", "position_", "player_url_")

# Whole-number columns, kept as nullable Int64 in frames
INTEGER_COLUMNS = ("height", "weight", "season_short", *COUNTING_STATS)

NESTED_COLUMN = "player_statistics"


def assemble_record(
    vitals: PlayerVitals,
    seasons: Sequence[SeasonStat],
    row: RosterRow,
) -> PlayerRecord:
    """
    Build the record for one player.

    season_short and age are recomputed here from the roster row's own
    season, independently of the per-season values in player_statistics.
    """
    data = {
        **row.model_dump(),
        **vitals.model_dump(),
        "season_short": season_short(row.season),
        "age": age_for_season(vitals.birthday, row.season),
        NESTED_COLUMN: list(seasons),
    }
    return PlayerRecord(**data)


def record_to_row(record: PlayerRecord, strip_redundancy: bool = True) -> dict[str, Any]:
    """Flatten a record into an ordered dict of output columns."""
    data = record.model_dump()
    columns = [c for c in OUTPUT_COLUMNS if not (strip_redundancy and c in REDUNDANT_COLUMNS)]

    out = {column: data[column] for column in columns}
    for key, value in (record.model_extra or {}).items():
        out[key] = value
    out[NESTED_COLUMN] = data[NESTED_COLUMN]
    return out


def _integer_dtypes(frame: pd.DataFrame) -> pd.DataFrame:
    """Cast whole-number columns to Int64; columns holding text are left as is."""
    for column in INTEGER_COLUMNS:
        if column not in frame.columns:
            continue
        values = frame[column]
        if pd.api.types.is_numeric_dtype(values) or values.isna().all():
            frame[column] = values.astype("Int64")
    return frame


def records_to_frame(
    records: Sequence[PlayerRecord],
    strip_redundancy: bool = True,
) -> pd.DataFrame:
    """One row per player, season history nested as a list of dicts."""
    rows = [record_to_row(r, strip_redundancy) for r in records]
    if not rows:
        columns = [c for c in OUTPUT_COLUMNS if not (strip_redundancy and c in REDUNDANT_COLUMNS)]
        return pd.DataFrame(columns=[*columns, NESTED_COLUMN])
    return _integer_dtypes(pd.DataFrame(rows))


def seasons_to_frame(records: Sequence[PlayerRecord]) -> pd.DataFrame:
    """One row per player-season, keyed by the player's name and URL."""
    rows = [
        {"name": r.name, "player_url": r.player_url, **stat.model_dump()}
        for r in records
        for stat in r.player_statistics
    ]
    if not rows:
        return pd.DataFrame(
            columns=["name", "player_url", *SeasonStat.model_fields]
        )
    return _integer_dtypes(pd.DataFrame(rows))
