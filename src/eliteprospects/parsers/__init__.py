"""HTML parsers for player profile pages."""

from .season_stats import (
    STATS_TABLE_COLUMNS,
    age_at,
    age_for_season,
    draft_eligibility_date,
    forward_fill_seasons,
    parse_captaincy,
    parse_season_stats,
    season_short,
)
from .vitals import VITALS_FIELDS, parse_birthday, parse_height, parse_vitals, parse_weight

__all__ = [
    "STATS_TABLE_COLUMNS",
    "VITALS_FIELDS",
    "age_at",
    "age_for_season",
    "draft_eligibility_date",
    "forward_fill_seasons",
    "parse_birthday",
    "parse_captaincy",
    "parse_height",
    "parse_season_stats",
    "parse_vitals",
    "parse_weight",
    "season_short",
]
