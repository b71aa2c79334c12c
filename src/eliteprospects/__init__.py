"""Scrape player vitals and season-by-season statistics from profile pages."""

from .assembler import records_to_frame, seasons_to_frame
from .config import ScraperConfig
from .exceptions import (
    DerivationError,
    FetchError,
    InsufficientVitalsFields,
    MalformedSeasonFill,
    MissingStatsTable,
    ParseError,
    PlayerScrapeError,
    ScraperError,
    UnexpectedStatsLayout,
)
from .models import PlayerRecord, PlayerVitals, RosterRow, SeasonStat
from .pipeline import build_player_record, get_player_stats_individual, scrape_player_stats

__version__ = "0.1.0"

__all__ = [
    "DerivationError",
    "FetchError",
    "InsufficientVitalsFields",
    "MalformedSeasonFill",
    "MissingStatsTable",
    "ParseError",
    "PlayerRecord",
    "PlayerScrapeError",
    "PlayerVitals",
    "RosterRow",
    "ScraperConfig",
    "ScraperError",
    "SeasonStat",
    "UnexpectedStatsLayout",
    "build_player_record",
    "get_player_stats_individual",
    "records_to_frame",
    "scrape_player_stats",
    "seasons_to_frame",
]
