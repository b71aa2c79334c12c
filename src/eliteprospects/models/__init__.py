"""Pydantic data models for player profiles."""

from .player import COUNTING_STATS, PlayerRecord, PlayerVitals, RosterRow, SeasonStat

__all__ = [
    "COUNTING_STATS",
    "PlayerRecord",
    "PlayerVitals",
    "RosterRow",
    "SeasonStat",
]
