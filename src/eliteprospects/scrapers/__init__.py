"""Scraper modules for player profile pages."""

from .base import BaseScraper
from .player_profile import PlayerProfileScraper

__all__ = [
    "BaseScraper",
    "PlayerProfileScraper",
]
