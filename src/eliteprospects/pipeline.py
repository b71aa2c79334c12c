"""Scrape vitals and season history for a list of roster rows."""

import asyncio
from collections.abc import Iterable, Mapping
from typing import Any

import httpx
import pandas as pd
import structlog
from bs4 import BeautifulSoup

from .assembler import assemble_record, records_to_frame
from .config import ScraperConfig
from .exceptions import FetchError, PlayerScrapeError
from .models import PlayerRecord, RosterRow
from .parsers import parse_season_stats, parse_vitals
from .scrapers import PlayerProfileScraper
from .scrapers.player_profile import ProgressCallback

logger = structlog.get_logger()


def to_roster_rows(rows: Iterable[RosterRow | Mapping[str, Any]]) -> list[RosterRow]:
    return [r if isinstance(r, RosterRow) else RosterRow(**r) for r in rows]


def build_player_record(
    page: BeautifulSoup,
    row: RosterRow,
    config: ScraperConfig | None = None,
) -> PlayerRecord:
    """
    Parse one profile page into a player record.

    Pure function of the page and roster row, no I/O.
    """
    config = config or ScraperConfig()
    vitals = parse_vitals(page, row.name, row.player_url)
    seasons = parse_season_stats(page, vitals.birthday, missing_table=config.missing_table)
    return assemble_record(vitals, seasons, row)


def _log_progress(index: int, total: int, row: RosterRow) -> None:
    logger.info("player_progress", index=index, total=total, name=row.name)


async def scrape_player_stats(
    rows: Iterable[RosterRow | Mapping[str, Any]],
    config: ScraperConfig | None = None,
    on_progress: ProgressCallback | None = None,
    cancel: asyncio.Event | None = None,
    client: httpx.AsyncClient | None = None,
    scraper: PlayerProfileScraper | None = None,
) -> list[PlayerRecord]:
    """
    Scrape every roster row's profile into a PlayerRecord.

    Players are processed one at a time, in input order. With
    on_error="abort" the first failing player raises PlayerScrapeError;
    with on_error="skip" it is logged and left out of the result.

    Args:
        rows: Roster rows (models or mappings)
        config: Scraper options
        on_progress: Progress hook, used only when config.progress is set
        cancel: Cooperative cancellation, checked between players
        client: Optional preconfigured HTTP client
        scraper: Optional scraper instance, overriding client

    Returns:
        Records for all successfully processed players
    """
    config = config or ScraperConfig()
    roster = to_roster_rows(rows)
    progress = (on_progress or _log_progress) if config.progress else None
    scraper = scraper or PlayerProfileScraper(config=config, client=client)

    records: list[PlayerRecord] = []
    async with scraper:
        async for page, row in scraper.iter_pages(roster, on_progress=progress, cancel=cancel):
            try:
                if isinstance(page, FetchError):
                    raise page
                records.append(build_player_record(page, row, config))
            except Exception as e:
                if config.on_error == "abort":
                    raise PlayerScrapeError(row.player_url, e) from e
                logger.warning(
                    "player_skipped",
                    player_url=row.player_url,
                    name=row.name,
                    error=str(e),
                )

    logger.info("scraped_players", count=len(records), requested=len(roster))
    return records


def get_player_stats_individual(
    rows: Iterable[RosterRow | Mapping[str, Any]],
    progress: bool = True,
    strip_redundancy: bool = True,
    **options: Any,
) -> pd.DataFrame:
    """
    Scrape player profiles and return one flat table.

    Args:
        rows: Roster rows with at least name and player_url
        progress: Report progress once per player
        strip_redundancy: Drop name_, position_ and player_url_
        **options: Further ScraperConfig fields (delay_min, on_error, ...)

    Returns:
        DataFrame with one row per processed player and a nested
        player_statistics column
    """
    config = ScraperConfig(progress=progress, strip_redundancy=strip_redundancy, **options)
    records = asyncio.run(scrape_player_stats(rows, config))
    return records_to_frame(records, strip_redundancy=config.strip_redundancy)
