"""Season-by-season statistics table parser."""

from datetime import date
from typing import Literal

from bs4 import BeautifulSoup, Tag

from ..exceptions import MalformedSeasonFill, MissingStatsTable, UnexpectedStatsLayout
from ..models import SeasonStat
from ..utils import clean_cell, to_number

STATS_TABLE_SELECTOR = (
    '[class="table table-striped table-condensed table-sortable '
    'player-stats highlight-stats"]'
)

STATS_TABLE_COLUMNS = (
    "season",
    "team",
    "league",
    "games_played",
    "goals",
    "assists",
    "points",
    "penalty_minutes",
    "plus_minus",
    "blank",
    "playoffs",
    "games_played_playoffs",
    "goals_playoffs",
    "assists_playoffs",
    "points_playoffs",
    "penalty_minutes_playoffs",
    "plus_minus_playoffs",
)

# Layout-only columns
DROPPED_COLUMNS = ("blank", "playoffs")

CAPTAINCY_OPEN = "“"
CAPTAINCY_CLOSE = "”"

# Draft eligibility is measured on September 15
ELIGIBILITY_MONTH = 9
ELIGIBILITY_DAY = 15

DAYS_PER_YEAR = 365.25


def parse_captaincy(team: str | None) -> tuple[str | None, str | None]:
    """
    Split a captaincy annotation off a team cell.

    'Riverside Rebels “C”' -> ('Riverside Rebels', 'C')
    """
    if team is None or CAPTAINCY_OPEN not in team:
        return team, None

    name, annotation = team.split(CAPTAINCY_OPEN, 1)
    captaincy = annotation.split(CAPTAINCY_CLOSE, 1)[0]
    return clean_cell(name), clean_cell(captaincy)


def forward_fill_seasons(seasons: list[str | None]) -> list[str]:
    """Carry each season label down over the continuation rows below it."""
    filled: list[str] = []
    last: str | None = None
    for season in seasons:
        if season is not None:
            last = season
        elif last is None:
            raise MalformedSeasonFill()
        filled.append(last)
    return filled


def season_short(season: str | None) -> int | None:
    """Year after the season's start year: '2017-2018' -> 2018."""
    if season is None:
        return None
    try:
        return int(season.split("-", 1)[0].strip()) + 1
    except ValueError:
        return None


def draft_eligibility_date(short_year: int | None) -> date | None:
    if short_year is None:
        return None
    try:
        return date(short_year, ELIGIBILITY_MONTH, ELIGIBILITY_DAY)
    except ValueError:
        return None  # year outside the calendar range


def age_at(birthday: date | None, on: date | None) -> float | None:
    """Age in fractional years on a given date."""
    if birthday is None or on is None:
        return None
    return (on - birthday).days / DAYS_PER_YEAR


def age_for_season(birthday: date | None, season: str | None) -> float | None:
    """Age on the draft eligibility date of a season."""
    return age_at(birthday, draft_eligibility_date(season_short(season)))


def _row_cells(row: Tag) -> list[str | None]:
    """Cell texts of a table row, repeating cells that span columns."""
    cells: list[str | None] = []
    for cell in row.find_all(["td", "th"], recursive=False):
        text = clean_cell(cell.get_text(" "))
        try:
            span = int(cell.get("colspan", 1))
        except ValueError:
            span = 1
        cells.extend([text] * max(span, 1))
    return cells


def extract_stats_rows(soup: BeautifulSoup) -> list[dict[str, str | None]] | None:
    """
    Read the statistics table into rows keyed by column name.

    Returns None when the page has no statistics table.
    """
    table = soup.select_one(STATS_TABLE_SELECTOR)
    if table is None:
        return None

    rows = []
    for tr in table.find_all("tr"):
        if tr.find("td") is None:
            continue  # header row
        cells = _row_cells(tr)
        if len(cells) != len(STATS_TABLE_COLUMNS):
            raise UnexpectedStatsLayout(
                row_number=len(rows) + 1,
                found=len(cells),
                expected=len(STATS_TABLE_COLUMNS),
            )
        rows.append(dict(zip(STATS_TABLE_COLUMNS, cells)))
    return rows


def parse_season_stats(
    soup: BeautifulSoup,
    birthday: date | None,
    missing_table: Literal["empty", "error"] = "empty",
) -> list[SeasonStat]:
    """
    Extract a player's season history from a profile page.

    Args:
        soup: Parsed profile page
        birthday: Player birthday, used for age at each season's eligibility date
        missing_table: "empty" returns no seasons when the table is absent,
            "error" raises MissingStatsTable

    Returns:
        SeasonStat per table row, in table order
    """
    rows = extract_stats_rows(soup)
    if rows is None:
        if missing_table == "error":
            raise MissingStatsTable()
        return []

    seasons = forward_fill_seasons([row["season"] for row in rows])

    stats = []
    for row, season in zip(rows, seasons):
        team, captaincy = parse_captaincy(row["team"])
        counting = {
            column: to_number(value)
            for column, value in row.items()
            if column not in ("season", "team", "league", *DROPPED_COLUMNS)
        }
        stats.append(
            SeasonStat(
                team=team,
                league=row["league"],
                captaincy=captaincy,
                season=season,
                season_short=season_short(season),
                age=age_for_season(birthday, season),
                **counting,
            )
        )
    return stats
