"""Shared fixtures: sample profile pages and roster rows."""

import pytest
from bs4 import BeautifulSoup

from eliteprospects.models import RosterRow

VITALS_VALUES = [
    "Mar 05, 2000",
    "18",
    "Kingston, ON",
    "Canada",
    "Kingston Jr. Frontenacs",
    "C",
    "5' 11\"",
    "185lbs",
    "L",
]

STATS_HEADER = """
<thead>
  <tr>
    <th>S</th><th>Team</th><th>League</th><th>GP</th><th>G</th><th>A</th>
    <th>TP</th><th>PIM</th><th>+/-</th><th></th><th>POST</th><th>GP</th>
    <th>G</th><th>A</th><th>TP</th><th>PIM</th><th>+/-</th>
  </tr>
</thead>
"""


def vitals_html(values=VITALS_VALUES) -> str:
    items = "\n".join(
        f'<div class="col-xs-4 fac-lbl-light">Label</div>'
        f'<div class="col-xs-8 fac-lbl-dark">\n  {v}\n</div>'
        for v in values
    )
    return f'<div class="table-view">{items}</div>'


def stats_row(cells) -> str:
    return "<tr>" + "".join(f"<td>{c}</td>" for c in cells) + "</tr>"


def stats_html(rows) -> str:
    body = "\n".join(stats_row(r) for r in rows)
    return (
        '<table class="table table-striped table-condensed table-sortable '
        f'player-stats highlight-stats">{STATS_HEADER}<tbody>{body}</tbody></table>'
    )


def profile_html(vitals=VITALS_VALUES, rows=None) -> str:
    table = "" if rows is None else stats_html(rows)
    return f"<html><body>{vitals_html(vitals)}{table}</body></html>"


STATS_ROWS = [
    ["2016-2017", "Kingston Frontenacs", "OHL", "62", "12", "20", "32", "18", "-4",
     "", "|", "11", "2", "3", "5", "4", "+1"],
    ["", "Peterborough Petes “A”", "OHL", "5", "1", "1", "2", "0", "-", "", "|",
     "-", "-", "-", "-", "-", "-"],
    ["2017-2018", "Riverside Rebels “C”", "OHL", "68", "30", "41", "71", "22", "+15",
     "", "|", "-", "-", "-", "-", "-", "-"],
]


@pytest.fixture
def profile_page() -> BeautifulSoup:
    return BeautifulSoup(profile_html(rows=STATS_ROWS), "lxml")


@pytest.fixture
def roster_row() -> RosterRow:
    return RosterRow(
        name="Sam Carter",
        player_url="https://www.eliteprospects.com/player/1234/sam-carter",
        team="Riverside Rebels",
        team_url="https://www.eliteprospects.com/team/55/riverside-rebels",
        league="OHL",
        position="C",
        season="2017-2018",
        games_played="68",
        goals="30",
        assists="41",
        points="71",
        penalty_minutes="22",
        plus_minus="+15",
        games_played_playoffs="-",
    )
