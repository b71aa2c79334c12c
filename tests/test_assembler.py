"""Tests for record assembly and table export."""

from datetime import date

import pytest

from eliteprospects.assembler import (
    NESTED_COLUMN,
    OUTPUT_COLUMNS,
    REDUNDANT_COLUMNS,
    assemble_record,
    record_to_row,
    records_to_frame,
    seasons_to_frame,
)
from eliteprospects.models import PlayerRecord, PlayerVitals, RosterRow
from eliteprospects.parsers import parse_season_stats, parse_vitals


@pytest.fixture
def record(profile_page, roster_row):
    vitals = parse_vitals(profile_page, roster_row.name, roster_row.player_url)
    seasons = parse_season_stats(profile_page, vitals.birthday)
    return assemble_record(vitals, seasons, roster_row)


class TestAssembleRecord:
    """Tests for merging vitals, seasons and roster data."""

    def test_merged_fields(self, record, roster_row):
        assert record.name == "Sam Carter"
        assert record.team == "Riverside Rebels"
        assert record.position == "C"
        assert record.birthday == date(2000, 3, 5)
        assert record.height == 71
        assert record.weight == 185
        assert record.goals == 30
        assert record.plus_minus == 15
        assert record.games_played_playoffs is None
        assert record.player_url == roster_row.player_url

    def test_nested_statistics(self, record):
        assert record.seasons_played == 3
        assert [s.captaincy for s in record.captaincies] == ["A", "C"]

    def test_roster_level_derivations(self, record):
        assert record.season_short == 2018
        expected = (date(2018, 9, 15) - date(2000, 3, 5)).days / 365.25
        assert record.age == pytest.approx(expected)

    def test_roster_age_matches_season_age(self, record):
        """Roster and nested ages agree for the same season."""
        same = [s for s in record.player_statistics if s.season == record.season]
        assert same[0].age == record.age

    def test_roster_without_season(self, profile_page):
        row = RosterRow(name="A", player_url="https://example.com/p/1")
        vitals = parse_vitals(profile_page, row.name, row.player_url)

        record = assemble_record(vitals, [], row)

        assert record.season_short is None
        assert record.age is None
        assert record.player_statistics == []

    def test_extra_roster_fields_passed_through(self):
        row = RosterRow(name="A", player_url="https://example.com/p/1", draft_year="2018")
        vitals = PlayerVitals(name_="A", player_url_="https://example.com/p/1")

        row_out = record_to_row(assemble_record(vitals, [], row))

        assert row_out["draft_year"] == "2018"
        assert list(row_out)[-1] == NESTED_COLUMN


class TestRecordToRow:
    """Tests for output column order and redundancy stripping."""

    def test_column_order(self, record):
        row = record_to_row(record, strip_redundancy=False)
        assert list(row) == [*OUTPUT_COLUMNS, NESTED_COLUMN]

    def test_strip_redundancy(self, record):
        row = record_to_row(record)
        for column in REDUNDANT_COLUMNS:
            assert column not in row

    def test_keep_redundancy(self, record):
        row = record_to_row(record, strip_redundancy=False)

        assert row["name_"] == row["name"]
        assert row["position_"] == row["position"]
        assert row["player_url_"] == row["player_url"]

    def test_nested_rows_are_dicts(self, record):
        row = record_to_row(record)
        assert row[NESTED_COLUMN][2]["team"] == "Riverside Rebels"


class TestFrames:
    """Tests for DataFrame export."""

    def test_player_frame(self, record):
        frame = records_to_frame([record, record])

        assert len(frame) == 2
        assert "name_" not in frame.columns
        assert frame.columns[-1] == NESTED_COLUMN
        assert len(frame[NESTED_COLUMN].iloc[0]) == 3

    def test_empty_player_frame(self):
        frame = records_to_frame([])

        assert len(frame) == 0
        assert "name" in frame.columns
        assert "player_url_" not in frame.columns

    def test_missing_values_keep_integer_columns(self, record):
        """A player without height or weight does not turn the columns into floats."""
        other = PlayerRecord(name="Alex Reid", player_url="https://example.com/p/2")

        frame = records_to_frame([record, other])

        assert str(frame["height"].dtype) == "Int64"
        assert frame["height"].iloc[0] == 71
        assert frame["height"].isna().iloc[1]
        assert str(frame["weight"].dtype) == "Int64"
        assert str(frame["goals"].dtype) == "Int64"
        assert str(frame["season_short"].dtype) == "Int64"

    def test_seasons_frame(self, record):
        frame = seasons_to_frame([record])

        assert len(frame) == 3
        assert list(frame["season"]) == ["2016-2017", "2016-2017", "2017-2018"]
        assert set(frame["name"]) == {"Sam Carter"}

    def test_seasons_frame_integer_columns(self, record):
        frame = seasons_to_frame([record])

        assert str(frame["plus_minus"].dtype) == "Int64"
        assert frame["games_played_playoffs"].iloc[0] == 11
        assert frame["games_played_playoffs"].isna().iloc[2]

    def test_empty_seasons_frame(self):
        assert seasons_to_frame([]).empty
