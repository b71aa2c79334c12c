"""Tests for the command-line interface."""

import json

import httpx
import pytest
from click.testing import CliRunner

from eliteprospects.cli import main
from eliteprospects.scrapers import PlayerProfileScraper

from conftest import STATS_ROWS, profile_html


@pytest.fixture(autouse=True)
def mock_network(monkeypatch):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("missing"):
            return httpx.Response(404)
        return httpx.Response(200, html=profile_html(rows=STATS_ROWS))

    async def no_sleep(seconds: float) -> None:
        return None

    original = PlayerProfileScraper.__init__

    def patched(self, config=None, client=None, sleep=None, rng=None):
        original(
            self,
            config=config,
            client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
            sleep=no_sleep,
            rng=rng,
        )

    monkeypatch.setattr(PlayerProfileScraper, "__init__", patched)


@pytest.fixture
def roster_file(tmp_path):
    path = tmp_path / "roster.json"
    path.write_text(
        json.dumps([
            {"name": "Sam Carter", "player_url": "https://example.com/p/sam", "position": "C"},
            {"name": "Lost Player", "player_url": "https://example.com/p/missing"},
        ]),
        encoding="utf-8",
    )
    return path


class TestScrapeCommand:
    """Tests for the scrape command."""

    def test_skip_errors_json(self, roster_file, tmp_path):
        out = tmp_path / "out.json"
        result = CliRunner().invoke(
            main, ["scrape", str(roster_file), "-o", str(out), "--skip-errors", "--no-progress"]
        )

        assert result.exit_code == 0, result.output
        data = json.loads(out.read_text(encoding="utf-8"))
        assert [r["name"] for r in data] == ["Sam Carter"]
        assert len(data[0]["player_statistics"]) == 3
        assert "name_" not in data[0]

    def test_csv_keep_redundant(self, roster_file, tmp_path):
        out = tmp_path / "out.csv"
        result = CliRunner().invoke(
            main,
            ["scrape", str(roster_file), "-o", str(out), "--format", "csv",
             "--skip-errors", "--keep-redundant", "--no-progress"],
        )

        assert result.exit_code == 0, result.output
        header = out.read_text(encoding="utf-8").splitlines()[0]
        assert "name_" in header
        assert header.endswith("player_statistics")

    def test_abort_on_error(self, roster_file):
        result = CliRunner().invoke(main, ["scrape", str(roster_file), "--no-progress"])

        assert result.exit_code == 1
        assert "https://example.com/p/missing" in result.output

    def test_invalid_delay(self, roster_file):
        result = CliRunner().invoke(
            main, ["scrape", str(roster_file), "--delay-min", "9", "--delay-max", "1"]
        )
        assert result.exit_code != 0


class TestShowCommand:
    """Tests for the show command."""

    def test_show(self):
        result = CliRunner().invoke(main, ["show", "https://example.com/p/sam", "--name", "Sam Carter"])

        assert result.exit_code == 0, result.output
        assert "Sam Carter" in result.output
        assert "Season Statistics" in result.output
