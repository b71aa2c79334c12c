"""Command-line interface for the player profile scraper."""

import asyncio
import json
from pathlib import Path

import click
from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn, TimeElapsedColumn
from rich.table import Table

from .assembler import NESTED_COLUMN, records_to_frame
from .config import ScraperConfig
from .exceptions import PlayerScrapeError
from .models import RosterRow
from .pipeline import scrape_player_stats
from .roster import load_roster
from .utils import setup_logging

console = Console()


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Output logs as JSON")
@click.pass_context
def main(ctx: click.Context, verbose: bool, json_logs: bool) -> None:
    """Player profile scraper - vitals and season history per player."""
    ctx.ensure_object(dict)
    setup_logging(level="DEBUG" if verbose else "INFO", json_output=json_logs)


def _run(rows: list[RosterRow], config: ScraperConfig):
    """Run the pipeline, with a progress bar when enabled."""
    if not config.progress:
        return asyncio.run(scrape_player_stats(rows, config))

    with Progress(
        TextColumn("[bold]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("Scraping players", total=len(rows))

        def on_progress(index: int, total: int, row: RosterRow) -> None:
            progress.update(task, completed=index, description=row.name)

        return asyncio.run(scrape_player_stats(rows, config, on_progress=on_progress))


@main.command()
@click.argument("roster_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Output file")
@click.option("--format", "fmt", type=click.Choice(["json", "csv"]), default="json", show_default=True)
@click.option("--keep-redundant", is_flag=True, help="Keep name_, position_ and player_url_")
@click.option("--no-progress", is_flag=True, help="Disable the progress bar")
@click.option("--skip-errors", is_flag=True, help="Skip players that fail instead of aborting")
@click.option("--strict-tables", is_flag=True, help="Treat a missing stats table as an error")
@click.option("--delay-min", type=float, default=5.0, show_default=True, help="Minimum seconds between requests")
@click.option("--delay-max", type=float, default=10.0, show_default=True, help="Maximum seconds between requests")
def scrape(
    roster_file: Path,
    output: Path | None,
    fmt: str,
    keep_redundant: bool,
    no_progress: bool,
    skip_errors: bool,
    strict_tables: bool,
    delay_min: float,
    delay_max: float,
) -> None:
    """Scrape profiles for every player in ROSTER_FILE (.csv or .json)."""
    try:
        config = ScraperConfig(
            progress=not no_progress,
            strip_redundancy=not keep_redundant,
            on_error="skip" if skip_errors else "abort",
            missing_table="error" if strict_tables else "empty",
            delay_min=delay_min,
            delay_max=delay_max,
        )
    except ValueError as e:
        raise click.BadParameter(str(e)) from e

    rows = load_roster(roster_file)
    console.print(f"[bold]Scraping {len(rows)} players...[/bold]")

    try:
        records = _run(rows, config)
    except PlayerScrapeError as e:
        console.print(f"[red]✗ {e}[/red]")
        raise SystemExit(1) from e

    frame = records_to_frame(records, strip_redundancy=config.strip_redundancy)

    if fmt == "csv":
        frame[NESTED_COLUMN] = frame[NESTED_COLUMN].map(lambda s: json.dumps(s, default=str))
        text = frame.to_csv(index=False)
    else:
        text = frame.to_json(orient="records", date_format="iso", indent=2)

    if output:
        output.write_text(text, encoding="utf-8")
        console.print(f"[green]✓ Scraped {len(records)} of {len(rows)} players → {output}[/green]")
    else:
        click.echo(text)


@main.command()
@click.argument("player_url")
@click.option("--name", "-n", default="", help="Player name to attach to the record")
def show(player_url: str, name: str) -> None:
    """Show vitals and season history for a single profile."""
    config = ScraperConfig(progress=False)
    row = RosterRow(name=name or player_url, player_url=player_url)

    try:
        [record] = asyncio.run(scrape_player_stats([row], config))
    except PlayerScrapeError as e:
        console.print(f"[red]✗ {e}[/red]")
        raise SystemExit(1) from e

    console.print(f"\n[bold]{record.name}[/bold]")

    info_table = Table(show_header=False, box=None)
    info_table.add_column("Field", style="cyan")
    info_table.add_column("Value")

    height = f"{record.height // 12}'{record.height % 12}\"" if record.height else "N/A"
    info_table.add_row("Birth Date", str(record.birthday or "N/A"))
    info_table.add_row("Birthplace", f"{record.birth_place or ''}, {record.birth_country or ''}")
    info_table.add_row("Position", record.position_ or "N/A")
    info_table.add_row("Height", height)
    info_table.add_row("Weight", f"{record.weight} lbs" if record.weight else "N/A")
    info_table.add_row("Shoots", record.shot_handedness or "N/A")
    console.print(info_table)

    if not record.player_statistics:
        console.print("\n[dim]No season statistics[/dim]")
        return

    table = Table(title="Season Statistics")
    table.add_column("Season", style="cyan")
    table.add_column("Team")
    table.add_column("League", style="dim")
    table.add_column("Age", justify="right")
    for header in ("GP", "G", "A", "TP", "PIM", "+/-"):
        table.add_column(header, justify="right")

    for s in record.player_statistics:
        team = f"{s.team} ({s.captaincy})" if s.captaincy else (s.team or "")
        table.add_row(
            s.season or "",
            team,
            s.league or "",
            f"{s.age:.2f}" if s.age is not None else "",
            *(
                "" if v is None else str(v)
                for v in (s.games_played, s.goals, s.assists, s.points, s.penalty_minutes, s.plus_minus)
            ),
        )
    console.print(table)


if __name__ == "__main__":
    main()
