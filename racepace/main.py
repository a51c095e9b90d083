# Command-line entry point for the race pacing calculator
from __future__ import annotations

import logging
from pathlib import Path

import typer

from racepace.config import Settings
from racepace.errors import InvalidInputError, PacingError
from racepace.io.durations import format_duration, parse_duration
from racepace.io.models import IMPERIAL, METRIC, Race, scale_by_name
from racepace.io.splits_parser import parse_split_times, parse_splits_csv
from racepace.metrics.compute_pacing import compute_pacing
from racepace.report.render_markdown import render_markdown
from racepace.report.render_pdf import render_pdf

logger = logging.getLogger(__name__)

app = typer.Typer(help="Pace, speed and split schedules for a running race.", no_args_is_help=True)

DEMO_DURATION_S = 14400
DEMO_RACES = (
    Race(distance=42195, duration_s=DEMO_DURATION_S, scale=METRIC),
    Race(distance=46112, duration_s=DEMO_DURATION_S, scale=IMPERIAL),
)


@app.callback()
def main(ctx: typer.Context) -> None:
    settings = Settings.from_env()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    ctx.obj = settings


def _fail(exc: Exception) -> None:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=2)


def build_race(
    scale_name: str,
    distance: int | None = None,
    duration: str | None = None,
    pace: str | None = None,
    splits: str | None = None,
    splits_csv: Path | None = None,
) -> Race:
    """
    Build a Race from exactly one of: duration, pace, split list or split CSV.
    A distance with none of them gives a race without a duration.
    """
    scale = scale_by_name(scale_name)
    sources = [name for name, value in (
        ("--duration", duration), ("--pace", pace), ("--splits", splits), ("--splits-csv", splits_csv),
    ) if value is not None]
    if len(sources) > 1:
        raise InvalidInputError(f"Use only one of {', '.join(sources)}")

    if splits is not None or splits_csv is not None:
        recorded = parse_split_times(splits.split(",")) if splits is not None else parse_splits_csv(str(splits_csv))
        logger.info("Building race from %s recorded split(s)", len(recorded))
        return Race.from_splits(recorded, scale)

    if distance is None:
        raise InvalidInputError("--distance is required unless splits are given")
    if pace is not None:
        return Race.from_pace(distance, parse_duration(pace), scale)
    if duration is not None:
        return Race.new(distance, parse_duration(duration), scale)
    return Race(distance=distance, scale=scale)


@app.command()
def demo(ctx: typer.Context) -> None:
    """Marathon in four hours, metric and imperial."""
    settings: Settings = ctx.obj
    try:
        for race in DEMO_RACES:
            typer.echo("")
            typer.echo(
                f"Distance: {race.distance}{race.scale.distance_unit}, "
                f"Duration: {format_duration(race.duration, settings.include_hours_always)}"
            )
            typer.echo(f"Pace ({race.scale.split_unit}): {format_duration(race.average_pace())}")
            typer.echo(f"Splits: {race.num_splits()}")
    except PacingError as exc:
        _fail(exc)


@app.command()
def report(
    ctx: typer.Context,
    distance: int | None = typer.Option(None, "--distance", "-d", help="Distance in meters (metric) or yards (imperial)"),
    duration: str | None = typer.Option(None, "--duration", "-t", help="Target time, H:MM:SS or MM:SS"),
    pace: str | None = typer.Option(None, "--pace", "-p", help="Target pace per split, MM:SS"),
    splits: str | None = typer.Option(None, "--splits", help="Recorded split times, comma separated"),
    splits_csv: Path | None = typer.Option(None, "--splits-csv", help="CSV file with one split time per row"),
    scale: str | None = typer.Option(None, "--scale", "-s", help="metric or imperial"),
    degree: int | None = typer.Option(None, "--degree", min=0, help="Seconds off the average pace at the extremes"),
    title: str = typer.Option("Race", "--title", help="Report title"),
    pdf: Path | None = typer.Option(None, "--pdf", help="Also write the report as PDF"),
) -> None:
    """Print a Markdown pacing report with even, negative and positive splits."""
    settings: Settings = ctx.obj
    try:
        race = build_race(scale or settings.scale, distance, duration, pace, splits, splits_csv)
        payload = compute_pacing(race, settings.degree_seconds if degree is None else degree)
    except PacingError as exc:
        _fail(exc)
        return

    payload["title"] = title
    md = render_markdown(payload, include_hours_always=settings.include_hours_always)
    typer.echo(md)

    if pdf is not None:
        render_pdf(md, pdf)
        logger.info("Wrote PDF report to %s", pdf)


if __name__ == "__main__":
    app()
