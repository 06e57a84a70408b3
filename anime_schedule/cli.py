"""CLI entry point for the anime airing schedule."""

import asyncio
import logging
import sys

import click

from .constants.config import ANILIST_API_URL, DELAY_BETWEEN_REQUESTS_MS
from .constants.paths import DEFAULT_OUTPUT_PATH
from .models.config import ScheduleConfig


def schedule_options(f):
    """Options shared by the commands that query AniList."""
    f = click.option(
        "--api-url",
        default=ANILIST_API_URL,
        show_default=True,
        help="AniList GraphQL endpoint"
    )(f)
    f = click.option(
        "--delay-ms",
        default=DELAY_BETWEEN_REQUESTS_MS,
        type=click.IntRange(min=0),
        show_default=True,
        help="Delay between requests in milliseconds"
    )(f)
    f = click.option(
        "--title", "-t",
        "titles",
        multiple=True,
        help="Anime title to look up (can specify multiple, default: built-in list)"
    )(f)
    return f


def build_config(titles: tuple[str, ...], delay_ms: int, api_url: str) -> ScheduleConfig:
    options = {"api_url": api_url, "delay_ms": delay_ms}
    if titles:
        options["titles"] = list(titles)
    return ScheduleConfig(**options)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log each request")
def cli(verbose: bool):
    """Anime Schedule - AniList airing schedule cards."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command("render")
@schedule_options
@click.option(
    "--output", "-o",
    default=str(DEFAULT_OUTPUT_PATH),
    type=click.Path(dir_okay=False, writable=True),
    show_default=True,
    help="HTML file to write"
)
def render(titles: tuple[str, ...], delay_ms: int, api_url: str, output: str):
    """Fetch the schedule and write it as an HTML page.

    Examples:

        anisched render

        anisched render -o schedule.html -t "Dandadan Season 2" -t "Bad Girl"
    """
    from .processors.orchestrator import build_schedule

    config = build_config(titles, delay_ms, api_url)
    click.echo(f"Fetching {len(config.titles)} titles from AniList...")

    result, document = asyncio.run(build_schedule(config))

    with open(output, "w", encoding="utf-8") as f:
        f.write(document.to_html(inline_styles=True))

    click.echo(f"Wrote {len(result.records)} cards to {output}")
    if result.has_error:
        click.echo("Warning: some titles could not be loaded", err=True)


@cli.command("list")
@schedule_options
def list_schedule(titles: tuple[str, ...], delay_ms: int, api_url: str):
    """Print the next episode of each title.

    Exits with status 1 if any title could not be loaded.

    Examples:

        anisched list

        anisched list --delay-ms 2000
    """
    from .processors.orchestrator import build_schedule

    config = build_config(titles, delay_ms, api_url)

    def on_record(record):
        season = record.season_and_year or "-"
        click.echo(f"{record.english_name} | {season} | {record.next_episode_info}")

    result, _ = asyncio.run(build_schedule(config, on_record=on_record))

    if not result.records:
        click.echo("No anime details found for the requested titles.", err=True)
    if result.has_error:
        click.echo("Error: some titles could not be loaded", err=True)
        sys.exit(1)


@cli.command("serve")
@click.option(
    "--port",
    default=3000,
    type=int,
    help="Port to run the server on (default: 3000)"
)
@click.option(
    "--host",
    default="0.0.0.0",
    help="Host to bind to (default: 0.0.0.0)"
)
@schedule_options
def serve(port: int, host: str, titles: tuple[str, ...], delay_ms: int, api_url: str):
    """Start the schedule web server.

    Every page load fetches the configured titles from AniList.

    Examples:

        anisched serve

        anisched serve --port 8080
    """
    from .server import run_server
    run_server(host=host, port=port, config=build_config(titles, delay_ms, api_url))
