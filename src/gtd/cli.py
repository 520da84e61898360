"""gtd CLI - task prioritization."""

import json
import logging
import sys
from datetime import datetime

import click
import requests

from .adapters.http_api import AuthenticationError
from .adapters.json_file import TaskSourceError
from .config import SOURCES, load_config
from .core.dates import DateContext, create_date_context
from .core.priority import Category
from .core.report import CATEGORY_LABELS
from .core.tasks import calculate_points, compute_points
from .workflows import compile_stats, compile_task_report, get_repository, load_tasks, prioritize

CATEGORY_CHOICES = [c.value for c in Category]


def _context(as_of: datetime | None) -> DateContext:
    if as_of:
        return DateContext.for_day(as_of.date())
    return create_date_context()


def _fetch(source: str | None, tasks_file: str | None, include_completed: bool):
    """Shared fetch with error reporting."""
    config = load_config()
    try:
        repo = get_repository(config, source, tasks_file)
        return load_tasks(repo, include_completed or config.show_completed)
    except (AuthenticationError, TaskSourceError, requests.RequestException) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


source_option = click.option(
    "--source", type=click.Choice(SOURCES), default=None, help="Task source (defaults to config)"
)
file_option = click.option("--file", "tasks_file", default=None, help="Path to a JSON task export")
as_of_option = click.option(
    "--as-of",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Evaluate as of this date (YYYY-MM-DD)",
)


@click.group()
@click.version_option(package_name="gtd")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """gtd - Task prioritization CLI."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@main.command()
@source_option
@file_option
@as_of_option
@click.option("--category", type=click.Choice(CATEGORY_CHOICES), default=None, help="Only this category")
@click.option("--all", "include_completed", is_flag=True, help="Include completed tasks")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def tasks(
    source: str | None,
    tasks_file: str | None,
    as_of: datetime | None,
    category: str | None,
    include_completed: bool,
    as_json: bool,
):
    """List tasks in priority order."""
    all_tasks = _fetch(source, tasks_file, include_completed)
    context = _context(as_of)

    if as_json:
        ordered = prioritize(all_tasks, category, context)
        click.echo(json.dumps([t.to_dict() for t in ordered], indent=2))
        return

    click.echo(compile_task_report(all_tasks, category, context))


@main.command()
@source_option
@file_option
@as_of_option
@click.option("--all", "include_completed", is_flag=True, help="Include completed tasks")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def stats(
    source: str | None,
    tasks_file: str | None,
    as_of: datetime | None,
    include_completed: bool,
    as_json: bool,
):
    """Count tasks per category."""
    all_tasks = _fetch(source, tasks_file, include_completed)
    counts = compile_stats(all_tasks, _context(as_of))

    if as_json:
        click.echo(json.dumps(counts, indent=2))
        return

    for category in Category:
        click.echo(f"{CATEGORY_LABELS[category]:10} {counts[category.value]}")


@main.command()
@click.argument("importance", type=int)
@click.argument("complexity", type=int)
@click.option("--clamp", is_flag=True, help="Clamp inputs and result into their valid ranges")
def points(importance: int, complexity: int, clamp: bool):
    """Score a task from IMPORTANCE (0-50) and COMPLEXITY (1-9)."""
    score = compute_points(importance, complexity) if clamp else calculate_points(importance, complexity)
    click.echo(score)
