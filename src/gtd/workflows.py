"""Workflow layer between the CLI and the functional core.

Each function resolves a repository from config, fetches, and hands the
tasks to the pure core.
"""

import logging

from .adapters.http_api import HttpTaskAdapter
from .adapters.json_file import JsonFileTaskStore
from .config import Config
from .core.dates import DateContext, create_date_context
from .core.priority import Category
from .core.report import format_report
from .core.sorting import category_stats, filter_active, filter_by_category, sort_by_priority
from .core.tasks import Task
from .ports.task_repo import TaskRepository

logger = logging.getLogger(__name__)


def get_repository(
    config: Config,
    source: str | None = None,
    tasks_file: str | None = None,
) -> TaskRepository:
    """Resolve the task source from CLI overrides, falling back to config."""
    source = source or ("file" if tasks_file else config.source)
    if source == "api":
        return HttpTaskAdapter(config)
    path = tasks_file or config.tasks_path
    logger.debug(f"Reading tasks from {path}")
    return JsonFileTaskStore(path)


def load_tasks(repo: TaskRepository, include_completed: bool = False) -> list[Task]:
    """Fetch every task, hiding completed ones unless asked."""
    tasks = repo.fetch_all()
    if include_completed:
        return tasks
    return filter_active(tasks)


def prioritize(
    tasks: list[Task],
    category: Category | str | None = None,
    context: DateContext | None = None,
) -> list[Task]:
    """Sort by priority, optionally narrowed to one category."""
    context = context or create_date_context()
    if category:
        tasks = filter_by_category(tasks, category, context)
    return sort_by_priority(tasks, context)


def compile_task_report(
    tasks: list[Task],
    category: Category | str | None = None,
    context: DateContext | None = None,
) -> str:
    """Prioritize tasks and render them as a category report."""
    context = context or create_date_context()
    return format_report(prioritize(tasks, category, context), context)


def compile_stats(tasks: list[Task], context: DateContext | None = None) -> dict[str, int]:
    """Count tasks per category, keyed by category value."""
    return {c.value: count for c, count in category_stats(tasks, context).items()}
