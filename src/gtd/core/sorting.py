"""Pure task sorting and category views - no I/O dependencies.

Nothing here mutates its input: every sort returns new lists, and tasks whose
subtasks get reordered are returned as copies.
"""

from dataclasses import replace
from functools import cmp_to_key

from .dates import DateContext, DateLike, create_date_context, normalize_date, to_instant
from .priority import (
    Category,
    compare_by_points,
    compare_tasks_priority,
    get_task_category,
)
from .tasks import Task


def sort_by_priority(tasks: list[Task], context: DateContext | None = None) -> list[Task]:
    """
    Sort top-level tasks by category, date urgency, and score.

    Subtasks are sorted by points only, at every depth, regardless of where
    their parent lands.
    """
    if not tasks:
        return []
    context = context or create_date_context()

    ordered = sorted(tasks, key=cmp_to_key(lambda a, b: compare_tasks_priority(a, b, context)))
    return [replace(t, subtasks=sort_subtasks_by_points(t.subtasks)) for t in ordered]


def sort_subtasks_by_points(subtasks: list[Task]) -> list[Task]:
    """Recursively sort subtasks by points desc, then newest first."""
    ordered = sorted(subtasks, key=cmp_to_key(compare_by_points))
    return [replace(t, subtasks=sort_subtasks_by_points(t.subtasks)) for t in ordered]


# ============== Secondary Sorts ==============


def _instant_or_min(value: DateLike | None) -> float:
    instant = to_instant(value)
    return instant.timestamp() if instant else float("-inf")


def sort_by_planned_date(tasks: list[Task]) -> list[Task]:
    """Earliest planned day first, undated tasks last."""

    def sort_key(t: Task) -> tuple[int, float]:
        day = normalize_date(t.planned_date)
        return (0, day.timestamp()) if day else (1, 0.0)

    return sorted(tasks, key=sort_key)


def sort_by_creation_date(tasks: list[Task]) -> list[Task]:
    """Newest first."""
    return sorted(tasks, key=lambda t: _instant_or_min(t.created_at), reverse=True)


def sort_by_completion_date(tasks: list[Task]) -> list[Task]:
    """Incomplete tasks first, then most recently completed."""

    def sort_key(t: Task) -> tuple[int, float]:
        completed = to_instant(t.completed_at)
        # Negative timestamp for descending sort
        return (1, -completed.timestamp()) if completed else (0, 0.0)

    return sorted(tasks, key=sort_key)


def sort_by_name(tasks: list[Task]) -> list[Task]:
    return sorted(tasks, key=lambda t: t.name.casefold())


def sort_by_importance(tasks: list[Task]) -> list[Task]:
    """Most important first, then highest points."""
    return sorted(tasks, key=lambda t: (-t.importance, -t.points))


def sort_by_complexity(tasks: list[Task]) -> list[Task]:
    """Simplest first, then highest points."""
    return sorted(tasks, key=lambda t: (t.complexity, -t.points))


# ============== Category Views ==============


def group_by_category(
    tasks: list[Task], context: DateContext | None = None
) -> dict[Category, list[Task]]:
    """Bucket tasks by category. Every category is present, in priority order."""
    context = context or create_date_context()
    groups: dict[Category, list[Task]] = {category: [] for category in Category}
    for task in tasks:
        groups[get_task_category(task, context)].append(task)
    return groups


def category_stats(tasks: list[Task], context: DateContext | None = None) -> dict[Category, int]:
    groups = group_by_category(tasks, context)
    return {category: len(members) for category, members in groups.items()}


def active_categories(tasks: list[Task], context: DateContext | None = None) -> list[Category]:
    """Categories holding at least one task, in priority order."""
    return [c for c, count in category_stats(tasks, context).items() if count > 0]


def filter_by_category(
    tasks: list[Task], category: Category | str, context: DateContext | None = None
) -> list[Task]:
    context = context or create_date_context()
    category = Category(category)
    return [t for t in tasks if get_task_category(t, context) is category]


def filter_overdue(tasks: list[Task], context: DateContext | None = None) -> list[Task]:
    return filter_by_category(tasks, Category.OVERDUE, context)


def filter_today(tasks: list[Task], context: DateContext | None = None) -> list[Task]:
    return filter_by_category(tasks, Category.TODAY, context)


def filter_tomorrow(tasks: list[Task], context: DateContext | None = None) -> list[Task]:
    return filter_by_category(tasks, Category.TOMORROW, context)


def filter_collected(tasks: list[Task], context: DateContext | None = None) -> list[Task]:
    return filter_by_category(tasks, Category.COLLECTED, context)


def filter_due_in_range(tasks: list[Task], start: DateLike, end: DateLike) -> list[Task]:
    """Tasks whose planned day falls within [start, end]."""
    start_day = normalize_date(start)
    end_day = normalize_date(end)
    if start_day is None or end_day is None:
        return []
    result = []
    for task in tasks:
        day = normalize_date(task.planned_date)
        if day is not None and start_day <= day <= end_day:
            result.append(task)
    return result


def filter_active(tasks: list[Task]) -> list[Task]:
    """Drop completed tasks."""
    return [t for t in tasks if not t.is_completed]
