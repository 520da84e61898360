"""Pure task categorization and priority comparison - no I/O dependencies.

Every task falls into exactly one of six categories, derived from its
effective date and score against a DateContext. Categories are never read
from stored data; they are recomputed on every call.
"""

from datetime import datetime
from enum import Enum

from .dates import DateContext, is_date_urgent, normalize_date, to_instant
from .tasks import COLLECTED_THRESHOLD, DEFAULT_COMPLEXITY, DEFAULT_IMPORTANCE, Task


class Category(str, Enum):
    """Task category, declared in priority order."""

    COLLECTED = "collected"
    OVERDUE = "overdue"
    TODAY = "today"
    TOMORROW = "tomorrow"
    NO_DATE = "no-date"
    FUTURE = "future"

    @property
    def priority(self) -> int:
        """Fixed rank (1-6), lower sorts first."""
        return _CATEGORY_PRIORITY[self]


_CATEGORY_PRIORITY = {
    Category.COLLECTED: 1,
    Category.OVERDUE: 2,
    Category.TODAY: 3,
    Category.TOMORROW: 4,
    Category.NO_DATE: 5,
    Category.FUTURE: 6,
}


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def _require(task: Task | None) -> Task:
    if task is None:
        raise TypeError("task is required")
    return task


def get_effective_date(task: Task, context: DateContext) -> datetime | None:
    """
    The single date a task is judged by.

    An urgent due date wins over any planned date; a non-urgent due date is
    ignored.
    """
    task = _require(task)
    if task.due_date is not None and is_date_urgent(task.due_date, context):
        return normalize_date(task.due_date)
    return normalize_date(task.planned_date)


def is_collected_task(task: Task, context: DateContext) -> bool:
    """Undated task that is either freshly captured or a legacy 500+ inbox item."""
    if get_effective_date(task, context) is not None:
        return False
    is_new_default = task.importance == DEFAULT_IMPORTANCE and task.complexity == DEFAULT_COMPLEXITY
    return is_new_default or task.points >= COLLECTED_THRESHOLD


def is_overdue_task(task: Task, context: DateContext) -> bool:
    effective = get_effective_date(task, context)
    return effective is not None and effective < context.today


def is_today_task(task: Task, context: DateContext) -> bool:
    effective = get_effective_date(task, context)
    return effective is not None and effective == context.today


def is_tomorrow_task(task: Task, context: DateContext) -> bool:
    effective = get_effective_date(task, context)
    return effective is not None and effective == context.tomorrow


def is_future_task(task: Task, context: DateContext) -> bool:
    effective = get_effective_date(task, context)
    return effective is not None and effective >= context.day_after_tomorrow


def get_task_category(task: Task, context: DateContext) -> Category:
    """Classify a task. First matching rule wins."""
    task = _require(task)
    effective = get_effective_date(task, context)

    if effective is None:
        if is_collected_task(task, context):
            return Category.COLLECTED
        return Category.NO_DATE

    if effective < context.today:
        return Category.OVERDUE
    if effective == context.today:
        return Category.TODAY
    if effective == context.tomorrow:
        return Category.TOMORROW
    return Category.FUTURE


def get_category_priority(category: Category | str) -> int:
    return Category(category).priority


def compare_by_category(a: Task, b: Task, context: DateContext) -> int:
    priority_a = get_task_category(a, context).priority
    priority_b = get_task_category(b, context).priority
    return _sign(priority_a - priority_b)


def compare_by_points(a: Task, b: Task) -> int:
    """
    Higher points first; ties go to the more recently created task.

    An unparseable or missing created_at makes the pair compare equal.
    """
    a, b = _require(a), _require(b)
    if a.points != b.points:
        return _sign(b.points - a.points)

    created_a = to_instant(a.created_at)
    created_b = to_instant(b.created_at)
    if created_a is None or created_b is None:
        return 0
    return _sign((created_b - created_a).total_seconds())


def compare_by_effective_date(a: Task, b: Task, context: DateContext) -> int:
    """Earlier effective date first; undated tasks last."""
    date_a = get_effective_date(a, context)
    date_b = get_effective_date(b, context)

    if date_a is None and date_b is None:
        return 0
    if date_a is None:
        return 1
    if date_b is None:
        return -1
    return _sign((date_a - date_b).total_seconds())


def compare_tasks_priority(a: Task, b: Task, context: DateContext) -> int:
    """
    Full ordering between two tasks.

    Category rank first. Within overdue and future tasks the earlier date
    wins; everywhere else (and on date ties) points then creation date decide.
    """
    by_category = compare_by_category(a, b, context)
    if by_category != 0:
        return by_category

    if get_task_category(a, context) in (Category.OVERDUE, Category.FUTURE):
        by_date = compare_by_effective_date(a, b, context)
        if by_date != 0:
            return by_date

    return compare_by_points(a, b)
