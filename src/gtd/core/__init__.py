"""Functional core - pure business logic with no I/O."""

from .dates import DateContext, create_date_context, normalize_date, is_date_urgent, compare_dates
from .tasks import Task, calculate_points, clamp_points, compute_points
from .priority import Category, get_task_category, compare_tasks_priority, compare_by_points
from .sorting import sort_by_priority, group_by_category, category_stats, filter_by_category
from .report import format_report, format_task_line

__all__ = [
    # Dates
    "DateContext",
    "create_date_context",
    "normalize_date",
    "is_date_urgent",
    "compare_dates",
    # Tasks
    "Task",
    "calculate_points",
    "clamp_points",
    "compute_points",
    # Priority
    "Category",
    "get_task_category",
    "compare_tasks_priority",
    "compare_by_points",
    # Sorting
    "sort_by_priority",
    "group_by_category",
    "category_stats",
    "filter_by_category",
    # Report
    "format_report",
    "format_task_line",
]
