"""Pure report formatting - no I/O dependencies."""

from .dates import DateContext, days_between
from .priority import Category, get_effective_date
from .sorting import group_by_category
from .tasks import Task

CATEGORY_LABELS = {
    Category.COLLECTED: "Collected",
    Category.OVERDUE: "Overdue",
    Category.TODAY: "Today",
    Category.TOMORROW: "Tomorrow",
    Category.NO_DATE: "No date",
    Category.FUTURE: "Future",
}


def format_task_line(task: Task, context: DateContext, indent: int = 0) -> str:
    """
    Format a single task for display.

    Pure function - no I/O.
    """
    days = days_between(get_effective_date(task, context), context)

    urgency = ""
    if days is not None:
        if days < 0:
            urgency = f" (OVERDUE by {-days}d)"
        elif days == 0:
            urgency = " (due TODAY)"
        else:
            urgency = f" (due in {days}d)"

    done = "x" if task.is_completed else " "
    return f"{'  ' * indent}- [{done}] {task.points:>3}pt {task.name}{urgency}"


def _format_tree(task: Task, context: DateContext, indent: int = 0) -> list[str]:
    lines = [format_task_line(task, context, indent)]
    for subtask in task.subtasks:
        lines.extend(_format_tree(subtask, context, indent + 1))
    return lines


def format_report(tasks: list[Task], context: DateContext) -> str:
    """
    Render already-sorted tasks as markdown sections, one per category.

    Empty categories are skipped. Pure function - no I/O.
    """
    sections = []
    for category, members in group_by_category(tasks, context).items():
        if not members:
            continue
        lines = []
        for task in members:
            lines.extend(_format_tree(task, context))
        sections.append(f"### {CATEGORY_LABELS[category]} ({len(members)})\n" + "\n".join(lines))

    return "\n\n".join(sections) or "No tasks."
