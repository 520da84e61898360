"""Pure task domain model and point scoring - no I/O dependencies."""

import math
from dataclasses import dataclass, field, replace
from datetime import date, datetime

from .dates import DateLike

MAX_IMPORTANCE = 50
MAX_COMPLEXITY = 9
MAX_POINTS = 500
COLLECTED_THRESHOLD = 500

# Values given to a freshly captured task
DEFAULT_IMPORTANCE = 0
DEFAULT_COMPLEXITY = 3


@dataclass
class Task:
    """A task scored by importance and complexity, optionally dated and nested."""

    id: str
    name: str
    importance: int = DEFAULT_IMPORTANCE
    complexity: int = DEFAULT_COMPLEXITY
    points: int = 0
    planned_date: DateLike | None = None
    due_date: DateLike | None = None
    parent_id: str | None = None
    is_completed: bool = False
    completed_at: DateLike | None = None
    created_at: DateLike | None = None
    updated_at: DateLike | None = None
    link: str = ""
    note: str = ""
    subtasks: list["Task"] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)

    def has_subtasks(self) -> bool:
        return bool(self.subtasks)

    def is_subtask(self) -> bool:
        return bool(self.parent_id)

    @classmethod
    def from_api(cls, data: dict) -> "Task":
        """Create Task from the task backend's JSON shape (camelCase keys)."""
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            importance=data.get("importance", DEFAULT_IMPORTANCE),
            complexity=data.get("complexity", DEFAULT_COMPLEXITY),
            points=data.get("points", 0),
            planned_date=data.get("plannedDate"),
            due_date=data.get("dueDate"),
            parent_id=data.get("parentId"),
            is_completed=bool(data.get("isCompleted", False)),
            completed_at=data.get("completedAt"),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
            link=data.get("link") or "",
            note=data.get("note") or "",
            subtasks=[cls.from_api(s) for s in data.get("subtasks") or []],
            tags=[_tag_name(t) for t in data.get("tags") or []],
        )

    def to_dict(self) -> dict:
        """Serialize back to the backend's JSON shape."""
        return {
            "id": self.id,
            "name": self.name,
            "link": self.link,
            "note": self.note,
            "importance": self.importance,
            "complexity": self.complexity,
            "points": self.points,
            "plannedDate": _iso(self.planned_date),
            "dueDate": _iso(self.due_date),
            "parentId": self.parent_id,
            "isCompleted": self.is_completed,
            "completedAt": _iso(self.completed_at),
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at),
            "subtasks": [s.to_dict() for s in self.subtasks],
            "tags": list(self.tags),
        }


def _tag_name(tag: str | dict) -> str:
    # Tags arrive as names, {"name": ...}, or the join-table shape {"tag": {"name": ...}}
    if isinstance(tag, dict):
        if "tag" in tag:
            return tag["tag"].get("name", "")
        return tag.get("name", "")
    return str(tag)


def _iso(value: DateLike | None) -> str | None:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


def calculate_points(importance: int, complexity: int) -> int:
    """
    Score a task: round(10 * importance / complexity).

    Halves round up (7.5 -> 8). Zero complexity scores 0. The result is not
    clamped; see clamp_points.
    """
    if complexity == 0:
        return 0
    return math.floor(10 * importance / complexity + 0.5)


def clamp_points(points: int) -> int:
    """Clamp a score into the storable range [0, 500]."""
    return max(0, min(MAX_POINTS, points))


def compute_points(importance: int, complexity: int) -> int:
    """Score with inputs and output forced into their valid ranges."""
    importance = max(0, min(MAX_IMPORTANCE, importance))
    complexity = max(1, min(MAX_COMPLEXITY, complexity))
    return clamp_points(calculate_points(importance, complexity))


def validate_importance(importance: int) -> bool:
    return isinstance(importance, int) and 0 <= importance <= MAX_IMPORTANCE


def validate_complexity(complexity: int) -> bool:
    return isinstance(complexity, int) and 1 <= complexity <= MAX_COMPLEXITY


def adjust_complexity(importance: int, complexity: int) -> int:
    """Raise complexity just enough that the score stays within MAX_POINTS."""
    if calculate_points(importance, complexity) > MAX_POINTS:
        return max(1, math.ceil(10 * importance / MAX_POINTS))
    return complexity


def build_task_tree(tasks: list[Task]) -> list[Task]:
    """
    Nest a flat task list under parents by parent_id.

    Tasks whose parent is not in the list, or whose parent chain loops, stay
    top-level. Subtasks already nested are kept. Returns copies; the input is
    untouched.
    """
    by_id = {t.id: replace(t, subtasks=list(t.subtasks)) for t in tasks}

    def in_cycle(task: Task) -> bool:
        seen = {task.id}
        current = task
        while current.parent_id in by_id:
            if current.parent_id in seen:
                return True
            seen.add(current.parent_id)
            current = by_id[current.parent_id]
        return False

    roots = []
    for task in by_id.values():
        parent = by_id.get(task.parent_id) if task.parent_id else None
        if parent is None or in_cycle(task):
            roots.append(task)
        elif all(s.id != task.id for s in parent.subtasks):
            parent.subtasks.append(task)
    return roots
