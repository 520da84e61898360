"""File-based task store adapter."""

import json
import logging
from pathlib import Path

from gtd.core.tasks import Task, build_task_tree

logger = logging.getLogger(__name__)


class TaskSourceError(Exception):
    """Raised when a task source cannot be read."""

    pass


class JsonFileTaskStore:
    """
    JSON file task store.

    Implements TaskRepository protocol. Reads a task export: either a list of
    tasks or an object with a "tasks" list.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def _load(self) -> list[dict]:
        if not self.path.exists():
            raise TaskSourceError(f"Task file not found: {self.path}")
        try:
            data = json.loads(self.path.read_text())
        except json.JSONDecodeError as e:
            raise TaskSourceError(f"Invalid JSON in {self.path}: {e}") from e

        if isinstance(data, dict):
            data = data.get("tasks", [])
        if not isinstance(data, list):
            raise TaskSourceError(f"Expected a list of tasks in {self.path}")
        return data

    def _to_task(self, item: dict) -> Task:
        try:
            return Task.from_api(item)
        except (KeyError, AttributeError, TypeError) as e:
            raise TaskSourceError(f"Malformed task entry in {self.path}: {item!r}") from e

    def fetch_all(self) -> list[Task]:
        """Read every task in the file, nesting flat entries under their parents."""
        tasks = [self._to_task(item) for item in self._load()]
        logger.debug(f"Loaded {len(tasks)} tasks from {self.path}")
        return build_task_tree(tasks)

    def fetch_root(self) -> list[Task]:
        """Read tasks that have no parent."""
        return [
            self._to_task(item)
            for item in self._load()
            if not (isinstance(item, dict) and item.get("parentId"))
        ]
