"""Task repository interface."""

from typing import Protocol

from gtd.core.tasks import Task


class TaskRepository(Protocol):
    """Interface for fetching tasks from any backend."""

    def fetch_all(self) -> list[Task]:
        """Fetch all tasks, with nested subtasks where the backend provides them."""
        ...

    def fetch_root(self) -> list[Task]:
        """Fetch top-level tasks only."""
        ...
