"""Shared fixtures."""

from datetime import date

import pytest

from gtd.core.dates import DateContext
from gtd.core.tasks import Task


@pytest.fixture
def today():
    return date(2025, 1, 15)


@pytest.fixture
def context(today):
    return DateContext.for_day(today)


@pytest.fixture
def make_task():
    """Factory for tasks with sensible non-default scores."""
    counter = iter(range(1, 10_000))

    def _make(**kwargs) -> Task:
        n = next(counter)
        kwargs.setdefault("id", f"t{n}")
        kwargs.setdefault("name", f"Task {n}")
        kwargs.setdefault("importance", 10)
        kwargs.setdefault("complexity", 2)
        kwargs.setdefault("points", 50)
        return Task(**kwargs)

    return _make

