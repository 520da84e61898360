"""Tests for the workflow layer."""

from datetime import timedelta
from unittest.mock import MagicMock

import pytest

from gtd.adapters.http_api import HttpTaskAdapter
from gtd.adapters.json_file import JsonFileTaskStore
from gtd.config import Config
from gtd.workflows import compile_stats, compile_task_report, get_repository, load_tasks, prioritize


@pytest.fixture
def tasks(make_task, today):
    return [
        make_task(id="later", name="Later", planned_date=today + timedelta(days=3)),
        make_task(id="late", name="Late", planned_date=today - timedelta(days=1)),
        make_task(id="inbox", name="Inbox", importance=0, complexity=3, points=0),
    ]


class TestGetRepository:
    def test_file_source_uses_config_path(self, tmp_path):
        config = Config(source="file", tasks_file=str(tmp_path / "t.json"))
        repo = get_repository(config)
        assert isinstance(repo, JsonFileTaskStore)
        assert repo.path == tmp_path / "t.json"

    def test_api_source(self):
        repo = get_repository(Config(source="api"))
        assert isinstance(repo, HttpTaskAdapter)

    def test_explicit_file_wins_over_api_config(self, tmp_path):
        repo = get_repository(Config(source="api"), tasks_file=str(tmp_path / "x.json"))
        assert isinstance(repo, JsonFileTaskStore)

    def test_explicit_source_override(self):
        repo = get_repository(Config(source="file"), source="api")
        assert isinstance(repo, HttpTaskAdapter)


class TestLoadTasks:
    def test_hides_completed_by_default(self, make_task):
        repo = MagicMock()
        repo.fetch_all.return_value = [make_task(id="open"), make_task(id="done", is_completed=True)]
        assert [t.id for t in load_tasks(repo)] == ["open"]

    def test_include_completed(self, make_task):
        repo = MagicMock()
        repo.fetch_all.return_value = [make_task(id="open"), make_task(id="done", is_completed=True)]
        assert [t.id for t in load_tasks(repo, include_completed=True)] == ["open", "done"]


class TestPrioritize:
    def test_orders_all(self, tasks, context):
        assert [t.id for t in prioritize(tasks, context=context)] == ["inbox", "late", "later"]

    def test_narrows_to_category(self, tasks, context):
        assert [t.id for t in prioritize(tasks, "overdue", context)] == ["late"]


class TestCompile:
    def test_task_report(self, tasks, context):
        report = compile_task_report(tasks, context=context)
        assert report.startswith("### Collected (1)")
        assert "Late (OVERDUE by 1d)" in report
        assert "Later (due in 3d)" in report

    def test_stats_keyed_by_value(self, tasks, context):
        stats = compile_stats(tasks, context)
        assert stats == {
            "collected": 1,
            "overdue": 1,
            "today": 0,
            "tomorrow": 0,
            "no-date": 0,
            "future": 1,
        }
