# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todo_tracker.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and main.

    We intentionally use a SimpleNamespace rather than reading the real
    environment, so a developer's .env never leaks into tests.
    """
    return SimpleNamespace(
        tasks_path=tmp_path / "todos.json",
        strict_load=False,
        log_level="WARNING",
        log_file=None,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TaskStore:
    return TaskStore(settings.tasks_path)
