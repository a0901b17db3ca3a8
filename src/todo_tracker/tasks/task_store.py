# src/todo_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStoreError(RuntimeError):
    """Base class for storage failures."""


class TaskStoreWriteError(TaskStoreError):
    """The task file could not be created or written."""


class TaskStoreCorruptError(TaskStoreError):
    """The task file exists but does not hold a valid task list (strict mode only)."""


class TaskStore:
    """
    JSON file task store.

    The whole list is the unit of storage: load() reads the full file,
    save() rewrites it. Nothing is appended or patched in place.

    Read policy:
    - missing file -> empty list
    - unreadable or malformed file -> empty list (or TaskStoreCorruptError when strict)

    Write policy:
    - any failure raises TaskStoreWriteError; there are no retries
    """

    def __init__(self, path: str | Path = "todos.json", *, strict: bool = False) -> None:
        self._path = Path(path)
        self._strict = strict

    @property
    def path(self) -> Path:
        return self._path

    # ---- serialization ----

    @staticmethod
    def _dumps(tasks: Iterable[Task]) -> str:
        return json.dumps(
            [t.to_dict() for t in tasks],
            ensure_ascii=False,
            separators=(",", ":"),
        )

    @staticmethod
    def _loads(text: str) -> list[Task]:
        data = json.loads(text)
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array, got {type(data).__name__}")
        return [Task.from_dict(item) for item in data]

    def _read_text(self) -> str:
        if not self._path.exists():
            logger.debug("Task file %s not found; starting empty", self._path)
            return "[]"
        try:
            return self._path.read_text("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            if self._strict:
                raise TaskStoreCorruptError(f"cannot read {self._path}: {e}") from e
            logger.info("Task file %s unreadable (%s); treating as empty", self._path, e)
            return "[]"

    # ---- public API ----

    def load(self) -> list[Task]:
        text = self._read_text()
        try:
            tasks = self._loads(text)
        except (ValueError, RecursionError) as e:
            # json.JSONDecodeError is a ValueError; very deep nesting exhausts the decoder's recursion.
            if self._strict:
                raise TaskStoreCorruptError(f"invalid task file {self._path}: {e}") from e
            logger.info("Task file %s is malformed (%s); treating as empty", self._path, e)
            return []
        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        tasks = list(tasks)
        payload = self._dumps(tasks)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            # Encode before touching the disk: lone surrogates from argv cannot become UTF-8.
            data = payload.encode("utf-8")
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_bytes(data)
            os.replace(tmp, self._path)
        except (OSError, UnicodeEncodeError) as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise TaskStoreWriteError(f"unable to write {self._path}: {e}") from e
        logger.debug("Saved %d tasks to %s", len(tasks), self._path)
