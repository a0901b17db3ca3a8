# src/todo_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class Task:
    """
    One to-do entry.

    A task has no id of its own: its 1-based position in the stored list is
    what `complete` refers to. On disk the description is keyed as "task".
    """

    description: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"task": self.description, "completed": self.completed}

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        if not isinstance(raw, dict):
            raise ValueError(f"task entry must be an object, got {type(raw).__name__}")
        description = raw.get("task")
        completed = raw.get("completed")
        if not isinstance(description, str):
            raise ValueError("task entry is missing a string 'task' field")
        # bool is checked exactly: JSON 0/1 are not completion flags.
        if not isinstance(completed, bool):
            raise ValueError("task entry is missing a boolean 'completed' field")
        return cls(description=description, completed=completed)
