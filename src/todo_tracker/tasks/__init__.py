from .task_models import Task
from .task_store import (
    TaskStore,
    TaskStoreCorruptError,
    TaskStoreError,
    TaskStoreWriteError,
)

__all__ = [
    "Task",
    "TaskStore",
    "TaskStoreCorruptError",
    "TaskStoreError",
    "TaskStoreWriteError",
]
