# src/todo_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it turns settings into the concrete
TaskStore. Settings stay injectable so tests never read the real environment.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_task_store(*, settings=None) -> TaskStore:
    """Build the TaskStore for these settings (falls back to get_settings())."""
    if settings is None:
        settings = get_settings()

    store = TaskStore(settings.tasks_path, strict=bool(getattr(settings, "strict_load", False)))
    logger.debug("TaskStore path=%s strict=%s", store.path, getattr(settings, "strict_load", False))
    return store
