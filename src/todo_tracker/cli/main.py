# src/todo_tracker/cli/main.py

"""
CLI entrypoint.

One invocation is one pass: load the task list, run the command,
save only if the command changed something, print the result.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..config import get_settings
from ..logging_setup import setup_logging
from ..tasks.task_store import TaskStoreError
from .bootstrap import create_task_store
from .commands import InvalidTaskIndexError, registry

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FATAL = 1


def _fail(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return EXIT_FATAL


def main(argv: Sequence[str] | None = None, *, settings=None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(console_level=console_level, log_file=getattr(settings, "log_file", None))

    store = create_task_store(settings=settings)

    try:
        tasks = store.load()
        result = registry.dispatch(tasks, list(argv))
        if result.mutated:
            store.save(tasks)
    except InvalidTaskIndexError as e:
        logger.debug("Rejected task number %r", e.raw)
        return _fail(str(e))
    except TaskStoreError as e:
        logger.debug("Storage failure", exc_info=True)
        return _fail(str(e))

    if result.output:
        print(result.output)
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
