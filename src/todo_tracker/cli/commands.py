# src/todo_tracker/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

from ..tasks.task_models import Task

USAGE = "Usage: todo <command> [task]"

_INDEX_RE = re.compile(r"\+?[0-9]+")

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """What a command printed and whether it changed the task list."""

    output: str = ""
    mutated: bool = False


CommandHandler = Callable[[list[Task], list[str]], CommandResult]


class InvalidTaskIndexError(ValueError):
    """The task number given to `complete` is not an unsigned integer."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"Invalid index: {raw!r}")
        self.raw = raw


class CommandRegistry:
    """Maps the first command-line argument to a handler (exact, case-sensitive)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}

    def register(self, name: str, handler: CommandHandler) -> None:
        self._handlers[name] = handler

    def unknown_message(self) -> str:
        quoted = [f"'{n}'" for n in self._handlers]
        if len(quoted) > 1:
            choices = ", ".join(quoted[:-1]) + ", or " + quoted[-1]
        else:
            choices = "".join(quoted)
        return f"Unknown command. Use {choices}."

    def dispatch(self, tasks: list[Task], argv: list[str]) -> CommandResult:
        """
        Run the command named by argv[0] against the in-memory list.

        `tasks` is mutated in place; result.mutated tells the caller to save.
        """
        if not argv:
            return CommandResult(USAGE)

        name, args = argv[0], argv[1:]
        handler = self._handlers.get(name)
        if handler is None:
            logger.debug("Unknown command %r", name)
            return CommandResult(self.unknown_message())

        return handler(tasks, args)


def parse_task_number(raw: str) -> int:
    """Parse a 1-based task number; digits only (an optional leading '+' is allowed)."""
    if not _INDEX_RE.fullmatch(raw):
        raise InvalidTaskIndexError(raw)
    return int(raw)


def cmd_add(tasks: list[Task], args: list[str]) -> CommandResult:
    if not args:
        return CommandResult("Please provide a task to add.")

    text = args[0]
    tasks.append(Task(description=text))
    logger.debug("Task appended at position %d", len(tasks))
    return CommandResult(f"Added task: {text}", mutated=True)


def cmd_list(tasks: list[Task], args: list[str]) -> CommandResult:
    lines = []
    for i, task in enumerate(tasks, start=1):
        marker = "[x]" if task.completed else "[ ]"
        lines.append(f"{i}: {marker} {task.description}")
    return CommandResult("\n".join(lines))


def cmd_complete(tasks: list[Task], args: list[str]) -> CommandResult:
    """
    complete N -> mark task N (1-based) as done

    A non-numeric N raises InvalidTaskIndexError; an out-of-range N is only reported.
    """
    if not args:
        return CommandResult("Please provide the task number to complete.")

    index = parse_task_number(args[0])
    if not 1 <= index <= len(tasks):
        return CommandResult("Task number does not exist.")

    tasks[index - 1].completed = True
    return CommandResult(f"Marked task {index} as completed.", mutated=True)


registry = CommandRegistry()

registry.register("add", cmd_add)
registry.register("list", cmd_list)
registry.register("complete", cmd_complete)
