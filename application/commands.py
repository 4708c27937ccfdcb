import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from application.ports import TaskStore
from domain.entities import DEADLINE_PATTERN
from domain.exceptions import InvalidInput, NotFound

logger = logging.getLogger(__name__)

NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+")

KEYWORDS = ("add", "delete", "edit", "toggle", "sort", "list", "help")

HELP_TEXT = "\n".join([
    "Usage:",
    "add|name=<task name>|deadline=<DD-MM-YYYY>",
    "delete|id=<n>",
    "edit|id=<n>|name=<new name>|deadline=<DD-MM-YYYY>",
    "toggle|id=<n>",
    "sort|option=1..4 (1=deadline,2=nameA-Z,3=nameZ-A,4=completed first)",
    "list",
])


class UsageError(Exception):
    """A recognised command is missing a required field."""


@dataclass
class AddCommand:
    name: str
    deadline: str


@dataclass
class DeleteCommand:
    task_id: int


@dataclass
class EditCommand:
    task_id: int
    name: Optional[str] = None
    deadline: Optional[str] = None


@dataclass
class ToggleCommand:
    task_id: int


@dataclass
class SortCommand:
    option: int


@dataclass
class ListCommand:
    pass


@dataclass
class HelpCommand:
    pass


@dataclass
class UnknownCommand:
    keyword: str
    args: Dict[str, str] = field(default_factory=dict)


Command = Union[
    AddCommand, DeleteCommand, EditCommand, ToggleCommand,
    SortCommand, ListCommand, HelpCommand, UnknownCommand,
]


@dataclass
class CommandResult:
    status_code: int
    text: str


def split_line(line: Optional[str]):
    """Split a raw line into (keyword, args) without interpreting the keyword.

    Handles the implicit add form ``<name words> DD-MM-YYYY``.
    """
    trimmed = (line or "").strip()
    if not trimmed:
        return "", {}

    parts = trimmed.split("|")
    keyword = parts[0].strip().lower()

    if keyword not in KEYWORDS:
        tokens = trimmed.split()
        if len(tokens) >= 2 and DEADLINE_PATTERN.fullmatch(tokens[-1]):
            return "add", {"name": " ".join(tokens[:-1]), "deadline": tokens[-1]}

    args = {}
    for part in parts[1:]:
        key, sep, value = part.partition("=")
        if sep:
            args[key.strip().lower()] = value.strip()
    return keyword, args


def _number(value: str) -> int:
    if not NUMBER_PATTERN.fullmatch(value):
        raise InvalidInput("Invalid number format in command arguments.")
    return int(value)


def _require(args: Dict[str, str], key: str, usage: str) -> str:
    value = args.get(key)
    if value is None:
        raise UsageError(usage)
    return value


def parse_command(line: Optional[str]) -> Command:
    keyword, args = split_line(line)

    if keyword == "add":
        usage = "add needs name and deadline. Example: add|name=Buy milk|deadline=20-10-2025"
        return AddCommand(name=_require(args, "name", usage), deadline=_require(args, "deadline", usage))
    if keyword == "delete":
        return DeleteCommand(task_id=_number(_require(args, "id", "delete needs id. Example: delete|id=1")))
    if keyword == "edit":
        raw_id = _require(args, "id", "edit needs id. Example: edit|id=1|name=New name|deadline=20-11-2025")
        return EditCommand(task_id=_number(raw_id), name=args.get("name"), deadline=args.get("deadline"))
    if keyword == "toggle":
        return ToggleCommand(task_id=_number(_require(args, "id", "toggle needs id. Example: toggle|id=1")))
    if keyword == "sort":
        return SortCommand(option=_number(_require(args, "option", "sort needs option. Example: sort|option=1")))
    if keyword == "list":
        return ListCommand()
    if keyword in ("help", ""):
        return HelpCommand()
    return UnknownCommand(keyword=keyword, args=args)


def render_tasks(tasks) -> str:
    if not tasks:
        return "No tasks available."
    return "\n".join(
        f"{task.id}. [{'x' if task.completed else ' '}] {task.name} (Deadline: {task.deadline_text})"
        for task in tasks
    )


class CommandDispatcher:
    """Runs command-grammar lines against a task store and renders plain text."""

    def __init__(self, store: TaskStore):
        self.store = store

    def execute(self, line: Optional[str]) -> CommandResult:
        try:
            command = parse_command(line)
            return CommandResult(200, self._run(command))
        except UsageError as e:
            return CommandResult(400, f"Usage: {e}")
        except InvalidInput as e:
            logger.info(f"Rejected command {line!r}: {e}")
            return CommandResult(400, f"Error: {e}")
        except NotFound as e:
            return CommandResult(404, str(e))
        except Exception:
            logger.exception(f"Command failed: {line!r}")
            return CommandResult(500, "Error: Internal server error")

    def _run(self, command: Command) -> str:
        if isinstance(command, AddCommand):
            task = self.store.add(command.name, command.deadline)
            return f"Added: #{task.id} {task.name}"
        if isinstance(command, DeleteCommand):
            task = self.store.delete(command.task_id)
            return f"Removed: {task.name}"
        if isinstance(command, EditCommand):
            self.store.edit(command.task_id, command.name, command.deadline)
            return f"Updated: #{command.task_id}"
        if isinstance(command, ToggleCommand):
            task = self.store.toggle(command.task_id)
            state = "completed" if task.completed else "not completed"
            return f"Toggled: #{task.id} now {state}"
        if isinstance(command, SortCommand):
            self.store.sort_by_option(command.option)
            return "Sort applied."
        if isinstance(command, ListCommand):
            return render_tasks(self.store.list())
        if isinstance(command, HelpCommand):
            return HELP_TEXT
        raise UsageError("Unknown command. Type help")
