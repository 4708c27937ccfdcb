import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import IntEnum

from domain.exceptions import InvalidInput

DEADLINE_FORMAT = "%d-%m-%Y"
DEADLINE_PATTERN = re.compile(r"[0-9]{2}-[0-9]{2}-[0-9]{4}")
MAX_NAME_LENGTH = 200


class SortOption(IntEnum):
    DEADLINE = 1
    NAME_ASC = 2
    NAME_DESC = 3
    COMPLETED_FIRST = 4


@dataclass
class Task:
    id: int
    name: str
    deadline: date
    completed: bool = False

    @property
    def deadline_text(self) -> str:
        return format_deadline(self.deadline)


def parse_deadline(text: str) -> date:
    """Parse a strict DD-MM-YYYY date, rejecting impossible days and months."""
    value = (text or "").strip()
    if not DEADLINE_PATTERN.fullmatch(value):
        raise InvalidInput("Invalid deadline. Use DD-MM-YYYY and a real date.")
    try:
        return datetime.strptime(value, DEADLINE_FORMAT).date()
    except ValueError:
        raise InvalidInput("Invalid deadline. Use DD-MM-YYYY and a real date.")


def format_deadline(value: date) -> str:
    return value.strftime(DEADLINE_FORMAT)


def clean_name(name: str) -> str:
    value = (name or "").strip()
    if not value:
        raise InvalidInput("Task name cannot be empty.")
    if len(value) > MAX_NAME_LENGTH:
        raise InvalidInput(f"Task name cannot be longer than {MAX_NAME_LENGTH} characters.")
    return value
