import logging
import threading
from dataclasses import replace
from typing import List, Optional

from domain.entities import SortOption, Task, clean_name, parse_deadline
from domain.exceptions import InvalidInput, NotFound

logger = logging.getLogger(__name__)


class InMemoryTaskStore:
    """Ordered, id-indexed task registry held in process memory.

    A single lock serializes every operation, reads included. Tasks handed
    out are copies; the stored list is only touched under the lock.
    """

    def __init__(self):
        self._tasks: List[Task] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def add(self, name: str, deadline: str) -> Task:
        with self._lock:
            clean = clean_name(name)
            parsed = parse_deadline(deadline)
            task = Task(id=self._next_id, name=clean, deadline=parsed)
            self._next_id += 1
            self._tasks.append(task)
            logger.info(f"Added task {task.id}: {task.name!r} due {task.deadline_text}")
            return replace(task)

    def list(self) -> List[Task]:
        with self._lock:
            return [replace(task) for task in self._tasks]

    def get(self, task_id: int) -> Task:
        with self._lock:
            return replace(self._tasks[self._index_of(task_id)])

    def delete(self, task_id: int) -> Task:
        with self._lock:
            removed = self._tasks.pop(self._index_of(task_id))
            logger.info(f"Deleted task {task_id}")
            return removed

    def edit(self, task_id: int, name: Optional[str] = None, deadline: Optional[str] = None) -> Task:
        with self._lock:
            task = self._tasks[self._index_of(task_id)]
            if name is not None and name.strip():
                task.name = clean_name(name)
            # A rejected deadline leaves any name change above in place.
            if deadline is not None and deadline.strip():
                task.deadline = parse_deadline(deadline)
            logger.info(f"Edited task {task_id}")
            return replace(task)

    def toggle(self, task_id: int) -> Task:
        with self._lock:
            task = self._tasks[self._index_of(task_id)]
            task.completed = not task.completed
            logger.debug(f"Task {task_id} toggled to completed = {task.completed}")
            return replace(task)

    def sort_by_option(self, option: int) -> None:
        try:
            option = SortOption(option)
        except ValueError:
            raise InvalidInput("Invalid sort option.")
        with self._lock:
            if option is SortOption.DEADLINE:
                self._tasks.sort(key=lambda t: t.deadline)
            elif option is SortOption.NAME_ASC:
                self._tasks.sort(key=lambda t: t.name.lower())
            elif option is SortOption.NAME_DESC:
                self._tasks.sort(key=lambda t: t.name.lower(), reverse=True)
            else:
                self._tasks.sort(key=lambda t: (not t.completed, t.name.lower()))
            logger.info(f"Sorted {len(self._tasks)} tasks by {option.name.lower()}")

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def _index_of(self, task_id: int) -> int:
        for index, task in enumerate(self._tasks):
            if task.id == task_id:
                return index
        raise NotFound(task_id)
