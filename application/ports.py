from typing import List, Optional, Protocol

from domain.entities import Task


class TaskStore(Protocol):
    """Capabilities the console and HTTP front-ends need from a task registry.

    Lookups by id raise NotFound; validation failures raise InvalidInput.
    """

    def add(self, name: str, deadline: str) -> Task: ...

    def list(self) -> List[Task]: ...

    def get(self, task_id: int) -> Task: ...

    def delete(self, task_id: int) -> Task: ...

    def edit(self, task_id: int, name: Optional[str] = None, deadline: Optional[str] = None) -> Task: ...

    def toggle(self, task_id: int) -> Task: ...

    def sort_by_option(self, option: int) -> None: ...

    def count(self) -> int: ...
