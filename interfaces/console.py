"""Interactive menu loop over a task store.

Tasks are picked by their position in the displayed list, not by id.
"""
import logging
from typing import Callable, Optional

from application.commands import NUMBER_PATTERN
from application.ports import TaskStore
from domain.entities import Task
from domain.exceptions import InvalidInput, TaskError

logger = logging.getLogger(__name__)

MENU = "\n".join([
    "",
    "=== Todo List Menu ===",
    "1. Add Task",
    "2. Delete Task",
    "3. Display Tasks",
    "4. Edit Task",
    "5. Mark Task Completed / Toggle",
    "6. Sort Tasks",
    "7. Exit",
])

SORT_MENU = "\n".join([
    "Sort by:",
    "1. Deadline (earliest first)",
    "2. Name (A -> Z)",
    "3. Name (Z -> A)",
    "4. Completed status (completed first)",
])


class ConsoleApp:
    def __init__(self, store: TaskStore, input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print):
        self.store = store
        self._input = input_func
        self._print = output_func

    def run(self) -> None:
        self._print("Welcome to the Todo List Application!")
        actions = {
            "1": self.add_task,
            "2": self.delete_task,
            "3": self.display_tasks,
            "4": self.edit_task,
            "5": self.toggle_task,
            "6": self.sort_tasks,
        }
        while True:
            self._print(MENU)
            try:
                choice = self._input("Choose an option (1-7): ").strip()
            except EOFError:
                break
            if choice == "7":
                break
            action = actions.get(choice)
            if action is None:
                self._print("Invalid option. Enter a number between 1 and 7.")
                continue
            try:
                action()
            except EOFError:
                break
            except TaskError as e:
                self._print(str(e))
            except Exception:
                logger.exception(f"Console action {choice} failed")
                self._print("Something went wrong. Please try again.")
        self._print("Exiting Todo List Application. Goodbye!")

    def add_task(self) -> None:
        name = self._input("Enter task name: ").strip()
        if not name:
            self._print("Task name cannot be empty.")
            return
        deadline = self._input("Enter deadline (DD-MM-YYYY): ").strip()
        try:
            self.store.add(name, deadline)
        except InvalidInput as e:
            self._print(str(e))
            return
        self._print("Task added successfully.")

    def delete_task(self) -> None:
        task = self._pick("delete", "delete")
        if task is None:
            return
        removed = self.store.delete(task.id)
        self._print(f"Removed task: {removed.name}")

    def display_tasks(self) -> None:
        tasks = self.store.list()
        if not tasks:
            self._print("No tasks available.")
            return
        self._print("Your Tasks:")
        for position, task in enumerate(tasks, start=1):
            status = "[x]" if task.completed else "[ ]"
            self._print(f"{position}. {status} {task.name} (Deadline: {task.deadline_text})")

    def edit_task(self) -> None:
        task = self._pick("edit", "edit")
        if task is None:
            return
        self._print("Leave field empty to keep current value.")
        new_name = self._input(f"Current name: {task.name} -> New name: ").strip()
        new_deadline = self._input(
            f"Current deadline: {task.deadline_text} -> New deadline (DD-MM-YYYY): "
        ).strip()
        if new_name:
            try:
                self.store.edit(task.id, name=new_name)
            except InvalidInput as e:
                self._print(f"{e} Name left unchanged.")
        if new_deadline:
            try:
                self.store.edit(task.id, deadline=new_deadline)
            except InvalidInput:
                self._print("Invalid deadline. Edit aborted for deadline.")
        self._print("Task updated.")

    def toggle_task(self) -> None:
        task = self._pick("toggle completed status", "mark")
        if task is None:
            return
        updated = self.store.toggle(task.id)
        state = "completed." if updated.completed else "not completed."
        self._print(f'Task "{updated.name}" marked as {state}')

    def sort_tasks(self) -> None:
        if not self.store.count():
            self._print("No tasks to sort.")
            return
        self._print(SORT_MENU)
        choice = self._input("Choose option (1-4): ").strip()
        if not NUMBER_PATTERN.fullmatch(choice):
            self._print("Invalid sort option.")
            return
        try:
            self.store.sort_by_option(int(choice))
        except InvalidInput:
            self._print("Invalid sort option.")
            return
        self._print("Sort applied.")

    def _pick(self, verb: str, empty_verb: str) -> Optional[Task]:
        tasks = self.store.list()
        if not tasks:
            self._print(f"No tasks to {empty_verb}.")
            return None
        self.display_tasks()
        raw = self._input(f"Enter the task number to {verb}: ").strip()
        if not NUMBER_PATTERN.fullmatch(raw):
            self._print("Invalid number.")
            return None
        position = int(raw)
        if position < 1 or position > len(tasks):
            self._print("Task number out of range.")
            return None
        return tasks[position - 1]


def run_console(store: TaskStore) -> None:
    ConsoleApp(store).run()
