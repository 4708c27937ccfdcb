# tests/test_console.py

from interfaces.console import ConsoleApp


def run_script(store, lines):
    """Run the menu loop over scripted input and return everything printed."""
    feed = iter(lines)
    out = []

    def fake_input(prompt):
        try:
            return next(feed)
        except StopIteration:
            raise EOFError

    ConsoleApp(store, input_func=fake_input, output_func=out.append).run()
    return out


def test_add_display_and_exit(store) -> None:
    out = run_script(store, ["1", "Buy milk", "20-10-2025", "3", "7"])

    assert "Task added successfully." in out
    assert "1. [ ] Buy milk (Deadline: 20-10-2025)" in out
    assert out[-1] == "Exiting Todo List Application. Goodbye!"


def test_bad_input_never_crashes(store) -> None:
    out = run_script(store, ["9", "abc", "1", "", "1", "x", "31-04-2025", "2", "6", "7"])

    assert out.count("Invalid option. Enter a number between 1 and 7.") == 2
    assert "Task name cannot be empty." in out
    assert any(line.startswith("Invalid deadline") for line in out)
    assert "No tasks to delete." in out
    assert "No tasks to sort." in out
    assert store.count() == 0


def test_pick_by_position(store) -> None:
    store.add("first", "01-01-2025")
    store.add("second", "02-01-2025")

    out = run_script(store, ["5", "zero", "5", "3", "5", "2", "2", "1", "7"])

    assert "Invalid number." in out
    assert "Task number out of range." in out
    assert 'Task "second" marked as completed.' in out
    assert "Removed task: first" in out
    assert [t.name for t in store.list()] == ["second"]


def test_edit_and_sort(store) -> None:
    store.add("banana", "01-01-2025")
    store.add("Apple", "02-01-2025")

    out = run_script(store, ["4", "1", "Cherry", "", "6", "8", "6", "2", "7"])

    assert "Task updated." in out
    assert "Invalid sort option." in out
    assert "Sort applied." in out
    assert [t.name for t in store.list()] == ["Apple", "Cherry"]


def test_eof_ends_loop(store) -> None:
    out = run_script(store, ["1", "Buy milk"])
    assert out[-1] == "Exiting Todo List Application. Goodbye!"
    assert store.count() == 0


def test_rejected_deadline_keeps_new_name(store) -> None:
    store.add("old", "01-01-2025")

    out = run_script(store, ["4", "1", "renamed", "31-04-2025", "7"])

    aborted = out.index("Invalid deadline. Edit aborted for deadline.")
    assert out[aborted + 1] == "Task updated."
    task = store.get(1)
    assert (task.name, task.deadline_text) == ("renamed", "01-01-2025")


def test_empty_list_messages(store) -> None:
    out = run_script(store, ["2", "4", "5", "6", "7"])

    assert [line for line in out if line.startswith("No tasks to")] == [
        "No tasks to delete.",
        "No tasks to edit.",
        "No tasks to mark.",
        "No tasks to sort.",
    ]


def test_non_ascii_numbers_rejected(store) -> None:
    store.add("only", "01-01-2025")

    out = run_script(store, ["5", "١", "6", "1_0", "7"])

    assert "Invalid number." in out
    assert "Invalid sort option." in out
    assert store.get(1).completed is False
