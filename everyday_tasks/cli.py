#!/usr/bin/env python3
"""
EVERYDAY TASKS - Interactive Console
====================================
Menu-driven shell around the task list.

Usage:
    everyday-tasks                     Use ./tasks.txt, full menu
    everyday-tasks -f ~/todo.txt       Use another file
    everyday-tasks --basic             Menu without search/filter/stats

The list is loaded at startup and saved on exit (menu choice 0).
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from .manager import TaskManager
from .schema import Task, TaskStats, DEFAULT_TASKS_FILE
from .storage import FileStorage

logger = logging.getLogger("everyday_tasks")

BASIC_MENU = [
    (1, "Add task"),
    (2, "List tasks"),
    (3, "Mark done / not done"),
    (4, "Edit task title"),
    (5, "Delete task"),
    (6, "Save to file"),
]

EXTENDED_MENU = BASIC_MENU + [
    (7, "Search tasks by title"),
    (8, "Show only not completed"),
    (9, "Task statistics"),
]


# ========================================
# RENDERING
# ========================================

def format_task(index: int, task: Task) -> str:
    """One list row; index is 0-based, shown 1-based"""
    return f"{index + 1}. {task.marker} {task.title}"


def print_tasks(tasks: Sequence[Task]) -> None:
    if not tasks:
        print("The task list is empty.")
        return
    for i, task in enumerate(tasks):
        print(format_task(i, task))


def print_tasks_by_indices(tasks: Sequence[Task], indices: List[int], header: str) -> None:
    print(header)
    if not indices:
        print("Nothing found.")
        return
    for i in indices:
        print(format_task(i, tasks[i]))


def format_stats(stats: TaskStats) -> str:
    pct = stats.progress_pct
    lines = [
        "Statistics:",
        f"Total: {stats.total}",
        f"Done: {stats.done}",
        f"Not done: {stats.not_done}",
        f"Deleted: {stats.deleted_lifetime}",
        f"Progress: {'█' * (pct // 10)}{'░' * (10 - pct // 10)} {pct}%",
    ]
    return "\n".join(lines)


# ========================================
# APPLICATION
# ========================================

class Application:
    """
    Interactive session owning one TaskManager

    Every index the user types is checked against the current list size
    before it reaches the manager, and blank titles/keywords are rejected
    here, not in the manager.
    """

    def __init__(
        self,
        manager: TaskManager,
        storage: FileStorage,
        path: str = DEFAULT_TASKS_FILE,
        extended: bool = True
    ):
        self.manager = manager
        self.storage = storage
        self.path = path
        self.menu = EXTENDED_MENU if extended else BASIC_MENU
        self._actions = {
            1: self.add_task,
            2: self.list_tasks,
            3: self.toggle_task,
            4: self.edit_task,
            5: self.delete_task,
            6: self.save,
            7: self.search,
            8: self.filter_not_completed,
            9: self.show_stats,
        }

    def run(self) -> int:
        loaded = self.storage.load(self.path)
        self.manager.replace_all(loaded)
        if loaded:
            print(f"Loaded {len(loaded)} task(s) from {self.path}")

        while True:
            try:
                self.show_menu()
                choice = self._read_int("Your choice: ")
                if choice == 0:
                    break
                self.handle_choice(choice)
            except EOFError:
                print()
                break

        if self.storage.save(self.path, self.manager.tasks):
            print("Goodbye! (list saved)")
        else:
            print(f"Save failed: {self.storage.last_error}")
            print("Goodbye!")
        return 0

    def show_menu(self) -> None:
        print("\n~~~ Everyday Tasks ~~~")
        for number, label in self.menu:
            print(f"{number}. {label}")
        print("0. Exit")

    def handle_choice(self, choice: int) -> None:
        numbers = {number for number, _ in self.menu}
        if choice not in numbers:
            print("Invalid choice.")
            return
        self._actions[choice]()

    # ========================================
    # COMMANDS
    # ========================================

    def add_task(self) -> None:
        title = self._read_text("Enter task title: ")
        if title is None:
            print("Title cannot be empty.")
            return
        self.manager.add_task(title)
        print("Task added.")

    def list_tasks(self) -> None:
        print_tasks(self.manager.tasks)
        self._wait_for_enter()

    def toggle_task(self) -> None:
        print_tasks(self.manager.tasks)
        index = self._read_task_index()
        if index is None:
            return
        self.manager.toggle_completed(index)
        print("Status changed.")

    def edit_task(self) -> None:
        print_tasks(self.manager.tasks)
        index = self._read_task_index()
        if index is None:
            return
        title = self._read_text("Enter new title: ")
        if title is None:
            print("Title cannot be empty.")
            return
        self.manager.edit_task(index, title)
        print("Task edited.")

    def delete_task(self) -> None:
        print_tasks(self.manager.tasks)
        index = self._read_task_index()
        if index is None:
            return
        self.manager.remove_task(index)
        print("Task deleted.")

    def save(self) -> None:
        if self.storage.save(self.path, self.manager.tasks):
            print(f"Saved to {self.path}.")
        else:
            print(f"Save failed: {self.storage.last_error}")

    def search(self) -> None:
        if self.manager.is_empty():
            print("The list is empty.")
            return
        keyword = self._read_text("Enter a word or part of a title: ")
        if keyword is None:
            print("Empty query.")
            return
        found = self.manager.find_by_keyword(keyword)
        print_tasks_by_indices(self.manager.tasks, found, "\nSearch results:")
        self._wait_for_enter()

    def filter_not_completed(self) -> None:
        if self.manager.is_empty():
            print("The list is empty.")
            return
        indices = self.manager.not_completed_indices()
        print_tasks_by_indices(self.manager.tasks, indices, "\nNot completed tasks:")
        self._wait_for_enter()

    def show_stats(self) -> None:
        print()
        print(format_stats(self.manager.stats()))
        self._wait_for_enter()

    # ========================================
    # INPUT HELPERS
    # ========================================

    def _read_int(self, prompt: str) -> int:
        """Keep asking until the reply parses as an integer"""
        while True:
            raw = input(prompt)
            try:
                return int(raw.strip())
            except ValueError:
                logger.debug(f"Not a number: {raw!r}")
                prompt = "Enter a number: "

    def _read_text(self, prompt: str) -> Optional[str]:
        """Reply as typed, or None when it is blank"""
        value = input(prompt)
        if not value.strip():
            return None
        return value

    def _read_task_index(self) -> Optional[int]:
        """Ask for a 1-based task number; returns the 0-based index or None"""
        if self.manager.is_empty():
            print("The list is empty.")
            return None

        size = self.manager.size()
        number = self._read_int(f"Enter task number (1-{size}): ")
        if number < 1 or number > size:
            print("Invalid number.")
            return None
        return number - 1

    def _wait_for_enter(self) -> None:
        input("\nPress Enter to continue...")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="everyday-tasks",
        description="Everyday Tasks - personal to-do list in a text file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  everyday-tasks                     Open ./tasks.txt
  everyday-tasks -f work.txt         Open work.txt instead
  everyday-tasks --basic             Only add/list/toggle/edit/delete/save
  everyday-tasks -vv                 Show debug logging
        """
    )
    parser.add_argument(
        "-f", "--file",
        default=DEFAULT_TASKS_FILE,
        help=f"Path to tasks file (default: {DEFAULT_TASKS_FILE})"
    )
    parser.add_argument("--basic", action="store_true", help="Basic menu without search/filter/stats")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging (-v info, -vv debug)")

    args = parser.parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    app = Application(
        TaskManager(),
        FileStorage(),
        path=args.file,
        extended=not args.basic
    )
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
