"""
EVERYDAY TASKS - Personal To-Do List
====================================

Small task list kept in a tab-separated text file.

Usage:
    from everyday_tasks import TaskManager, FileStorage

    manager = TaskManager()
    storage = FileStorage()
    manager.replace_all(storage.load("tasks.txt"))

    manager.add_task("Buy milk")
    manager.toggle_completed(0)
    print(manager.stats())

    storage.save("tasks.txt", manager.tasks)
"""

from .schema import (
    Task,
    TaskStats,
    DEFAULT_TASKS_FILE
)

from .manager import TaskManager
from .storage import FileStorage, format_line, parse_line

__version__ = "1.0.0"
__all__ = [
    "TaskManager",
    "FileStorage",
    "Task",
    "TaskStats",
    "DEFAULT_TASKS_FILE",
    "format_line",
    "parse_line"
]
