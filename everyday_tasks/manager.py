"""
EVERYDAY TASKS - Task Manager
=============================
In-memory task list: mutations, queries and statistics.
File I/O lives in storage.py; this module never touches the disk.
"""

import logging
from typing import Iterable, List, Tuple

from .schema import Task, TaskStats

logger = logging.getLogger("everyday_tasks")


class TaskManager:
    """
    Ordered task list owned by a single session

    Tasks are addressed by 0-based position. Every index-based
    mutation checks bounds first and reports failure with False,
    leaving the list untouched.

    Key features:
    - Keyword search and not-completed filter (read-only)
    - Lifetime deletion counter (process lifetime, never persisted)
    """

    def __init__(self):
        self._tasks: List[Task] = []
        self._deleted_count = 0

    def __len__(self) -> int:
        return len(self._tasks)

    # ========================================
    # VIEWS
    # ========================================

    @property
    def tasks(self) -> Tuple[Task, ...]:
        """Snapshot of the list; editing the copies does not affect the store"""
        return tuple(task.model_copy() for task in self._tasks)

    @property
    def deleted_count(self) -> int:
        return self._deleted_count

    def size(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    # ========================================
    # TASK OPERATIONS
    # ========================================

    def add_task(self, title: str) -> None:
        """Append a new open task. Blank titles are the caller's problem."""
        self._tasks.append(Task(title=title))
        logger.info(f"➕ Added task #{len(self._tasks)}: {title}")

    def remove_task(self, index: int) -> bool:
        """Delete the task at index and bump the deletion counter"""
        if not self._valid_index(index):
            logger.debug(f"Remove rejected, index {index} out of range")
            return False

        task = self._tasks.pop(index)
        self._deleted_count += 1

        logger.info(f"🗑️ Removed task #{index + 1}: {task.title} (deleted so far: {self._deleted_count})")
        return True

    def edit_task(self, index: int, new_title: str) -> bool:
        """Overwrite the title in place, keeping the completion flag"""
        if not self._valid_index(index):
            logger.debug(f"Edit rejected, index {index} out of range")
            return False

        task = self._tasks[index]
        old_title = task.title
        task.title = new_title

        logger.info(f"✏️ Edited task #{index + 1}: {old_title} -> {new_title}")
        return True

    def toggle_completed(self, index: int) -> bool:
        if not self._valid_index(index):
            logger.debug(f"Toggle rejected, index {index} out of range")
            return False

        task = self._tasks[index]
        task.completed = not task.completed

        logger.info(f"🔁 Task #{index + 1} is now {'done' if task.completed else 'open'}")
        return True

    def replace_all(self, new_tasks: Iterable[Task]) -> None:
        """Swap in a whole new list (used after loading from file)"""
        self._tasks = [Task.model_validate(task).model_copy() for task in new_tasks]
        logger.info(f"📂 Replaced task list ({len(self._tasks)} tasks)")

    # ========================================
    # QUERIES
    # ========================================

    def find_by_keyword(self, keyword: str) -> List[int]:
        """
        Indices of tasks whose title contains keyword

        Case-sensitive substring match. An empty keyword matches
        nothing rather than everything.
        """
        if not keyword:
            return []

        found = [i for i, task in enumerate(self._tasks) if keyword in task.title]
        logger.debug(f"🔍 Search '{keyword}': {len(found)} match(es)")
        return found

    def not_completed_indices(self) -> List[int]:
        return [i for i, task in enumerate(self._tasks) if not task.completed]

    def stats(self) -> TaskStats:
        done = 0
        for task in self._tasks:
            if task.completed:
                done += 1

        total = len(self._tasks)
        return TaskStats(
            total=total,
            done=done,
            not_done=total - done,
            deleted_lifetime=self._deleted_count
        )

    # ========================================
    # HELPER METHODS
    # ========================================

    def _valid_index(self, index: int) -> bool:
        return 0 <= index < len(self._tasks)
