"""
EVERYDAY TASKS - Flat File Storage
==================================
One task per line:

    <flag><TAB><title>

flag is "1" for a completed task and "0" otherwise. Titles are written
verbatim; tabs or newlines inside a title are not escaped.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from .schema import Task, FLAG_DONE, FLAG_OPEN, FIELD_SEPARATOR

logger = logging.getLogger("everyday_tasks")


def format_line(task: Task) -> str:
    """Serialize one task, including the trailing newline"""
    flag = FLAG_DONE if task.completed else FLAG_OPEN
    return f"{flag}{FIELD_SEPARATOR}{task.title}\n"


def parse_line(line: str) -> Optional[Task]:
    """
    Parse one line (without its newline) into a Task.

    Returns None for an empty line. Anything before the first tab is the
    flag, and only the exact string "1" marks the task completed. A line
    with no tab at all is an open task titled with the whole line.
    """
    if not line:
        return None

    flag, sep, title = line.partition(FIELD_SEPARATOR)
    if not sep:
        return Task(title=line)
    return Task(title=title, completed=(flag == FLAG_DONE))


class FileStorage:
    """
    Reads and writes the task file

    Never raises for I/O problems: save() reports failure with False
    (reason kept in last_error), load() falls back to an empty list.
    """

    def __init__(self):
        self.last_error: Optional[str] = None

    def save(self, path: str, tasks: Iterable[Task]) -> bool:
        """Rewrite the file from the given tasks, in order"""
        file_path = Path(path)
        try:
            with open(file_path, 'w', encoding='utf-8', newline='\n') as f:
                count = 0
                for task in tasks:
                    f.write(format_line(task))
                    count += 1
        except OSError as e:
            self.last_error = str(e)
            logger.warning(f"Save to {file_path} failed: {e}")
            return False

        self.last_error = None
        logger.info(f"✅ Saved {count} task(s) to {file_path}")
        return True

    def load(self, path: str) -> List[Task]:
        """Read tasks from the file; missing or unreadable file gives []"""
        file_path = Path(path)
        tasks: List[Task] = []

        if not file_path.exists():
            logger.debug(f"No task file at {file_path}, starting empty")
            return tasks

        try:
            # Only "\n" ends a record; a "\r" belongs to the title
            with open(file_path, 'r', encoding='utf-8', newline='') as f:
                content = f.read()
            for line in content.split('\n'):
                task = parse_line(line)
                if task is not None:
                    tasks.append(task)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Load from {file_path} failed: {e}")
            return []

        logger.info(f"📂 Loaded {len(tasks)} task(s) from {file_path}")
        return tasks
