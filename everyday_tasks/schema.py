"""
EVERYDAY TASKS - Task Schema Definition
=======================================
Data model for a personal to-do list kept in a flat text file.

Tasks have no identity of their own: a task is addressed by its position
in the list, shown to the user as a 1-based number.
"""

from pydantic import BaseModel, Field


DEFAULT_TASKS_FILE = "tasks.txt"

# Line format: <flag><TAB><title>
FLAG_DONE = "1"
FLAG_OPEN = "0"
FIELD_SEPARATOR = "\t"


class Task(BaseModel):
    """Single to-do entry"""
    title: str                      # Free-form, never validated here
    completed: bool = False

    @property
    def marker(self) -> str:
        return "[x]" if self.completed else "[ ]"


class TaskStats(BaseModel):
    """Aggregate counters for the current list"""
    total: int = Field(ge=0, default=0)
    done: int = Field(ge=0, default=0)
    not_done: int = Field(ge=0, default=0)
    deleted_lifetime: int = Field(ge=0, default=0)  # Since process start

    @property
    def progress_pct(self) -> int:
        if not self.total:
            return 0
        return int((self.done / self.total) * 100)
