"""Task board subsystem — in-memory tasks gated by stage."""

from stageboard.tasks.errors import (
    DuplicateTitleError,
    GatingViolationError,
    SeedFileError,
    TaskBoardError,
    TaskNotFoundError,
)
from stageboard.tasks.models import Task, TaskCounts, TaskSeed, TaskUpdate, TaskView
from stageboard.tasks.store import TaskStore

__all__ = [
    "DuplicateTitleError",
    "GatingViolationError",
    "SeedFileError",
    "Task",
    "TaskBoardError",
    "TaskCounts",
    "TaskNotFoundError",
    "TaskSeed",
    "TaskStore",
    "TaskUpdate",
    "TaskView",
]
