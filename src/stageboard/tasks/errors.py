"""Errors raised by the task store."""

from __future__ import annotations


class TaskBoardError(Exception):
    """Base class for rejected board operations."""


class TaskNotFoundError(TaskBoardError):
    """No task matches the given id or title."""


class GatingViolationError(TaskBoardError):
    """A lower group still has incomplete tasks."""

    def __init__(self, message: str, group: int) -> None:
        super().__init__(message)
        self.group = group


class DuplicateTitleError(TaskBoardError):
    """Another task already uses this title."""


class SeedFileError(TaskBoardError):
    """The seed file is missing or malformed."""
