"""Pydantic models for board tasks."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Task(BaseModel):
    """A task as held inside the store. Never handed out directly."""

    model_config = ConfigDict(validate_assignment=True)

    id: int
    title: str = Field(min_length=1)
    description: str = ""
    persona: str = ""
    group: int = Field(ge=1)
    completed: bool = False
    assigned: bool = False  # recomputed by the store after every mutation

    def view(self) -> TaskView:
        return TaskView(**self.model_dump())


class TaskView(BaseModel):
    """Read-only copy of a task returned by store queries."""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    description: str
    persona: str
    group: int
    completed: bool
    assigned: bool


class TaskSeed(BaseModel):
    """One entry of the initial board."""

    title: str = Field(min_length=1)
    description: str = ""
    persona: str = ""
    group: int = Field(ge=1)
    completed: bool = False


class TaskCreate(BaseModel):
    """Fields accepted when adding a task."""

    title: str = Field(min_length=1)
    description: str = ""
    persona: str = ""
    group: int = Field(ge=1)


class TaskUpdate(BaseModel):
    """Partial update. Only fields that were explicitly set are applied."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    persona: str | None = None
    group: int | None = Field(default=None, ge=1)
    completed: bool | None = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class TaskCounts(BaseModel):
    """Number of tasks in each board column."""

    todo: int = 0
    in_progress: int = 0
    completed: int = 0
