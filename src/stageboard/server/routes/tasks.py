"""Task board endpoints.

Handlers are ``async def`` on purpose: each store call then runs to
completion on the event loop thread, one request at a time.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, Response, status
from pydantic import BaseModel, Field

from stageboard.tasks.errors import (
    DuplicateTitleError,
    GatingViolationError,
    TaskNotFoundError,
)
from stageboard.tasks.models import TaskCounts, TaskCreate, TaskUpdate, TaskView
from stageboard.tasks.store import TaskStore

tasks_router = APIRouter(prefix="/tasks", tags=["Tasks"])


class CompleteRequest(BaseModel):
    title: str = Field(min_length=1)


def _store(request: Request) -> TaskStore:
    return request.app.state.task_store


@tasks_router.get("", response_model=list[TaskView])
async def list_tasks(request: Request) -> list[TaskView]:
    return _store(request).all()


@tasks_router.get("/active", response_model=list[TaskView])
async def list_active(request: Request) -> list[TaskView]:
    return _store(request).active()


@tasks_router.get("/completed", response_model=list[TaskView])
async def list_completed(request: Request) -> list[TaskView]:
    return _store(request).completed()


@tasks_router.get("/todo", response_model=list[TaskView])
async def list_todo(request: Request) -> list[TaskView]:
    return _store(request).todo()


@tasks_router.get("/counts", response_model=TaskCounts)
async def task_counts(request: Request) -> TaskCounts:
    return _store(request).counts()


@tasks_router.post("", response_model=TaskView, status_code=status.HTTP_201_CREATED)
async def create_task(payload: TaskCreate, request: Request) -> TaskView:
    """Add a task to the board."""
    try:
        return _store(request).create(
            payload.title, payload.description, payload.persona, payload.group
        )
    except (GatingViolationError, DuplicateTitleError) as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc


@tasks_router.post("/complete", response_model=TaskView)
async def complete_task(payload: CompleteRequest, request: Request) -> TaskView:
    """Complete a task by title."""
    try:
        return _store(request).complete(payload.title)
    except TaskNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except GatingViolationError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc


@tasks_router.post("/reset", response_model=list[TaskView])
async def reset_board(request: Request) -> list[TaskView]:
    """Reload the seed list, discarding all changes."""
    store = _store(request)
    store.initialize()
    return store.all()


@tasks_router.get("/{task_id}", response_model=TaskView)
async def get_task(task_id: int, request: Request) -> TaskView:
    task = _store(request).get(task_id)
    if task is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"Task with ID {task_id} not found."
        )
    return task


@tasks_router.patch("/{task_id}", response_model=TaskView)
async def update_task(task_id: int, payload: TaskUpdate, request: Request) -> TaskView:
    """Apply a partial update to a task."""
    try:
        return _store(request).update(task_id, payload)
    except TaskNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except (GatingViolationError, DuplicateTitleError) as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc


@tasks_router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: int, request: Request) -> Response:
    """Delete a task. Unknown ids are ignored."""
    _store(request).delete(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
