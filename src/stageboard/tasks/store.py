"""In-memory task store with group gating and two-slot assignment."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from stageboard.config.constants import DEFAULT_MAX_ASSIGNED
from stageboard.tasks.errors import DuplicateTitleError, GatingViolationError, TaskNotFoundError
from stageboard.tasks.models import Task, TaskCounts, TaskSeed, TaskUpdate, TaskView
from stageboard.tasks.seed import DEFAULT_SEED

logger = logging.getLogger("stageboard.tasks.store")


class TaskStore:
    """Owns the board's tasks and decides which of them are in progress.

    Tasks are worked stage by stage: nothing in group N+1 can be completed
    (or, past group 1, created) while group N has incomplete tasks, and only
    the first ``max_assigned`` incomplete tasks of the lowest incomplete group
    are assigned. Assignment is recomputed inside every mutating call, so it
    is never stale when read.

    Queries return ``TaskView`` copies; the store is only changed through
    ``create``, ``update``, ``complete``, ``delete`` and ``initialize``.
    """

    def __init__(
        self,
        seed: Iterable[TaskSeed] | None = None,
        max_assigned: int = DEFAULT_MAX_ASSIGNED,
    ) -> None:
        self._seed = list(seed) if seed is not None else list(DEFAULT_SEED)
        self._max_assigned = max_assigned
        self._tasks: list[Task] = []
        self._last_id = 0

    # -- Lifecycle -------------------------------------------------------------

    def initialize(self) -> None:
        """Replace every task with the seed list and recompute assignment."""
        self._tasks = [
            Task(id=index, **seed.model_dump())
            for index, seed in enumerate(self._seed, start=1)
        ]
        self._last_id = len(self._tasks)
        self._assign()
        logger.info("Board initialized with %d tasks", len(self._tasks))

    # -- Queries ---------------------------------------------------------------

    def all(self) -> list[TaskView]:
        """Return every task, including its ``assigned`` flag."""
        return [t.view() for t in self._tasks]

    def active(self) -> list[TaskView]:
        """Return tasks that are assigned and not yet completed."""
        return [t.view() for t in self._tasks if t.assigned and not t.completed]

    def completed(self) -> list[TaskView]:
        return [t.view() for t in self._tasks if t.completed]

    def todo(self) -> list[TaskView]:
        """Return tasks that are neither completed nor assigned."""
        return [t.view() for t in self._tasks if not t.completed and not t.assigned]

    def get(self, task_id: int) -> TaskView | None:
        task = self._find_by_id(task_id)
        return task.view() if task is not None else None

    def counts(self) -> TaskCounts:
        counts = TaskCounts()
        for task in self._tasks:
            if task.completed:
                counts.completed += 1
            elif task.assigned:
                counts.in_progress += 1
            else:
                counts.todo += 1
        return counts

    # -- Mutations -------------------------------------------------------------

    def create(self, title: str, description: str, persona: str, group: int) -> TaskView:
        """Append a new task to ``group``.

        Group 1 is always open. Higher groups only accept new tasks once all
        lower groups are completed.
        """
        if group > 1 and not self._lower_groups_completed(group):
            msg = f"Cannot add tasks to group {group} until all tasks in lower groups are completed."
            logger.warning(msg)
            raise GatingViolationError(msg, group)
        self._ensure_title_free(title)

        task = Task(
            id=self._last_id + 1,
            title=title,
            description=description,
            persona=persona,
            group=group,
        )
        self._tasks.append(task)
        self._last_id = task.id
        self._assign()
        logger.info("Created task %d '%s' in group %d", task.id, task.title, task.group)
        return task.view()

    def update(self, task_id: int, changes: TaskUpdate | dict) -> TaskView:
        """Merge ``changes`` into the task with ``task_id``."""
        if not isinstance(changes, TaskUpdate):
            changes = TaskUpdate.model_validate(changes)

        task = self._find_by_id(task_id)
        if task is None:
            msg = f"Task with ID {task_id} not found."
            logger.warning(msg)
            raise TaskNotFoundError(msg)

        fields = changes.changes()
        if "title" in fields and fields["title"] != task.title:
            self._ensure_title_free(fields["title"])

        merged = Task.model_validate({**task.model_dump(), **fields})
        if merged.completed and not task.completed and not self._lower_groups_completed(merged.group):
            msg = (
                f"Cannot complete task \"{task.title}\". "
                "All tasks in lower groups must be completed first."
            )
            logger.warning(msg)
            raise GatingViolationError(msg, merged.group)

        self._tasks[self._tasks.index(task)] = merged
        self._assign()
        logger.info("Updated task %d (%s)", task_id, ", ".join(sorted(fields)) or "no changes")
        return merged.view()

    def complete(self, title: str) -> TaskView:
        """Mark the task called ``title`` as completed."""
        task = self._find_by_title(title)
        if task is None:
            msg = f"Task with title \"{title}\" not found."
            logger.warning(msg)
            raise TaskNotFoundError(msg)

        if not task.completed:
            if not self._lower_groups_completed(task.group):
                msg = (
                    f"Cannot complete task \"{title}\". "
                    "All tasks in lower groups must be completed first."
                )
                logger.warning(msg)
                raise GatingViolationError(msg, task.group)
            task.completed = True
            logger.info("Completed task %d '%s'", task.id, task.title)

        self._assign()
        return task.view()

    def delete(self, task_id: int) -> bool:
        """Remove the task with ``task_id``. Returns True if it existed."""
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        removed = len(self._tasks) != before
        self._assign()
        if removed:
            logger.info("Deleted task %d", task_id)
        else:
            logger.debug("Delete of unknown task %d ignored", task_id)
        return removed

    # -- Internals -------------------------------------------------------------

    def _assign(self) -> None:
        """Assign the first incomplete tasks of the lowest incomplete group."""
        for task in self._tasks:
            task.assigned = False

        for group in sorted({t.group for t in self._tasks}):
            pending = [t for t in self._tasks if t.group == group and not t.completed]
            if not pending:
                continue
            for task in pending[: self._max_assigned]:
                task.assigned = True
            break

    def _lower_groups_completed(self, group: int) -> bool:
        return all(t.completed for t in self._tasks if t.group < group)

    def _ensure_title_free(self, title: str) -> None:
        if self._find_by_title(title) is not None:
            msg = f"A task titled \"{title}\" already exists."
            logger.warning(msg)
            raise DuplicateTitleError(msg)

    def _find_by_id(self, task_id: int) -> Task | None:
        return next((t for t in self._tasks if t.id == task_id), None)

    def _find_by_title(self, title: str) -> Task | None:
        return next((t for t in self._tasks if t.title == title), None)
