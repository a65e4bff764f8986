"""Initial board contents and seed file loading."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from stageboard.tasks.errors import SeedFileError
from stageboard.tasks.models import TaskSeed

logger = logging.getLogger("stageboard.tasks.seed")

_SEED_LIST = TypeAdapter(list[TaskSeed])

DEFAULT_SEED: list[TaskSeed] = [
    TaskSeed(
        title="Collect requirements",
        description="Interview stakeholders and write down what the release must do",
        persona="Product Manager",
        group=1,
    ),
    TaskSeed(
        title="Sketch wireframes",
        description="Rough out the main screens for review",
        persona="Designer",
        group=1,
    ),
    TaskSeed(
        title="Set up repository",
        description="Create the repository, CI pipeline and branch protection",
        persona="Developer",
        group=1,
    ),
    TaskSeed(
        title="Build API",
        description="Implement the endpoints agreed in the requirements",
        persona="Developer",
        group=2,
    ),
    TaskSeed(
        title="Build interface",
        description="Turn the approved wireframes into working pages",
        persona="Developer",
        group=2,
    ),
    TaskSeed(
        title="Write test plan",
        description="List the scenarios QA will run before release",
        persona="QA Engineer",
        group=2,
    ),
    TaskSeed(
        title="Run acceptance tests",
        description="Execute the test plan against the staging build",
        persona="QA Engineer",
        group=3,
    ),
    TaskSeed(
        title="Ship release",
        description="Deploy to production and announce the release",
        persona="Product Manager",
        group=4,
    ),
]


def load_seed(path: str | Path) -> list[TaskSeed]:
    """Read a JSON array of seed tasks from ``path``."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        raise SeedFileError(f"Could not read seed file {path}: {exc}") from exc

    try:
        seed = _SEED_LIST.validate_python(data)
    except ValidationError as exc:
        raise SeedFileError(f"Invalid seed file {path}: {exc}") from exc

    logger.debug("Loaded %d seed tasks from %s", len(seed), path)
    return seed
