"""FastAPI application factory."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import FastAPI

from stageboard import __version__
from stageboard.server.lifespan import lifespan
from stageboard.server.routes.health import health_router
from stageboard.server.routes.tasks import tasks_router
from stageboard.tasks.seed import DEFAULT_SEED, load_seed
from stageboard.tasks.store import TaskStore

if TYPE_CHECKING:
    from stageboard.config.settings import Settings

logger = logging.getLogger("stageboard.server")


def create_app(settings: Settings) -> FastAPI:
    """Build the FastAPI application.

    The task store is created here and seeded by the lifespan on startup.
    A broken seed file fails fast with ``SeedFileError``.
    """
    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        description="Staged task board with two-at-a-time assignment",
        lifespan=lifespan,
    )

    if settings.board.seed_file:
        seed = load_seed(settings.board.seed_file)
        logger.info("Using seed file %s", settings.board.seed_file)
    else:
        seed = DEFAULT_SEED

    app.state.settings = settings
    app.state.task_store = TaskStore(seed=seed, max_assigned=settings.board.max_assigned)

    app.include_router(health_router)
    app.include_router(tasks_router)

    return app
