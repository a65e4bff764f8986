"""Application lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI

logger = logging.getLogger("stageboard.server")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown hooks for stageboard."""
    settings = app.state.settings

    # --- Startup ---
    app.state.task_store.initialize()
    app.state.started_at = datetime.now(UTC)

    logger.info(
        "Stageboard server starting: host=%s, port=%d, max_assigned=%d",
        settings.server.host,
        settings.server.port,
        settings.board.max_assigned,
    )

    yield

    # --- Shutdown ---
    logger.info("Stageboard server stopped")
