"""Pydantic models for configuration sub-sections."""

from __future__ import annotations

from pydantic import BaseModel, Field

from stageboard.config.constants import DEFAULT_HOST, DEFAULT_MAX_ASSIGNED, DEFAULT_PORT


class ServerConfig(BaseModel):
    """HTTP server settings."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


class BoardConfig(BaseModel):
    """Task board behaviour."""

    max_assigned: int = Field(default=DEFAULT_MAX_ASSIGNED, ge=1)
    seed_file: str = ""  # empty = built-in seed list
