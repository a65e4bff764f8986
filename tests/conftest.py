"""Shared test fixtures."""

from __future__ import annotations

import pytest

from stageboard.config.models import BoardConfig, ServerConfig
from stageboard.config.settings import Settings
from stageboard.tasks.models import TaskSeed
from stageboard.tasks.store import TaskStore


@pytest.fixture
def abc_seed() -> list[TaskSeed]:
    """Two tasks in group 1, one in group 2."""
    return [
        TaskSeed(title="A", description="a", persona="dev", group=1),
        TaskSeed(title="B", description="b", persona="dev", group=1),
        TaskSeed(title="C", description="c", persona="qa", group=2),
    ]


@pytest.fixture
def store(abc_seed: list[TaskSeed]) -> TaskStore:
    store = TaskStore(seed=abc_seed)
    store.initialize()
    return store


@pytest.fixture
def test_settings() -> Settings:
    """Settings configured for testing."""
    return Settings(
        app_name="TestBoard",
        server=ServerConfig(host="127.0.0.1", port=8123),
        board=BoardConfig(max_assigned=2),
    )
