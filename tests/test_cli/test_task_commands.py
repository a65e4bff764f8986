"""Tests for the tasks CLI commands."""

from __future__ import annotations

from unittest.mock import patch

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from typer.testing import CliRunner

from stageboard.cli.task_commands import app
from stageboard.server.routes.tasks import tasks_router
from stageboard.tasks.store import TaskStore

runner = CliRunner()


@pytest.fixture(autouse=True)
def patch_client(store: TaskStore):
    """Route CLI requests to an in-process app backed by the test store."""
    server = FastAPI()
    server.state.task_store = store
    server.include_router(tasks_router)
    with patch(
        "stageboard.cli.task_commands._get_client",
        side_effect=lambda: TestClient(server),
    ):
        yield


def test_list_shows_columns():
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert "To Do (1)" in result.output
    assert "In Progress (2)" in result.output
    assert "Completed (0)" in result.output


def test_list_empty(store: TaskStore):
    for task in store.all():
        store.delete(task.id)
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert "empty" in result.output


def test_add(store: TaskStore):
    result = runner.invoke(app, ["add", "D", "--group", "1", "--persona", "dev"])
    assert result.exit_code == 0
    assert "Added task" in result.output
    assert store.get(4).persona == "dev"


def test_add_gated(store: TaskStore):
    result = runner.invoke(app, ["add", "E", "--group", "2"])
    assert result.exit_code == 1
    assert "group 2" in result.output
    assert len(store.all()) == 3


def test_complete(store: TaskStore):
    result = runner.invoke(app, ["complete", "A"])
    assert result.exit_code == 0
    assert "Completed" in result.output
    assert store.get(1).completed is True


def test_complete_gated(store: TaskStore):
    result = runner.invoke(app, ["complete", "C"])
    assert result.exit_code == 1
    assert "lower groups" in result.output
    assert store.get(3).completed is False


def test_complete_missing():
    result = runner.invoke(app, ["complete", "Nope"])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_edit(store: TaskStore):
    result = runner.invoke(app, ["edit", "3", "--description", "new text"])
    assert result.exit_code == 0
    assert "Updated task" in result.output
    assert store.get(3).description == "new text"


def test_edit_without_changes():
    result = runner.invoke(app, ["edit", "3"])
    assert result.exit_code == 1
    assert "Nothing to change" in result.output


def test_edit_missing():
    result = runner.invoke(app, ["edit", "99", "--title", "x"])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_remove(store: TaskStore):
    result = runner.invoke(app, ["remove", "1"])
    assert result.exit_code == 0
    assert "Removed" in result.output
    assert store.get(1) is None


def test_reset(store: TaskStore):
    store.complete("A")
    result = runner.invoke(app, ["reset", "--yes"])
    assert result.exit_code == 0
    assert "Board reset (3 tasks)" in result.output
    assert store.completed() == []


def test_reset_declined(store: TaskStore):
    store.complete("A")
    result = runner.invoke(app, ["reset"], input="n\n")
    assert result.exit_code == 1
    assert len(store.completed()) == 1


def test_server_unreachable():
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = httpx.Client(base_url="http://127.0.0.1:8000", transport=httpx.MockTransport(refuse))
    with patch("stageboard.cli.task_commands._get_client", return_value=client):
        result = runner.invoke(app, ["list"])
    assert result.exit_code == 1
    assert "not reachable" in result.output
