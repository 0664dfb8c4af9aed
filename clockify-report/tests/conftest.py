"""Shared fixtures for the clockify-report tests."""

import json
import logging
from unittest.mock import MagicMock

import pytest

from clockify_report.arguments import parse_arguments
from clockify_report.clockify import ClockifyClient, Project, Workspace
from clockify_report.config import Config
from clockify_report.context import Context


@pytest.fixture(autouse=True)
def restore_log_level():
    """Undo the root level change made by --verbose."""
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


@pytest.fixture
def workspaces():
    return [
        Workspace(id="ws-1", name="MyWork"),
        Workspace(id="ws-2", name="Side Projects"),
    ]


@pytest.fixture
def projects():
    return [
        Project(id="pr-1", name="Backoffice"),
        Project(id="pr-2", name="Meetings"),
    ]


@pytest.fixture
def client(workspaces, projects):
    """Mocked API client returning the sample workspaces and projects."""
    mock_client = MagicMock(spec=ClockifyClient)
    mock_client.get_workspaces.return_value = workspaces
    mock_client.get_projects.return_value = projects
    return mock_client


@pytest.fixture
def config():
    return Config(api_key="test-api-key-1234", workspace_id="ws-default", project_id="pr-default")


@pytest.fixture
def make_context(client, config):
    """Build a context from raw tokens, optionally with another config."""
    def _make(tokens=(), config_override=None):
        return Context(
            config=config_override or config,
            client=client,
            arguments=parse_arguments(tokens),
        )
    return _make


@pytest.fixture
def write_config(tmp_path):
    """Write a config.json file and return its path."""
    def _write(data, name="config.json"):
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write
