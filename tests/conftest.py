"""Shared test fixtures and configuration.

Keeps every test away from the real platform config, data and log dirs.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from todo_local.adapters.sqlite import SqliteTaskDataSource
from todo_local.models import Task
from todo_local.services.config_service import ConfigService
from todo_local.utils.ui.console import set_color


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path):
    """Point the application logger at tmp_path and reset it afterwards."""
    import todo_local.utils.logger as logger_mod

    app_logger = logging.getLogger("todo_local")
    logger_mod._logger = None
    app_logger.handlers.clear()

    with patch("todo_local.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield tmp_path / "logs"

    for handler in app_logger.handlers:
        handler.close()
    app_logger.handlers.clear()
    logger_mod._logger = None
    set_color(True)


@pytest.fixture(autouse=True)
def config_service(tmp_path):
    """Real ConfigService backed by a temporary directory."""
    svc = ConfigService(config_dir=tmp_path / "config")
    with patch("todo_local.commands.utils.get_config_service", return_value=svc):
        with patch("todo_local.commands.config.get_config_service", return_value=svc):
            with patch("todo_local.main.get_config_service", return_value=svc):
                yield svc


@pytest.fixture
def store():
    """Isolated in-memory task store."""
    with SqliteTaskDataSource(":memory:") as data_source:
        yield data_source


@pytest.fixture
def milk() -> Task:
    return Task(id="1", title="Buy milk", description="2%", completed=False)
