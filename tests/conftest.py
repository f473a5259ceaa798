# tests/conftest.py

from __future__ import annotations

import time
from unittest.mock import patch

import pytest

from task_frontend.task_frontend_app import create_app

from .fakes import make_response

TASK_API_URL = "http://task-api.test"


@pytest.fixture()
def app():
    """Frontend app pointed at a fake task API, rate limiting off."""
    return create_app({
        "TESTING": True,
        "TASK_API_URL": TASK_API_URL,
        "RATELIMIT_ENABLED": False,
    })


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def api_request():
    """
    Patch the single outbound HTTP call the task API client makes.

    Tests set ``return_value`` / ``side_effect`` and inspect ``call_args``.
    """
    with patch("task_frontend.core.task_api.requests.request") as mock_request:
        mock_request.return_value = make_response(200, [])
        yield mock_request


@pytest.fixture()
def utc_timezone(monkeypatch):
    """Run the test with the process local time zone set to UTC."""
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
