"""Unit tests for TaskApiClient.

requests.request is patched; no network is used.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
import requests

from task_frontend.core.task_api import TaskApiClient, TaskApiError

from .fakes import make_response


@pytest.fixture()
def api_client() -> TaskApiClient:
    return TaskApiClient("http://task-api.test/", timeout=5)


class TestRequests:
    def test_list_tasks(self, api_client, api_request):
        api_request.return_value = make_response(200, [{"id": "1"}])
        assert api_client.list_tasks() == [{"id": "1"}]
        api_request.assert_called_once_with("GET", "http://task-api.test/tasks", timeout=5)

    def test_get_task(self, api_client, api_request):
        api_request.return_value = make_response(200, {"id": "7"})
        assert api_client.get_task("7") == {"id": "7"}
        api_request.assert_called_once_with("GET", "http://task-api.test/tasks/7", timeout=5)

    def test_create_task_sends_json(self, api_client, api_request):
        api_request.return_value = make_response(201, {"id": "1"})
        api_client.create_task({"title": "T"})
        api_request.assert_called_once_with(
            "POST", "http://task-api.test/tasks", timeout=5, json={"title": "T"}
        )

    def test_update_task_status(self, api_client, api_request):
        api_client.update_task_status("3", "COMPLETED")
        api_request.assert_called_once_with(
            "PATCH", "http://task-api.test/tasks/3", timeout=5, json={"status": "COMPLETED"}
        )

    def test_delete_with_empty_body_returns_none(self, api_client, api_request):
        api_request.return_value = make_response(204)
        assert api_client.delete_task("3") is None
        api_request.assert_called_once_with("DELETE", "http://task-api.test/tasks/3", timeout=5)

    def test_timeout_defaults_to_none(self, api_request):
        TaskApiClient("http://task-api.test").list_tasks()
        assert api_request.call_args.kwargs["timeout"] is None


class TestErrors:
    def test_http_error_carries_status_and_payload(self, api_client, api_request):
        api_request.return_value = make_response(400, {"error": "Invalid data", "details": {"dueDate": "bad"}})
        with pytest.raises(TaskApiError) as excinfo:
            api_client.create_task({})
        error = excinfo.value
        assert str(error) == "Request failed with status code 400"
        assert error.status_code == 400
        assert error.details == {"dueDate": "bad"}
        assert error.connection_refused is False

    def test_http_error_without_json_body(self, api_client, api_request):
        response = make_response(500)
        response._content = b"<html>oops</html>"
        api_request.return_value = response
        with pytest.raises(TaskApiError) as excinfo:
            api_client.list_tasks()
        assert excinfo.value.payload is None
        assert excinfo.value.details is None

    def test_connection_error_is_connection_refused(self, api_client, api_request):
        api_request.side_effect = requests.exceptions.ConnectionError("refused")
        with pytest.raises(TaskApiError) as excinfo:
            api_client.list_tasks()
        assert excinfo.value.connection_refused is True
        assert str(excinfo.value) == "connect ECONNREFUSED http://task-api.test"

    def test_timeout_is_not_connection_refused(self, api_client, api_request):
        api_request.side_effect = requests.exceptions.ConnectTimeout("slow")
        with pytest.raises(TaskApiError) as excinfo:
            api_client.get_task("1")
        assert excinfo.value.connection_refused is False
        assert "timed out" in str(excinfo.value)
