# tests/test_api_client.py

from __future__ import annotations

import httpx
import pytest

from clario.api.client import TodoApiClient
from clario.core.ports import TodoApiError
from clario.tasks.task_models import Draft, Priority, Task

from .fakes import FakeBackend


def test_list_tasks_parses_records(client: TodoApiClient, backend: FakeBackend) -> None:
    backend.seed(id="t1", title="Walk dog", priority="low")
    backend.seed(id="t2", title="File taxes", priority="high", completed=True)

    resp = client.list_tasks()

    assert resp.success is True
    assert [t.id for t in resp.data] == ["t1", "t2"]
    assert all(isinstance(t, Task) for t in resp.data)
    assert resp.data[1].priority is Priority.HIGH
    assert backend.requests == [("GET", "/api/todos", None)]


def test_create_sends_draft_payload(client: TodoApiClient, backend: FakeBackend) -> None:
    draft = Draft(title="Buy milk", description="2%", priority=Priority.HIGH, due_date="2025-01-05")

    resp = client.create_task(draft)

    method, path, body = backend.requests[-1]
    assert (method, path) == ("POST", "/api/todos")
    assert body == {
        "title": "Buy milk",
        "description": "2%",
        "priority": "high",
        "due_date": "2025-01-05T00:00:00.000Z",
    }
    assert resp.success is True
    assert isinstance(resp.data, Task)
    assert resp.data.title == "Buy milk"
    assert resp.message == "Todo created successfully"


def test_update_delete_toggle_and_get_routes(client: TodoApiClient, backend: FakeBackend) -> None:
    backend.seed(id="t1", title="Old title")

    assert client.update_task("t1", Draft(title="New title")).success
    assert backend.requests[-1][:2] == ("PUT", "/api/todos/t1")
    assert backend.todos["t1"]["title"] == "New title"

    fetched = client.get_task("t1")
    assert fetched.success and fetched.data.title == "New title"

    toggled = client.toggle_task("t1")
    assert backend.requests[-1][:2] == ("PATCH", "/api/todos/t1/toggle")
    assert toggled.success and toggled.data.completed is True

    deleted = client.delete_task("t1")
    assert backend.requests[-1][:2] == ("DELETE", "/api/todos/t1")
    assert deleted.success and deleted.data is None
    assert "t1" not in backend.todos


def test_http_error_status_raises(client: TodoApiClient, backend: FakeBackend) -> None:
    backend.fail_status = 500
    with pytest.raises(TodoApiError) as excinfo:
        client.list_tasks()
    assert excinfo.value.status_code == 500


def test_missing_task_is_http_error(client: TodoApiClient) -> None:
    with pytest.raises(TodoApiError) as excinfo:
        client.get_task("nope")
    assert excinfo.value.status_code == 404


def test_network_error_raises(client: TodoApiClient, backend: FakeBackend) -> None:
    backend.fail_network = True
    with pytest.raises(TodoApiError) as excinfo:
        client.toggle_task("t1")
    assert excinfo.value.status_code is None
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="<html>gateway</html>"),
        httpx.Response(200, json=["not", "an", "object"]),
        httpx.Response(200, json={"success": False, "error": "nope"}),
        httpx.Response(200, json={"data": []}),
        httpx.Response(200, json={"success": True, "data": {"id": "x"}}),
    ],
)
def test_malformed_or_unsuccessful_body_is_not_success(response: httpx.Response) -> None:
    transport = httpx.MockTransport(lambda request: response)
    with TodoApiClient("http://testserver/api", transport=transport) as c:
        assert c.list_tasks().success is False


def test_base_url_trailing_slash_is_ignored(backend: FakeBackend) -> None:
    with TodoApiClient("http://testserver/api/", transport=backend.transport()) as c:
        assert c.base_url == "http://testserver/api"
        c.list_tasks()
    assert backend.requests[-1][:2] == ("GET", "/api/todos")


def test_invalid_due_date_fails_before_any_request(client: TodoApiClient, backend: FakeBackend) -> None:
    with pytest.raises(ValueError):
        client.create_task(Draft(title="x", due_date="soon"))
    assert backend.requests == []
