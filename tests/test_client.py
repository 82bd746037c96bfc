from __future__ import annotations

import json

import httpx
import pytest

from apps.ui.client import AcademaClient, ApiError
from domain.models import ApplicationStatus

PID = "65a1f0c2e4b0a1b2c3d4e5f6"
AID = "65a1f0c2e4b0a1b2c3d4e5f7"


def _client(handler) -> AcademaClient:
    http = httpx.Client(base_url="http://api.test", transport=httpx.MockTransport(handler))
    return AcademaClient(http=http)


def test_list_projects_parses_records():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "GET"
        assert request.url.path == "/api/projects"
        return httpx.Response(
            200,
            json=[{"_id": PID, "projectName": "X", "projectDescription": "Y", "teamSize": 3}],
        )

    [project] = _client(handler).list_projects()
    assert project.id == PID
    assert project.team_size == 3


def test_update_status_sends_body():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            200,
            json={
                "_id": AID,
                "projectId": PID,
                "name": "Ada",
                "email": "ada@example.edu",
                "status": "rejected",
                "notificationSent": True,
            },
        )

    app = _client(handler).update_status(AID, "rejected")
    assert seen == {"path": f"/api/applications/{AID}/status", "body": {"status": "rejected"}}
    assert app.status is ApplicationStatus.REJECTED


def test_error_detail_is_surfaced():
    client = _client(lambda r: httpx.Response(404, json={"detail": "Project not found"}))
    with pytest.raises(ApiError) as exc:
        client.delete_project(PID)
    assert exc.value.status_code == 404
    assert exc.value.detail == "Project not found"


def test_validation_error_list_is_flattened():
    body = {"detail": [{"loc": ["body", "teamSize"], "msg": "Input should be a valid integer"}]}
    client = _client(lambda r: httpx.Response(422, json=body))
    with pytest.raises(ApiError, match="valid integer"):
        client.create_project({"teamSize": "many"})


def test_non_json_response():
    client = _client(lambda r: httpx.Response(200, text="<html>proxy</html>"))
    with pytest.raises(ApiError, match="Expected JSON response"):
        client.list_projects()


def test_transport_failure():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ApiError) as exc:
        _client(handler).list_projects()
    assert exc.value.status_code is None


@pytest.mark.parametrize(
    "body",
    [
        {"unexpected": 1},
        [{"_id": PID, "projectName": "X"}],
    ],
)
def test_malformed_list_body(body):
    client = _client(lambda r: httpx.Response(200, json=body))
    with pytest.raises(ApiError, match="Unexpected response from /api/projects") as exc:
        client.list_projects()
    assert exc.value.status_code == 200


def test_malformed_record_body():
    client = _client(lambda r: httpx.Response(200, json={"status": "accepted"}))
    with pytest.raises(ApiError, match="Unexpected response"):
        client.update_status(AID, "accepted")


def test_delete_without_message():
    client = _client(lambda r: httpx.Response(200, json={}))
    with pytest.raises(ApiError):
        client.delete_project(PID)
