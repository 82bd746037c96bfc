from __future__ import annotations

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from core.config import settings
from domain.models import Application, Message, Project

M = TypeVar("M", bound=BaseModel)


class ApiError(Exception):
    def __init__(self, detail: str, status_code: int | None = None):
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


def _detail(r: httpx.Response) -> str:
    try:
        body = r.json()
    except ValueError:
        return r.text or r.reason_phrase
    detail = body.get("detail") if isinstance(body, dict) else None
    if isinstance(detail, list):
        # pydantic 422 payload
        return "; ".join(str(e.get("msg", e)) for e in detail)
    return str(detail or body)


def _json(r: httpx.Response) -> Any:
    try:
        return r.json()
    except ValueError as e:
        raise ApiError("Expected JSON response, but got something else.", r.status_code) from e


class AcademaClient:
    """Thin sync wrapper over the Academa REST API."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout_s: float | None = None,
        http: httpx.Client | None = None,
    ):
        self._http = http or httpx.Client(
            base_url=base_url or settings.API_BASE_URL,
            timeout=timeout_s or settings.API_TIMEOUT_S,
        )

    def close(self) -> None:
        self._http.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            r = self._http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise ApiError(str(e) or e.__class__.__name__) from e
        if r.is_error:
            raise ApiError(_detail(r), r.status_code)
        return r

    def _one(self, model: type[M], r: httpx.Response) -> M:
        try:
            return model.model_validate(_json(r))
        except ValidationError as e:
            raise ApiError(f"Unexpected response from {r.request.url.path}", r.status_code) from e

    def _many(self, model: type[M], r: httpx.Response) -> list[M]:
        data = _json(r)
        if not isinstance(data, list):
            raise ApiError(f"Unexpected response from {r.request.url.path}", r.status_code)
        try:
            return [model.model_validate(item) for item in data]
        except ValidationError as e:
            raise ApiError(f"Unexpected response from {r.request.url.path}", r.status_code) from e

    def list_projects(self) -> list[Project]:
        return self._many(Project, self._request("GET", "/api/projects"))

    def create_project(self, values: dict[str, Any]) -> Project:
        return self._one(Project, self._request("POST", "/api/projects", json=values))

    def delete_project(self, project_id: str) -> str:
        return self._one(Message, self._request("DELETE", f"/api/projects/{project_id}")).message

    def list_applications(self, project_id: str) -> list[Application]:
        return self._many(Application, self._request("GET", f"/api/projects/{project_id}/applications"))

    def create_application(self, values: dict[str, Any]) -> Application:
        return self._one(Application, self._request("POST", "/api/applications", json=values))

    def update_status(self, application_id: str, status: str) -> Application:
        r = self._request("PUT", f"/api/applications/{application_id}/status", json={"status": status})
        return self._one(Application, r)
