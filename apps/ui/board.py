from __future__ import annotations

import logging
import time
from typing import Any, Callable, Optional

from apps.ui import state as s
from apps.ui.client import AcademaClient, ApiError
from core.config import settings

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class BoardController:
    """
    Runs one API call per user action and folds the outcome into BoardState.

    Every failure ends up as an error banner; the reducers never see a
    partial result.
    """

    def __init__(
        self,
        client: AcademaClient,
        clock: Clock = time.time,
        ttl_s: Optional[float] = None,
    ):
        self.client = client
        self.clock = clock
        self.ttl_s = settings.NOTIFICATION_TTL_S if ttl_s is None else ttl_s

    def notify(self, state: s.BoardState, kind: str, message: str) -> s.BoardState:
        return s.notified(state, kind, message, self.clock(), self.ttl_s)

    def _fail(self, state: s.BoardState, what: str, err: ApiError) -> s.BoardState:
        logger.error("%s failed (status=%s): %s", what, err.status_code, err.detail)
        return self.notify(state, "error", f"Failed to {what}: {err.detail}")

    def tick(self, state: s.BoardState) -> s.BoardState:
        return s.expired(state, self.clock())

    def load_projects(self, state: s.BoardState) -> s.BoardState:
        try:
            projects = self.client.list_projects()
        except ApiError as e:
            return self._fail(state, "load projects", e)
        return s.projects_loaded(state, projects)

    def select_card(self, state: s.BoardState, card: s.Card) -> s.BoardState:
        state = s.card_selected(state, card)
        if not card.is_project:
            return state
        try:
            apps = self.client.list_applications(card.project_id)
        except ApiError as e:
            return self._fail(state, "load applications", e)
        return s.applications_loaded(state, card.project_id, apps)

    def submit_project(self, state: s.BoardState) -> s.BoardState:
        try:
            project = self.client.create_project(state.form.payload())
        except ApiError as e:
            # form stays open with the values the user typed
            return self._fail(state, "save project", e)
        state = s.project_created(state, project)
        return self.notify(state, "success", f"Project '{project.project_name}' uploaded.")

    def delete_project(self, state: s.BoardState, project_id: str) -> s.BoardState:
        try:
            message = self.client.delete_project(project_id)
        except ApiError as e:
            return self._fail(state, "delete project", e)
        return self.notify(s.project_deleted(state, project_id), "success", message)

    def apply(self, state: s.BoardState, values: dict[str, Any]) -> s.BoardState:
        project_id = state.selection.project_id
        if project_id is None:
            return self.notify(state, "error", "Select a project before applying.")
        try:
            application = self.client.create_application({**values, "projectId": project_id})
        except ApiError as e:
            return self._fail(state, "submit application", e)
        state = s.application_submitted(state, application)
        return self.notify(state, "success", "Application submitted.")

    def review(self, state: s.BoardState, application_id: str, status: str) -> s.BoardState:
        # no optimistic update: the list changes only after the server confirms
        try:
            updated = self.client.update_status(application_id, status)
        except ApiError as e:
            return self._fail(state, "update application status", e)
        state = s.application_reviewed(state, updated)
        sent = "Notification sent to student." if updated.notification_sent else "Student was not notified."
        return self.notify(state, "success", f"Application {status} successfully. {sent}")
