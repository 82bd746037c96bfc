"""Shared pytest fixtures.

Fixture overview
----------------
mongo_db          - fresh in-memory database (mongomock) per test
project_repo      - ProjectRepository over ``mongo_db``
application_repo  - ApplicationRepository over ``mongo_db``
notifier          - records every notification instead of logging it
failing_notifier  - notifier whose delivery always raises
api               - FastAPI TestClient wired to ``mongo_db`` and ``notifier``
project           - one stored project
make_application  - factory for ApplicationIn payloads
"""

from __future__ import annotations

import mongomock
import pytest
from fastapi.testclient import TestClient

from apps.api.deps import get_db, get_notifier
from apps.api.main import app
from domain.models import ApplicationIn, ProjectIn
from services.persistence.mongo import ApplicationRepository, ProjectRepository, ensure_indexes


class RecordingNotifier:
    def __init__(self, fail: bool = False):
        self.sent: list[tuple[str, str]] = []
        self.fail = fail

    def notify(self, application, status):
        if self.fail:
            raise RuntimeError("smtp down")
        self.sent.append((application.email, status))


@pytest.fixture
def mongo_db():
    db = mongomock.MongoClient()["academa_test"]
    ensure_indexes(db)
    return db


@pytest.fixture
def project_repo(mongo_db) -> ProjectRepository:
    return ProjectRepository(mongo_db)


@pytest.fixture
def application_repo(mongo_db) -> ApplicationRepository:
    return ApplicationRepository(mongo_db)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def failing_notifier() -> RecordingNotifier:
    return RecordingNotifier(fail=True)


@pytest.fixture
def api(mongo_db, notifier):
    app.dependency_overrides[get_db] = lambda: mongo_db
    app.dependency_overrides[get_notifier] = lambda: notifier
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def project(project_repo):
    return project_repo.create_project(
        ProjectIn(project_name="X", project_description="Y", team_size=3)
    )


APPLICANT = dict(
    name="Ada",
    email="ada@example.edu",
    experience="2 hackathons",
    year="3",
    cgpa=[8.5, 9.1],
    message="Keen to join",
)


@pytest.fixture
def make_application():
    """ApplicationIn for ``project_id`` with a default applicant."""

    def _make(project_id: str, **overrides) -> ApplicationIn:
        return ApplicationIn(project_id=project_id, **{**APPLICANT, **overrides})

    return _make
