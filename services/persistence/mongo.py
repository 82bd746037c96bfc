from __future__ import annotations

import logging
from typing import Any

from bson import ObjectId
from pymongo import ASCENDING, MongoClient, ReturnDocument
from pymongo.database import Database

from core.config import settings
from domain.models import Application, ApplicationIn, ApplicationStatus, Project, ProjectIn
from services.errors import InvalidIdentifier, NotFound

logger = logging.getLogger(__name__)

PROJECTS = "projects"
APPLICATIONS = "applications"


def get_mongo(url: str | None = None, db_name: str | None = None) -> Database:
    client = MongoClient(url or settings.MONGO_URL, serverSelectionTimeoutMS=2000)
    db = client[db_name or settings.MONGO_DB]
    ensure_indexes(db)
    return db


def ensure_indexes(db: Database) -> None:
    db[APPLICATIONS].create_index([("projectId", ASCENDING)])


def parse_object_id(value: str, kind: str) -> ObjectId:
    """24-hex string -> ObjectId, or InvalidIdentifier."""
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise InvalidIdentifier(f"Invalid {kind} ID format")
    return ObjectId(value)


def _to_project(doc: dict[str, Any]) -> Project:
    return Project.model_validate({**doc, "_id": str(doc["_id"])})


def _to_application(doc: dict[str, Any]) -> Application:
    return Application.model_validate(
        {**doc, "_id": str(doc["_id"]), "projectId": str(doc["projectId"])}
    )


class ProjectRepository:
    def __init__(self, db: Database):
        self.col = db[PROJECTS]

    def list_projects(self) -> list[Project]:
        return [_to_project(d) for d in self.col.find().sort("_id", ASCENDING)]

    def exists(self, project_id: ObjectId) -> bool:
        return self.col.count_documents({"_id": project_id}, limit=1) > 0

    def create_project(self, payload: ProjectIn) -> Project:
        doc = payload.model_dump(by_alias=True)
        self.col.insert_one(doc)
        logger.info("created project %s (%s)", doc["_id"], payload.project_name)
        return _to_project(doc)

    def delete_project(self, project_id: str) -> None:
        oid = parse_object_id(project_id, "project")
        if self.col.find_one_and_delete({"_id": oid}) is None:
            raise NotFound("Project not found")
        # applications of a deleted project are kept; there is no cascade
        logger.info("deleted project %s", project_id)


class ApplicationRepository:
    def __init__(self, db: Database):
        self.col = db[APPLICATIONS]
        self.projects = ProjectRepository(db)

    def list_for_project(self, project_id: str) -> list[Application]:
        oid = parse_object_id(project_id, "project")
        cursor = self.col.find({"projectId": oid}).sort("_id", ASCENDING)
        return [_to_application(d) for d in cursor]

    def create_application(self, payload: ApplicationIn) -> Application:
        project_oid = parse_object_id(payload.project_id, "project")
        if not self.projects.exists(project_oid):
            raise NotFound("Project not found")
        doc = payload.model_dump(by_alias=True)
        doc.update(
            projectId=project_oid,
            status=ApplicationStatus.PENDING.value,
            notificationSent=False,
        )
        self.col.insert_one(doc)
        logger.info("application %s submitted to project %s", doc["_id"], payload.project_id)
        return _to_application(doc)

    def get_application(self, application_id: str) -> Application:
        doc = self.col.find_one({"_id": parse_object_id(application_id, "application")})
        if doc is None:
            raise NotFound("Application not found")
        return _to_application(doc)

    def update_fields(self, application_id: str, **fields: Any) -> Application:
        """Single-document update, last write wins."""
        doc = self.col.find_one_and_update(
            {"_id": parse_object_id(application_id, "application")},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            raise NotFound("Application not found")
        return _to_application(doc)

    def set_status(
        self, application_id: str, status: ApplicationStatus, notification_sent: bool = False
    ) -> Application:
        return self.update_fields(
            application_id, status=status.value, notificationSent=notification_sent
        )

    def mark_notified(self, application_id: str) -> Application:
        return self.update_fields(application_id, notificationSent=True)
