from functools import lru_cache

from fastapi import Depends
from pymongo.database import Database

from services.notifications.notifier import LogNotifier, Notifier
from services.persistence.mongo import ApplicationRepository, ProjectRepository, get_mongo


@lru_cache(maxsize=1)
def get_db() -> Database:
    """One Mongo client per process; pymongo pools connections itself."""
    return get_mongo()


def get_project_repo(db: Database = Depends(get_db)) -> ProjectRepository:
    return ProjectRepository(db)


def get_application_repo(db: Database = Depends(get_db)) -> ApplicationRepository:
    return ApplicationRepository(db)


def get_notifier() -> Notifier:
    """Swap for a real dispatcher via ``app.dependency_overrides``."""
    return LogNotifier()
