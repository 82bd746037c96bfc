from fastapi import APIRouter, Depends, status

from apps.api.deps import get_application_repo, get_notifier
from domain.models import Application, ApplicationIn, StatusUpdate
from services.notifications.notifier import Notifier
from services.persistence.mongo import ApplicationRepository
from services.review.workflow import review_application

router = APIRouter(prefix="/applications", tags=["applications"])


@router.post("", response_model=Application, status_code=status.HTTP_201_CREATED)
def create_application(
    payload: ApplicationIn,
    repo: ApplicationRepository = Depends(get_application_repo),
):
    return repo.create_application(payload)


@router.put("/{application_id}/status", response_model=Application)
def update_application_status(
    application_id: str,
    payload: StatusUpdate,
    repo: ApplicationRepository = Depends(get_application_repo),
    notifier: Notifier = Depends(get_notifier),
):
    return review_application(repo, notifier, application_id, payload.status)
