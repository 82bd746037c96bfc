from __future__ import annotations

import logging

from domain.models import REVIEW_STATUSES, Application, ApplicationStatus
from services.errors import InvalidArgument
from services.notifications.notifier import Notifier
from services.persistence.mongo import ApplicationRepository

logger = logging.getLogger(__name__)


def review_application(
    repo: ApplicationRepository,
    notifier: Notifier,
    application_id: str,
    status: str,
) -> Application:
    """
    Set an application's status to accepted/rejected and notify the applicant.

    The status is overwritten unconditionally, so a reviewed application can be
    reviewed again. ``notificationSent`` is cleared with the status change and
    only set once the notifier returns; a failing notifier leaves it false.
    """
    logger.info("status update requested for %s: %r", application_id, status)
    if status not in REVIEW_STATUSES:
        raise InvalidArgument("Invalid status")

    application = repo.set_status(application_id, ApplicationStatus(status), notification_sent=False)
    try:
        notifier.notify(application, status)
    except Exception:  # noqa: BLE001
        logger.exception("notification failed for application %s", application_id)
        return application
    return repo.mark_notified(application_id)
