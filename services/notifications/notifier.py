from __future__ import annotations

from typing import Protocol

from core.logging import logger
from domain.models import Application


class Notifier(Protocol):
    def notify(self, application: Application, status: str) -> None: ...


class LogNotifier:
    """
    Stand-in dispatcher: writes the message to the log.
    Later: email/SMS delivery with its own retry policy.
    """

    def notify(self, application: Application, status: str) -> None:
        logger.info("Notification to %s: Your application has been %s", application.email, status)
