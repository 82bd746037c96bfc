import logging
import sys

from core.config import settings

FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"

logger = logging.getLogger("academa")


class QuietHealthFilter(logging.Filter):
    """Drop uvicorn access-log lines for liveness polls."""

    NOISY = ("/healthz",)

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        return not any(path in msg for path in self.NOISY)


def configure_logging(level: str | int | None = None) -> None:
    """
    One stdout handler on the root logger, shared by the API and the
    Streamlit page. Safe to call more than once: Streamlit re-executes the
    page script on every interaction.
    """
    logging.basicConfig(
        level=level or settings.LOG_LEVEL,
        format=FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("pymongo").setLevel(logging.WARNING)

    access = logging.getLogger("uvicorn.access")
    if not any(isinstance(f, QuietHealthFilter) for f in access.filters):
        access.addFilter(QuietHealthFilter())
