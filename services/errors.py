from __future__ import annotations


class AcademaError(Exception):
    """Base for errors the API turns into a ``{"detail": ...}`` response."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidIdentifier(AcademaError):
    status_code = 400


class InvalidArgument(AcademaError):
    status_code = 400


class NotFound(AcademaError):
    status_code = 404


class InternalError(AcademaError):
    status_code = 500
