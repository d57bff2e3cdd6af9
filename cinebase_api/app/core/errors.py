"""
Domain errors raised by the service layer.

Each error carries the HTTP status it maps to, a human readable
message and a dictionary of contextual fields (the offending id, the
conflicting record, the list of missing fields...).  The application
registers a single exception handler in ``main.py`` that renders any
``CineBaseError`` as ``{"error": message, **context}``.
"""

from typing import Any, Dict

from fastapi import status


class CineBaseError(Exception):
    """Base class for errors that are reported to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, **self.context}


class BadRequestError(CineBaseError):
    """Required fields are absent from the request body."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(CineBaseError):
    """A path parameter references an entity that does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(CineBaseError):
    """The request would violate a uniqueness rule."""

    status_code = status.HTTP_409_CONFLICT


class UnprocessableEntityError(CineBaseError):
    """A referenced entity (director, actor) does not exist."""

    status_code = 422
