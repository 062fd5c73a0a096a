"""Domain errors raised by the service layer.

Each error carries the HTTP status it maps to; the handlers registered in
``taskboard.main`` render them as ``{"detail": message}`` responses.
"""

from fastapi import status


class TaskBoardError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class BadRequestError(TaskBoardError):
    """The operation is semantically invalid (self-invite, duplicate member)."""

    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(TaskBoardError):
    """Missing or invalid credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(TaskBoardError):
    """Authenticated, but not permitted on this resource or path combination."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(TaskBoardError):
    """Resource is absent, or not visible to the caller."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(TaskBoardError):
    """A uniqueness constraint was violated."""

    status_code = status.HTTP_409_CONFLICT
