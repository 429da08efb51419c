"""Domain errors raised by the verification workflow."""

from __future__ import annotations

from fastapi import status


class WorkflowError(Exception):
    """Base error for rejected workflow operations.

    Each subclass carries the HTTP status it is rendered with.
    """

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class Forbidden(WorkflowError):
    """Actor lacks the ownership or role the transition requires."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFound(WorkflowError):
    """Referenced post or comment does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class InvalidState(WorkflowError):
    """Transition is not legal from the post's current status."""

    status_code = status.HTTP_409_CONFLICT


class BadRequest(WorkflowError):
    """Required input is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST
