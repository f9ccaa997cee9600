"""
Error taxonomy shared by endpoints and services.

Each error carries the HTTP status it maps to. The handlers registered in
main.py render every error as {"message": <text>}.
"""

from fastapi import status


class JobBoardError(Exception):
    """Base class for request-scoped errors reported to the caller."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(JobBoardError):
    """Malformed or unacceptable input."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(JobBoardError):
    """Duplicate application or saved job."""

    # Duplicates are reported as 400, matching the public API contract
    status_code = status.HTTP_400_BAD_REQUEST


class ForbiddenError(JobBoardError):
    """Role or ownership mismatch."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(JobBoardError):
    """Record absent."""

    status_code = status.HTTP_404_NOT_FOUND
