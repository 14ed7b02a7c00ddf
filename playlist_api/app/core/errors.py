"""
Domain errors raised by the service layer.

Services raise these exceptions; the HTTP handlers translate them
into ``HTTPException`` with the matching status code.
"""

from fastapi import status


class PlaylistAPIError(Exception):
    """Base class for request-scoped errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(PlaylistAPIError, LookupError):
    """A playlist or track id does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ValidationError(PlaylistAPIError, ValueError):
    """A required field is missing or has the wrong type."""

    status_code = status.HTTP_400_BAD_REQUEST
