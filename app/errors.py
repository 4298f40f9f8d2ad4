"""
Error taxonomy for the metadata and upload pipeline.

Every error carries the HTTP status it maps to at the service boundary.
"""

from typing import Any, Dict, List, Optional, Tuple


class StudioError(Exception):
    """Base exception for pipeline errors."""

    status_code = 500
    default_message = "Unexpected error."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class ValidationError(StudioError):
    """Malformed or out-of-range caller input."""

    status_code = 400
    default_message = "Invalid request payload"


class ConfigurationError(StudioError):
    """Required deployment configuration is missing."""

    default_message = "Server configuration is incomplete."

    def __init__(self, message: Optional[str] = None, missing: List[str] = None):
        self.missing = list(missing or [])
        if message is None and self.missing:
            message = f"Missing environment variables: {', '.join(self.missing)}"
        super().__init__(message)


class UploadError(StudioError):
    """The video platform rejected or failed the transfer."""

    default_message = "Failed to upload video."


class InternalError(StudioError):
    """Unexpected failure caught at the service boundary."""

    default_message = "Unable to generate metadata."


def error_response(
    error: BaseException, fallback: Optional[str] = None
) -> Tuple[Dict[str, Any], int]:
    """
    Convert an exception into an ``{"error": message}`` body and status.

    Args:
        error: The exception raised while handling a request
        fallback: Message used when the exception carries none

    Returns:
        Tuple of (response body, HTTP status)
    """
    if isinstance(error, StudioError):
        return {"error": error.message}, error.status_code

    message = str(error) or fallback or StudioError.default_message
    return {"error": message}, 500
