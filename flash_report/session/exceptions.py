class SessionError(Exception):
    """Base exception for upload session errors."""


class UploadValidationError(SessionError):
    """Raised when an uploaded file is rejected before any extraction."""


class InvalidTransitionError(SessionError):
    """Raised when an action is not allowed in the current state."""
