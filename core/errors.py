"""
Error types and centralized error handling & logging utilities.
Domain errors are raised by the services; views turn them into messages.
"""
import hashlib
import logging
import traceback
from datetime import datetime

logger = logging.getLogger("AssetTracker")


class AssetTrackerError(Exception):
    """Base class for every recoverable error raised by the service layer."""
    category = "default"

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ValidationError(AssetTrackerError):
    """Input rejected before any mutation. Carries one message per problem."""
    category = "validation"

    def __init__(self, errors):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class NotFoundError(AssetTrackerError):
    category = "not_found"

    def __init__(self, entity: str, entity_id):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} '{entity_id}' was not found")


class ConflictError(AssetTrackerError):
    """Operation blocked by the current state of the data."""
    category = "conflict"


class PermissionDeniedError(AssetTrackerError):
    category = "permission"


class AuthError(AssetTrackerError):
    """Sign-in failure. ``kind`` is USER_NOT_FOUND or INVALID_PASSWORD."""
    category = "authentication"

    USER_NOT_FOUND = "UserNotFound"
    INVALID_PASSWORD = "InvalidPassword"

    MESSAGES = {
        USER_NOT_FOUND: "User not found",
        INVALID_PASSWORD: "Invalid password",
    }

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(self.MESSAGES.get(kind, "Authentication failed"))

# User-safe error messages (hide technical details)
USER_SAFE_MESSAGES = {
    "permission": "You don't have permission to perform this action.",
    "validation": "The data provided is invalid. Please check your input.",
    "not_found": "The requested record was not found.",
    "conflict": "This operation conflicts with existing data.",
    "authentication": "Sign-in failed. Please check your credentials.",
    "default": "An unexpected error occurred. Please try again or contact support."
}


def get_error_id() -> str:
    """Generate unique error ID for support reference."""
    timestamp = datetime.now().isoformat()
    return hashlib.md5(timestamp.encode()).hexdigest()[:8].upper()


def log_error(error: Exception, context: str = "", user_role: str = None) -> str:
    """
    Log technical error details and return an error ID for user reference.

    Args:
        error: The exception that occurred
        context: Additional context about what was being attempted
        user_role: Current user's role for audit purposes

    Returns:
        Error ID for user reference
    """
    error_id = get_error_id()

    logger.error(
        f"ERROR_ID={error_id} | "
        f"CONTEXT={context} | "
        f"ROLE={user_role or 'unknown'} | "
        f"TYPE={type(error).__name__} | "
        f"MESSAGE={str(error)} | "
        f"TRACE={traceback.format_exc()}"
    )

    return error_id


def classify_error(error: Exception) -> str:
    """Classify an exception to pick the user-safe message."""
    if isinstance(error, AssetTrackerError):
        return error.category
    if isinstance(error, PermissionError):
        return "permission"
    if isinstance(error, (KeyError, LookupError)):
        return "not_found"
    if isinstance(error, (ValueError, TypeError)):
        return "validation"
    return "default"


def user_message_for(error: Exception) -> str:
    """Message to show for an error: domain errors carry their own text."""
    if isinstance(error, AssetTrackerError) and error.message:
        return error.message
    return USER_SAFE_MESSAGES.get(classify_error(error), USER_SAFE_MESSAGES["default"])

