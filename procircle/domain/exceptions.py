"""
Error taxonomy for the ProCircle domain.

Every failure a domain operation can report is a ProCircleError. Each error
carries an internal message, a user-facing message that is safe to return to
callers, and the HTTP status the API layer maps it to.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class ProCircleError(Exception):
    """Base exception for all domain errors."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class InvalidInputError(ProCircleError):
    """Raised when a required field is missing, empty or malformed."""

    status_code = 400


class DuplicateEmailError(ProCircleError):
    """Raised when registering an email that already belongs to a user."""

    status_code = 400

    def __init__(self, email: str):
        super().__init__(
            f"Email already registered: {email}",
            user_message="User with this email already exists",
            details={"email": email},
        )
        self.email = email


# -----------------------------------------------------------------------------
# Lookup
# -----------------------------------------------------------------------------


class NotFoundError(ProCircleError):
    """Raised when an entity id does not resolve."""

    status_code = 404

    def __init__(self, entity: str, entity_id: Optional[str] = None):
        super().__init__(
            f"{entity} not found: {entity_id}",
            user_message=f"{entity} not found",
            details={"entity": entity, "id": entity_id},
        )
        self.entity = entity
        self.entity_id = entity_id


# -----------------------------------------------------------------------------
# Identity and ownership
# -----------------------------------------------------------------------------


class UnauthenticatedError(ProCircleError):
    """Raised when a protected operation has no valid session."""

    status_code = 401

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message, user_message="Not authenticated")


class UnauthorizedError(ProCircleError):
    """Raised when the acting user does not own the entity being mutated."""

    status_code = 401


class InvalidCredentialsError(ProCircleError):
    """
    Raised on any login failure.

    Unknown email and wrong password produce the same error so callers cannot
    probe which accounts exist.
    """

    status_code = 401

    def __init__(self):
        super().__init__(
            "Invalid credentials",
            user_message="Invalid email or password",
        )


# -----------------------------------------------------------------------------
# Infrastructure
# -----------------------------------------------------------------------------


class InternalError(ProCircleError):
    """Raised when persistence or the runtime fails unexpectedly."""

    status_code = 500

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(
            message,
            user_message="Server error",
            details={"operation": operation} if operation else None,
        )
        self.operation = operation


# -----------------------------------------------------------------------------
# Safe user-facing message
# -----------------------------------------------------------------------------

def get_user_message(exc: BaseException) -> str:
    """
    Return a safe, user-facing message for any exception.
    Use this at API boundaries so internal details are never exposed.
    """
    if isinstance(exc, ProCircleError) and getattr(exc, "user_message", None):
        return exc.user_message
    return "Server error"
