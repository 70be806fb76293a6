from __future__ import annotations

from .enums import RejectionReason


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when store credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a session lacks access to an action."""


class NotFoundError(DomainError):
    """Raised when a referenced store row does not exist."""


class ConflictError(DomainError):
    """Raised on uniqueness violations, with a user-facing message."""


class GuardRejection(DomainError):
    """Raised when an ENTRY/EXIT would break the alternating event sequence."""

    def __init__(self, reason: RejectionReason, message: str):
        super().__init__(message)
        self.reason = reason
