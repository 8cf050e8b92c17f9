"""
Error taxonomy for account operations.

Every error carries the HTTP status and the user-visible message that the
envelope handler in ``api.middleware`` renders as ``{status: false, message}``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import status


class AccountError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        error: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.error = error

    def to_envelope(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"status": False, "message": self.message}
        if self.error is not None:
            body["error"] = self.error
        return body


class ValidationError(AccountError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AccountError):
    status_code = status.HTTP_404_NOT_FOUND


class AuthError(AccountError):
    status_code = status.HTTP_401_UNAUTHORIZED


class PersistenceError(AccountError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class DuplicateUserError(PersistenceError):
    """A unique constraint on ``username`` or ``email`` was violated."""


class MissingTokenError(AuthError):
    def __init__(self, message: str = "Token tidak ditemukan") -> None:
        super().__init__(message)


class InvalidTokenError(AuthError):
    def __init__(self, message: str = "Token tidak valid", *, reason: str = "") -> None:
        super().__init__(message)
        self.reason = reason


class TokenExpiredError(InvalidTokenError):
    def __init__(self, message: str = "Token kedaluwarsa") -> None:
        super().__init__(message, reason="token expired")
