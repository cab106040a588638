from enum import Enum


class ErrorCode(str, Enum):
    """Expected failure kinds reported by board operations."""

    UNAUTHENTICATED = "unauthenticated"
    UNAUTHORIZED = "unauthorized"
    INVALID_INPUT = "invalid_input"
    DUPLICATE_EMAIL = "duplicate_email"
    INVALID_CREDENTIALS = "invalid_credentials"
    WRONG_PASSWORD = "wrong_password"
    USER_NOT_FOUND = "user_not_found"
    NOT_FOUND = "not_found"
    SELF_DELETION_FORBIDDEN = "self_deletion_forbidden"
