"""Domain exceptions."""

from enum import StrEnum


class ErrorCode(StrEnum):
    """Stable failure codes surfaced to callers."""

    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    VALIDATION_FAILED = "validation_failed"
    DUPLICATE_NAME = "duplicate_name"
    NOT_FOUND = "not_found"
    SYSTEM_ROLE_IMMUTABLE = "system_role_immutable"
    ROLE_IN_USE = "role_in_use"
    STORAGE_FAILURE = "storage_failure"


class RoleguardError(Exception):
    """Base exception for Roleguard."""

    code: ErrorCode = ErrorCode.STORAGE_FAILURE


class Unauthenticated(RoleguardError):
    """Request carries no valid session."""

    code = ErrorCode.UNAUTHENTICATED


class Forbidden(RoleguardError):
    """Caller is authenticated but lacks the administrator role."""

    code = ErrorCode.FORBIDDEN


class ValidationFailed(RoleguardError):
    """Input failed validation; carries messages keyed by field path."""

    code = ErrorCode.VALIDATION_FAILED

    def __init__(self, field_errors: dict[str, list[str]]) -> None:
        super().__init__("Validation failed")
        self.field_errors = field_errors


class DuplicateName(RoleguardError):
    """Another role already uses this name."""

    code = ErrorCode.DUPLICATE_NAME


class NotFound(RoleguardError):
    """Requested resource was not found."""

    code = ErrorCode.NOT_FOUND


class SystemRoleImmutable(RoleguardError):
    """System roles cannot be modified or deleted."""

    code = ErrorCode.SYSTEM_ROLE_IMMUTABLE


class RoleInUse(RoleguardError):
    """Role is still assigned to at least one user."""

    code = ErrorCode.ROLE_IN_USE


class StorageFailure(RoleguardError):
    """Unexpected persistence error."""

    code = ErrorCode.STORAGE_FAILURE
