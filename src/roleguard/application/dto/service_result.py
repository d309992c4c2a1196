"""Structured outcome of a role-management call."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from roleguard.domain.exceptions import ErrorCode

T = TypeVar("T")

_ACCESS_DENIED = frozenset({ErrorCode.UNAUTHENTICATED, ErrorCode.FORBIDDEN})


@dataclass
class ServiceResult(Generic[T]):
    """Success with data, or failure with a code and a user-facing message."""

    success: bool
    data: T | None = None
    error: ErrorCode | None = None
    message: str | None = None
    field_errors: dict[str, list[str]] = field(default_factory=dict)

    @classmethod
    def ok(cls, data: T | None = None) -> "ServiceResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(
        cls,
        error: ErrorCode,
        message: str,
        field_errors: dict[str, list[str]] | None = None,
    ) -> "ServiceResult[T]":
        return cls(
            success=False,
            error=error,
            message=message,
            field_errors=field_errors or {},
        )

    @property
    def is_access_denied(self) -> bool:
        """Distinguishes login/permission denials from business-rule failures."""
        return self.error in _ACCESS_DENIED
