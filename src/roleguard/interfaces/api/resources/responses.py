"""Shared JSON shapes and status mapping for API resources."""

from typing import Any

import falcon
import falcon.asgi

from roleguard.application.dto.service_result import ServiceResult
from roleguard.domain.entities import Role
from roleguard.domain.exceptions import ErrorCode
from roleguard.domain.value_objects import Permission

STATUS_BY_CODE: dict[ErrorCode, str] = {
    ErrorCode.UNAUTHENTICATED: falcon.HTTP_401,
    ErrorCode.FORBIDDEN: falcon.HTTP_403,
    ErrorCode.VALIDATION_FAILED: falcon.HTTP_400,
    ErrorCode.DUPLICATE_NAME: falcon.HTTP_409,
    ErrorCode.NOT_FOUND: falcon.HTTP_404,
    ErrorCode.SYSTEM_ROLE_IMMUTABLE: falcon.HTTP_403,
    ErrorCode.ROLE_IN_USE: falcon.HTTP_403,
    ErrorCode.STORAGE_FAILURE: falcon.HTTP_500,
}


def permission_to_dict(permission: Permission) -> dict[str, Any]:
    return permission.to_dict()


def role_to_dict(role: Role) -> dict[str, Any]:
    return {
        "id": str(role.id),
        "name": role.name,
        "description": role.description,
        "is_system": role.is_system,
        "permissions": [permission_to_dict(p) for p in role.permissions],
        "created_at": role.created_at.isoformat(),
        "updated_at": role.updated_at.isoformat(),
    }


def set_error(
    resp: falcon.asgi.Response,
    code: ErrorCode,
    message: str,
    field_errors: dict[str, list[str]] | None = None,
) -> None:
    resp.status = STATUS_BY_CODE[code]
    media: dict[str, Any] = {"error": message, "code": code.value}
    if field_errors:
        media["field_errors"] = field_errors
    resp.media = media


def set_failure(resp: falcon.asgi.Response, result: ServiceResult) -> None:
    """Write a failed ServiceResult as an error response."""
    set_error(resp, result.error, result.message or "Request failed", result.field_errors)
