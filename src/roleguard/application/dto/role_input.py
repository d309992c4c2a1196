"""Role input DTO and validation."""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator
from pydantic import ValidationError as PydanticValidationError

from roleguard.domain import catalog
from roleguard.domain.exceptions import ValidationFailed
from roleguard.domain.value_objects import Permission

ROLE_NAME_MAX_LENGTH = 100

ActionName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# (last named path segment, pydantic error type) -> message
_MESSAGES: dict[tuple[str, str], str] = {
    ("name", "missing"): "Role name is required",
    ("name", "string_type"): "Role name is required",
    ("name", "string_too_short"): "Role name must be at least 2 characters",
    ("name", "string_too_long"): f"Role name must be at most {ROLE_NAME_MAX_LENGTH} characters",
    ("permissions", "list_type"): "Invalid permissions format",
    ("permissions", "missing"): "At least one permission is required",
    ("permissions", "too_short"): "At least one permission is required",
    ("resource", "missing"): "Resource name is required",
    ("resource", "string_too_short"): "Resource name is required",
    ("actions", "missing"): "At least one action is required",
    ("actions", "too_short"): "At least one action is required",
    ("action", "string_too_short"): "Action name is required",
}


class PermissionInput(BaseModel):
    """One (resource, actions) grant as submitted by a client."""

    model_config = ConfigDict(str_strip_whitespace=True)

    resource: str = Field(min_length=1)
    actions: list[ActionName] = Field(min_length=1)


class RoleInput(BaseModel):
    """Validated payload for creating or updating a role."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=2, max_length=ROLE_NAME_MAX_LENGTH)
    description: str | None = None
    permissions: list[PermissionInput] = Field(min_length=1)

    @field_validator("description")
    @classmethod
    def _blank_description_is_none(cls, v: str | None) -> str | None:
        return v or None

    def to_permissions(self) -> list[Permission]:
        return [
            Permission(resource=p.resource, actions=tuple(p.actions))
            for p in self.permissions
        ]


def _field_path(loc: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in loc)


def _message(loc: tuple[Any, ...], error_type: str, default: str) -> str:
    key = "action" if loc and isinstance(loc[-1], int) else str(loc[-1]) if loc else ""
    return _MESSAGES.get((key, error_type), default)


def _catalog_errors(role_input: RoleInput) -> dict[str, list[str]]:
    """Resource and action names must come from the permission catalog."""
    errors: dict[str, list[str]] = {}
    for i, perm in enumerate(role_input.permissions):
        if not catalog.is_known_resource(perm.resource):
            errors.setdefault(f"permissions.{i}.resource", []).append(
                f"Unknown resource '{perm.resource}'"
            )
            continue
        allowed = catalog.list_actions(perm.resource)
        for j, action in enumerate(perm.actions):
            if action not in allowed:
                errors.setdefault(f"permissions.{i}.actions.{j}", []).append(
                    f"Action '{action}' is not valid for resource '{perm.resource}'"
                )
    return errors


def validate_role_input(
    name: Any,
    description: Any,
    permissions: Any,
) -> RoleInput:
    """Validate raw role fields. Raises ValidationFailed with per-field messages."""
    try:
        role_input = RoleInput.model_validate(
            {"name": name, "description": description, "permissions": permissions}
        )
    except PydanticValidationError as e:
        field_errors: dict[str, list[str]] = {}
        for err in e.errors():
            loc = tuple(err["loc"])
            field_errors.setdefault(_field_path(loc), []).append(
                _message(loc, err["type"], err["msg"])
            )
        raise ValidationFailed(field_errors) from e

    field_errors = _catalog_errors(role_input)
    if field_errors:
        raise ValidationFailed(field_errors)
    return role_input
