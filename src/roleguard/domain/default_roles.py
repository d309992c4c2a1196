"""Built-in system roles and their hard-coded grants."""

from dataclasses import dataclass
from typing import Final

from roleguard.domain.catalog import full_grant
from roleguard.domain.value_objects import Permission


@dataclass(frozen=True)
class DefaultRole:
    """Seed definition for a system role."""

    name: str
    description: str
    permissions: tuple[Permission, ...]


ADMIN_ROLE_NAME: Final = "admin"

DEFAULT_ROLES: Final[tuple[DefaultRole, ...]] = (
    DefaultRole(
        name=ADMIN_ROLE_NAME,
        description="Full access to all resources",
        permissions=tuple(full_grant()),
    ),
    DefaultRole(
        name="user",
        description="Regular user with limited access",
        permissions=(
            Permission("project", ("create", "read", "update")),
            Permission("content", ("create", "read", "update")),
            Permission("settings", ("read",)),
        ),
    ),
    DefaultRole(
        name="editor",
        description="Can manage content but not users",
        permissions=(
            Permission("project", ("read",)),
            Permission("content", ("create", "read", "update", "publish")),
            Permission("settings", ("read",)),
        ),
    ),
    DefaultRole(
        name="moderator",
        description="Can moderate content and ban users",
        permissions=(
            Permission("user", ("ban",)),
            Permission("content", ("read", "update", "delete")),
            Permission("settings", ("read",)),
        ),
    ),
)

BUILTIN_GRANTS: Final[dict[str, list[Permission]]] = {
    r.name: list(r.permissions) for r in DEFAULT_ROLES
}
