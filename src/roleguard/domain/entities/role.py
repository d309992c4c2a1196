"""Role entity for RBAC."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from roleguard.domain.value_objects import Permission


@dataclass
class Role:
    """Named bundle of permissions assignable to users by name."""

    id: UUID
    name: str
    created_at: datetime
    updated_at: datetime
    description: str | None = None
    is_system: bool = False
    permissions: list[Permission] = field(default_factory=list)

    def grants(self, resource: str, action: str) -> bool:
        """True if any permission on resource includes action."""
        return any(p.resource == resource and p.allows(action) for p in self.permissions)


@dataclass
class RolePatch:
    """Fields replaced by a role update."""

    name: str
    description: str | None
    permissions: list[Permission]
    updated_at: datetime
