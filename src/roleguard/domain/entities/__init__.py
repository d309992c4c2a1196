"""Domain entities."""

from roleguard.domain.entities.caller import CallerContext, Session
from roleguard.domain.entities.role import Role, RolePatch

__all__ = [
    "CallerContext",
    "Role",
    "RolePatch",
    "Session",
]
