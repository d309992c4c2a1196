"""Authorization guard port - RBAC decisions."""

from typing import Protocol

from roleguard.domain.entities import CallerContext
from roleguard.domain.value_objects import Permission


class AuthorizationGuard(Protocol):
    """Port for resolving callers and checking role permissions."""

    async def authenticate(self, credentials: str | None) -> CallerContext: ...

    async def require_administrator(self, credentials: str | None) -> CallerContext: ...

    async def is_allowed(self, role: str, resource: str, action: str) -> bool: ...

    async def effective_permissions(self, role: str) -> list[Permission]: ...
