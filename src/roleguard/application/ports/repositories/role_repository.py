"""Role repository port."""

from typing import Protocol
from uuid import UUID

from roleguard.domain.entities import Role, RolePatch


class RoleRepository(Protocol):
    """Port for role persistence. Names are unique at the storage level."""

    async def find_all(self) -> list[Role]: ...

    async def find_by_id(self, role_id: UUID) -> Role | None: ...

    async def find_by_name(self, name: str) -> Role | None: ...

    async def insert(self, role: Role) -> Role: ...

    async def insert_if_absent(self, role: Role) -> bool: ...

    async def update(self, role_id: UUID, patch: RolePatch) -> Role: ...

    async def delete(self, role_id: UUID) -> None: ...
