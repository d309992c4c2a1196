"""Get role use case."""

from uuid import UUID

from roleguard.application.ports import AuthorizationGuard
from roleguard.application.use_cases.role.seed_default_roles import SeedDefaultRolesUseCase
from roleguard.domain.entities import Role
from roleguard.domain.exceptions import NotFound


class GetRoleUseCase:
    """Get a single role by id."""

    def __init__(
        self,
        unit_of_work_factory: type,
        guard: AuthorizationGuard,
        seed_default_roles: SeedDefaultRolesUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._guard = guard
        self._seed = seed_default_roles

    async def execute(self, credentials: str | None, role_id: UUID | None) -> Role:
        await self._guard.require_administrator(credentials)
        await self._seed.execute()
        if role_id is None:
            raise NotFound("Role not found")

        async with self._uow_factory() as uow:
            role = await uow.roles.find_by_id(role_id)
        if not role:
            raise NotFound("Role not found")
        return role
