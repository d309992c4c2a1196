"""List roles use case."""

from roleguard.application.ports import AuthorizationGuard
from roleguard.application.use_cases.role.seed_default_roles import SeedDefaultRolesUseCase
from roleguard.domain.entities import Role


class ListRolesUseCase:
    """List all roles by name, seeding the built-ins on a fresh store."""

    def __init__(
        self,
        unit_of_work_factory: type,
        guard: AuthorizationGuard,
        seed_default_roles: SeedDefaultRolesUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._guard = guard
        self._seed = seed_default_roles

    async def execute(self, credentials: str | None) -> list[Role]:
        await self._guard.require_administrator(credentials)
        await self._seed.execute()

        async with self._uow_factory() as uow:
            return await uow.roles.find_all()
