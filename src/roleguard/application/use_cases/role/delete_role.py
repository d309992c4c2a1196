"""Delete role use case."""

import logging
from uuid import UUID

from roleguard.application.ports import AuthorizationGuard
from roleguard.application.use_cases.role.seed_default_roles import SeedDefaultRolesUseCase
from roleguard.domain.exceptions import NotFound, RoleInUse, SystemRoleImmutable

logger = logging.getLogger(__name__)


class DeleteRoleUseCase:
    """Delete a custom role that no user is assigned to."""

    def __init__(
        self,
        unit_of_work_factory: type,
        guard: AuthorizationGuard,
        seed_default_roles: SeedDefaultRolesUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._guard = guard
        self._seed = seed_default_roles

    async def execute(self, credentials: str | None, role_id: UUID | None) -> None:
        """Delete role. The in-use check is best-effort: a user assigned the
        role between the check and the delete is not detected."""
        caller = await self._guard.require_administrator(credentials)
        await self._seed.execute()
        if role_id is None:
            raise NotFound("Role not found")

        async with self._uow_factory() as uow:
            role = await uow.roles.find_by_id(role_id)
            if not role:
                raise NotFound("Role not found")
            if role.is_system:
                raise SystemRoleImmutable("System roles cannot be deleted")
            if await uow.users.exists_user_with_role(role.name):
                raise RoleInUse("Cannot delete a role that is assigned to users")
            await uow.roles.delete(role_id)

        logger.info("Role %r deleted by %s", role.name, caller.user_id)
