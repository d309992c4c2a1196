"""Create role use case."""

import logging
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from roleguard.application.dto.role_input import validate_role_input
from roleguard.application.ports import AuthorizationGuard
from roleguard.application.use_cases.role.seed_default_roles import SeedDefaultRolesUseCase
from roleguard.domain.entities import Role
from roleguard.domain.exceptions import DuplicateName

logger = logging.getLogger(__name__)


class CreateRoleUseCase:
    """Create a custom (non-system) role."""

    def __init__(
        self,
        unit_of_work_factory: type,
        guard: AuthorizationGuard,
        seed_default_roles: SeedDefaultRolesUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._guard = guard
        self._seed = seed_default_roles

    async def execute(
        self,
        credentials: str | None,
        name: Any,
        description: Any,
        permissions: Any,
    ) -> Role:
        """Validate and insert. Name collisions surface as DuplicateName.

        Built-in roles are seeded first, so their names are always taken.
        The lookup gives a friendly early error; the unique index on name is
        what rejects a concurrent insert of the same name.
        """
        caller = await self._guard.require_administrator(credentials)
        await self._seed.execute()
        role_input = validate_role_input(name, description, permissions)

        async with self._uow_factory() as uow:
            if await uow.roles.find_by_name(role_input.name):
                raise DuplicateName("A role with this name already exists")

            now = datetime.now(UTC)
            role = Role(
                id=uuid4(),
                name=role_input.name,
                description=role_input.description,
                is_system=False,
                permissions=role_input.to_permissions(),
                created_at=now,
                updated_at=now,
            )
            created = await uow.roles.insert(role)

        logger.info("Role %r created by %s", created.name, caller.user_id)
        return created
