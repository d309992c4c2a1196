"""Update role use case."""

import logging
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from roleguard.application.dto.role_input import validate_role_input
from roleguard.application.ports import AuthorizationGuard
from roleguard.application.use_cases.role.seed_default_roles import SeedDefaultRolesUseCase
from roleguard.domain.entities import Role, RolePatch
from roleguard.domain.exceptions import DuplicateName, NotFound, SystemRoleImmutable

logger = logging.getLogger(__name__)


class UpdateRoleUseCase:
    """Replace name, description and permissions of a custom role."""

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
        role_id: UUID | None,
        name: Any,
        description: Any,
        permissions: Any,
    ) -> Role:
        caller = await self._guard.require_administrator(credentials)
        await self._seed.execute()
        if role_id is None:
            raise NotFound("Role not found")

        async with self._uow_factory() as uow:
            existing = await uow.roles.find_by_id(role_id)
            if not existing:
                raise NotFound("Role not found")
            if existing.is_system:
                raise SystemRoleImmutable("System roles cannot be modified")

            role_input = validate_role_input(name, description, permissions)

            conflict = await uow.roles.find_by_name(role_input.name)
            if conflict and conflict.id != role_id:
                raise DuplicateName("Another role with this name already exists")

            updated = await uow.roles.update(
                role_id,
                RolePatch(
                    name=role_input.name,
                    description=role_input.description,
                    permissions=role_input.to_permissions(),
                    updated_at=datetime.now(UTC),
                ),
            )

        logger.info("Role %s updated by %s", role_id, caller.user_id)
        return updated
