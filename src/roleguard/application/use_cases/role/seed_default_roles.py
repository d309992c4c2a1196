"""Seed default roles use case."""

import logging
from datetime import UTC, datetime
from uuid import uuid4

from roleguard.domain.default_roles import ADMIN_ROLE_NAME, DEFAULT_ROLES
from roleguard.domain.entities import Role

logger = logging.getLogger(__name__)


class SeedDefaultRolesUseCase:
    """Insert the built-in system roles once.

    The administrator default is stored under the configured administrator
    role name so the guard and the store agree on it.
    """

    def __init__(self, unit_of_work_factory: type, admin_role: str = ADMIN_ROLE_NAME) -> None:
        self._uow_factory = unit_of_work_factory
        self._admin_role = admin_role

    def _name(self, default_name: str) -> str:
        return self._admin_role if default_name == ADMIN_ROLE_NAME else default_name

    async def execute(self) -> int:
        """Seed missing system roles. Returns how many were inserted.

        A system administrator role doubles as the "already seeded" marker.
        Each insert is a no-op on a name conflict, so concurrent seeders
        converge on a single copy of every role.
        """
        async with self._uow_factory() as uow:
            admin = await uow.roles.find_by_name(self._admin_role)
            if admin and admin.is_system:
                return 0

            now = datetime.now(UTC)
            inserted = 0
            for default in DEFAULT_ROLES:
                role = Role(
                    id=uuid4(),
                    name=self._name(default.name),
                    description=default.description,
                    is_system=True,
                    permissions=list(default.permissions),
                    created_at=now,
                    updated_at=now,
                )
                if await uow.roles.insert_if_absent(role):
                    inserted += 1

        if inserted:
            logger.info("Seeded %d default roles", inserted)
        return inserted
