"""Role management service - the boundary that turns failures into results.

Use cases raise domain exceptions. Callers of this service never see them:
every taxonomy error comes back as a failed ``ServiceResult``. Storage
failures are logged with their traceback and reported with a generic message
so no persistence detail leaks to the client.
"""

import logging
from collections.abc import Awaitable
from typing import Any, TypeVar
from uuid import UUID

from roleguard.application.dto.service_result import ServiceResult
from roleguard.application.use_cases.role.create_role import CreateRoleUseCase
from roleguard.application.use_cases.role.delete_role import DeleteRoleUseCase
from roleguard.application.use_cases.role.get_role import GetRoleUseCase
from roleguard.application.use_cases.role.list_roles import ListRolesUseCase
from roleguard.application.use_cases.role.seed_default_roles import SeedDefaultRolesUseCase
from roleguard.application.use_cases.role.update_role import UpdateRoleUseCase
from roleguard.domain.entities import Role
from roleguard.domain.exceptions import (
    Forbidden,
    RoleguardError,
    StorageFailure,
    Unauthenticated,
    ValidationFailed,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RoleService:
    """Validated CRUD over roles, gated to administrators."""

    def __init__(
        self,
        list_roles: ListRolesUseCase,
        get_role: GetRoleUseCase,
        create_role: CreateRoleUseCase,
        update_role: UpdateRoleUseCase,
        delete_role: DeleteRoleUseCase,
        seed_default_roles: SeedDefaultRolesUseCase,
    ) -> None:
        self._list = list_roles
        self._get = get_role
        self._create = create_role
        self._update = update_role
        self._delete = delete_role
        self._seed = seed_default_roles

    async def list_roles(self, credentials: str | None) -> ServiceResult[list[Role]]:
        return await self._run(self._list.execute(credentials), "fetch roles")

    async def get_role(self, credentials: str | None, role_id: UUID | None) -> ServiceResult[Role]:
        return await self._run(self._get.execute(credentials, role_id), "fetch role")

    async def create_role(
        self,
        credentials: str | None,
        name: Any,
        description: Any,
        permissions: Any,
    ) -> ServiceResult[Role]:
        return await self._run(
            self._create.execute(credentials, name, description, permissions),
            "create role",
        )

    async def update_role(
        self,
        credentials: str | None,
        role_id: UUID | None,
        name: Any,
        description: Any,
        permissions: Any,
    ) -> ServiceResult[Role]:
        return await self._run(
            self._update.execute(credentials, role_id, name, description, permissions),
            "update role",
        )

    async def delete_role(self, credentials: str | None, role_id: UUID | None) -> ServiceResult[None]:
        return await self._run(self._delete.execute(credentials, role_id), "delete role")

    async def seed_default_roles(self) -> ServiceResult[int]:
        """Seed built-in roles. Internal bootstrap path, not gated."""
        return await self._run(self._seed.execute(), "initialize default roles")

    async def _run(self, call: Awaitable[T], what: str) -> ServiceResult[T]:
        try:
            return ServiceResult.ok(await call)
        except ValidationFailed as e:
            return ServiceResult.fail(e.code, str(e), e.field_errors)
        except StorageFailure:
            logger.exception("Storage failure while trying to %s", what)
            return ServiceResult.fail(StorageFailure.code, f"Failed to {what}")
        except (Unauthenticated, Forbidden) as e:
            logger.warning("Access denied while trying to %s: %s", what, e)
            return ServiceResult.fail(e.code, str(e))
        except RoleguardError as e:
            return ServiceResult.fail(e.code, str(e))
