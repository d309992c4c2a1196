"""Authorization guard implementation - session lookup plus role grants."""

from roleguard.application.ports import SessionResolver
from roleguard.domain.catalog import full_grant
from roleguard.domain.default_roles import ADMIN_ROLE_NAME, BUILTIN_GRANTS
from roleguard.domain.entities import CallerContext
from roleguard.domain.exceptions import Forbidden, Unauthenticated
from roleguard.domain.value_objects import Permission, merge_permissions


class RoleguardAuthorizationGuard:
    """Resolves callers and decides (role, resource, action) access.

    Every role goes through the same decision: compute its effective
    permission list, then look for the resource and action in it. Built-in
    roles use hard-coded grants, custom roles their stored grants. The
    administrator role gets the full catalog grant merged with whatever is
    stored for it.
    """

    def __init__(
        self,
        session_resolver: SessionResolver,
        unit_of_work_factory: type,
        admin_role: str = "admin",
        admin_user_ids: frozenset[str] = frozenset(),
    ) -> None:
        self._sessions = session_resolver
        self._uow_factory = unit_of_work_factory
        self._admin_role = admin_role
        self._admin_user_ids = admin_user_ids

    async def authenticate(self, credentials: str | None) -> CallerContext:
        """Resolve the caller or raise Unauthenticated."""
        session = await self._sessions.resolve_session(credentials)
        if session is None:
            raise Unauthenticated("Not authenticated")
        if session.user_id in self._admin_user_ids:
            return CallerContext(user_id=session.user_id, role=self._admin_role, is_admin=True)
        return CallerContext(
            user_id=session.user_id,
            role=session.role,
            is_admin=session.role == self._admin_role,
        )

    async def require_administrator(self, credentials: str | None) -> CallerContext:
        """Resolve the caller and require the administrator role."""
        caller = await self.authenticate(credentials)
        if not caller.is_admin:
            raise Forbidden("Administrator role required")
        return caller

    async def effective_permissions(self, role: str) -> list[Permission]:
        if role not in (self._admin_role, ADMIN_ROLE_NAME) and role in BUILTIN_GRANTS:
            return list(BUILTIN_GRANTS[role])

        async with self._uow_factory() as uow:
            stored = await uow.roles.find_by_name(role)
        stored_permissions = stored.permissions if stored else []

        if role == self._admin_role:
            return merge_permissions(full_grant(), stored_permissions)
        return list(stored_permissions)

    async def is_allowed(self, role: str, resource: str, action: str) -> bool:
        """True if role's effective permissions grant action on resource."""
        permissions = await self.effective_permissions(role)
        return any(p.resource == resource and p.allows(action) for p in permissions)
