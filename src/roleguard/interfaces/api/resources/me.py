"""Caller introspection API resource."""

import falcon.asgi

from roleguard.application.ports import AuthorizationGuard
from roleguard.domain.exceptions import ErrorCode, Unauthenticated
from roleguard.interfaces.api.resources.responses import permission_to_dict, set_error


class MeResource:
    """GET /v1/me and /v1/me/check - who the caller is and what they may do."""

    def __init__(self, guard: AuthorizationGuard) -> None:
        self._guard = guard

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Caller id, role, administrator flag and effective permissions."""
        try:
            caller = await self._guard.authenticate(req.context.credentials)
        except Unauthenticated as e:
            set_error(resp, e.code, str(e))
            return

        permissions = await self._guard.effective_permissions(caller.role)
        resp.media = {
            "user_id": caller.user_id,
            "role": caller.role,
            "is_admin": caller.is_admin,
            "permissions": [permission_to_dict(p) for p in permissions],
        }
        resp.status = falcon.HTTP_200

    async def on_get_check(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Whether the caller's role allows ?resource=&action=."""
        resource = req.get_param("resource")
        action = req.get_param("action")
        if not resource or not action:
            set_error(
                resp,
                ErrorCode.VALIDATION_FAILED,
                "Query parameters 'resource' and 'action' are required",
            )
            return

        try:
            caller = await self._guard.authenticate(req.context.credentials)
        except Unauthenticated as e:
            set_error(resp, e.code, str(e))
            return

        allowed = await self._guard.is_allowed(caller.role, resource, action)
        resp.media = {"resource": resource, "action": action, "allowed": allowed}
        resp.status = falcon.HTTP_200
