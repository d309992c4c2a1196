"""Permission catalog API resource."""

import falcon.asgi

from roleguard.application.ports import AuthorizationGuard
from roleguard.domain import catalog
from roleguard.domain.exceptions import Unauthenticated
from roleguard.interfaces.api.resources.responses import set_error


class PermissionCatalogResource:
    """GET /v1/permissions/catalog - resources and the actions valid for each."""

    def __init__(self, guard: AuthorizationGuard) -> None:
        self._guard = guard

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List catalog resources in order with their actions."""
        try:
            await self._guard.authenticate(req.context.credentials)
        except Unauthenticated as e:
            set_error(resp, e.code, str(e))
            return

        resp.media = {
            "items": [
                {
                    "resource": resource,
                    "actions": list(catalog.RESOURCE_ACTIONS[resource]),
                }
                for resource in catalog.list_resources()
            ]
        }
        resp.status = falcon.HTTP_200
