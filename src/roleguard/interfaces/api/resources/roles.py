"""Role management API resources."""

from typing import Any
from uuid import UUID

import falcon
import falcon.asgi

from roleguard.application.services.role_service import RoleService
from roleguard.interfaces.api.resources.responses import role_to_dict, set_failure


def _parse_role_id(role_id: str) -> UUID | None:
    try:
        return UUID(role_id)
    except ValueError:
        return None


async def _read_body(req: falcon.asgi.Request) -> dict[str, Any]:
    """JSON object body, or empty.

    Anything else reads as empty so that validation reports the missing fields
    after the access check.
    """
    try:
        body = await req.get_media(default_when_empty=None)
    except falcon.MediaMalformedError:
        return {}
    return body if isinstance(body, dict) else {}


class RolesResource:
    """GET/POST /v1/roles - list and create roles."""

    def __init__(self, role_service: RoleService) -> None:
        self._roles = role_service

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List roles by name; seeds built-in roles on a fresh store."""
        result = await self._roles.list_roles(req.context.credentials)
        if not result.success:
            set_failure(resp, result)
            return

        resp.media = {"items": [role_to_dict(r) for r in result.data]}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create custom role."""
        body = await _read_body(req)
        result = await self._roles.create_role(
            req.context.credentials,
            body.get("name"),
            body.get("description"),
            body.get("permissions"),
        )
        if not result.success:
            set_failure(resp, result)
            return

        resp.media = role_to_dict(result.data)
        resp.status = falcon.HTTP_201


class RoleResource:
    """GET/PUT/DELETE /v1/roles/{role_id}."""

    def __init__(self, role_service: RoleService) -> None:
        self._roles = role_service

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        """Get role by id."""
        result = await self._roles.get_role(req.context.credentials, _parse_role_id(role_id))
        if not result.success:
            set_failure(resp, result)
            return

        resp.media = role_to_dict(result.data)
        resp.status = falcon.HTTP_200

    async def on_put(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        """Replace a custom role's name, description and permissions."""
        body = await _read_body(req)
        result = await self._roles.update_role(
            req.context.credentials,
            _parse_role_id(role_id),
            body.get("name"),
            body.get("description"),
            body.get("permissions"),
        )
        if not result.success:
            set_failure(resp, result)
            return

        resp.media = role_to_dict(result.data)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str
    ) -> None:
        """Delete a custom role nobody is assigned to."""
        result = await self._roles.delete_role(req.context.credentials, _parse_role_id(role_id))
        if not result.success:
            set_failure(resp, result)
            return

        resp.status = falcon.HTTP_204
