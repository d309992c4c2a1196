"""Falcon ASGI application."""

import logging
from collections.abc import Sequence

import falcon
import falcon.asgi
from falcon.asgi import App

from roleguard.interfaces.api.middleware.auth import AuthMiddleware
from roleguard.interfaces.api.resources.health import HealthResource
from roleguard.interfaces.api.resources.me import MeResource
from roleguard.interfaces.api.resources.permissions import PermissionCatalogResource
from roleguard.interfaces.api.resources.roles import RoleResource, RolesResource

logger = logging.getLogger(__name__)


async def handle_unexpected_error(req, resp, ex, params) -> None:
    """Log unhandled exceptions and answer with a bare 500."""
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    roles_resource: RolesResource,
    role_resource: RoleResource,
    catalog_resource: PermissionCatalogResource,
    me_resource: MeResource,
    health_resource: HealthResource,
    middleware: Sequence[object] = (),
) -> App:
    """Create Falcon ASGI app with routes.

    AuthMiddleware is always installed last so that req.context.credentials
    is set for every resource.
    """
    app = falcon.asgi.App(middleware=[*middleware, AuthMiddleware()])
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/roles", roles_resource)
    app.add_route("/v1/roles/{role_id}", role_resource)
    app.add_route("/v1/permissions/catalog", catalog_resource)
    app.add_route("/v1/me", me_resource)
    app.add_route("/v1/me/check", me_resource, suffix="check")
    return app
