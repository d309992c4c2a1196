"""Application entry point and composition root."""

import argparse
import logging

from roleguard import __version__
from roleguard.application.services.role_service import RoleService
from roleguard.application.use_cases.role.create_role import CreateRoleUseCase
from roleguard.application.use_cases.role.delete_role import DeleteRoleUseCase
from roleguard.application.use_cases.role.get_role import GetRoleUseCase
from roleguard.application.use_cases.role.list_roles import ListRolesUseCase
from roleguard.application.use_cases.role.seed_default_roles import SeedDefaultRolesUseCase
from roleguard.application.use_cases.role.update_role import UpdateRoleUseCase
from roleguard.config import Settings, get_settings
from roleguard.infrastructure.auth.keycloak_provider import KeycloakProvider
from roleguard.infrastructure.auth.session_resolver import KeycloakSessionResolver
from roleguard.infrastructure.permission.authorization_guard import RoleguardAuthorizationGuard
from roleguard.infrastructure.persistence.postgres.connection import create_pool
from roleguard.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from roleguard.interfaces.api.app import create_app
from roleguard.interfaces.api.middleware.cors import CORSMiddleware
from roleguard.interfaces.api.middleware.lifespan import LifespanMiddleware
from roleguard.interfaces.api.resources.health import HealthResource
from roleguard.interfaces.api.resources.me import MeResource
from roleguard.interfaces.api.resources.permissions import PermissionCatalogResource
from roleguard.interfaces.api.resources.roles import RoleResource, RolesResource

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def build_role_service(
    uow_factory,
    guard: RoleguardAuthorizationGuard,
    admin_role: str = "admin",
) -> RoleService:
    """Wire the role use cases behind the service boundary."""
    seed = SeedDefaultRolesUseCase(unit_of_work_factory=uow_factory, admin_role=admin_role)
    return RoleService(
        list_roles=ListRolesUseCase(
            unit_of_work_factory=uow_factory,
            guard=guard,
            seed_default_roles=seed,
        ),
        get_role=GetRoleUseCase(
            unit_of_work_factory=uow_factory,
            guard=guard,
            seed_default_roles=seed,
        ),
        create_role=CreateRoleUseCase(
            unit_of_work_factory=uow_factory,
            guard=guard,
            seed_default_roles=seed,
        ),
        update_role=UpdateRoleUseCase(
            unit_of_work_factory=uow_factory,
            guard=guard,
            seed_default_roles=seed,
        ),
        delete_role=DeleteRoleUseCase(
            unit_of_work_factory=uow_factory,
            guard=guard,
            seed_default_roles=seed,
        ),
        seed_default_roles=seed,
    )


def build_guard(settings: Settings, uow_factory) -> RoleguardAuthorizationGuard:
    """Session lookup via Keycloak; without a client secret nobody authenticates."""
    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    session_resolver = KeycloakSessionResolver(
        keycloak,
        uow_factory,
        default_role=settings.default_user_role,
    )
    return RoleguardAuthorizationGuard(
        session_resolver,
        uow_factory,
        admin_role=settings.admin_role,
        admin_user_ids=settings.admin_user_id_set,
    )


def create_roleguard_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings.log_level)

    pool = create_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)
    guard = build_guard(settings, uow_factory)
    role_service = build_role_service(uow_factory, guard, admin_role=settings.admin_role)

    return create_app(
        roles_resource=RolesResource(role_service),
        role_resource=RoleResource(role_service),
        catalog_resource=PermissionCatalogResource(guard),
        me_resource=MeResource(guard),
        health_resource=HealthResource(pool),
        middleware=[
            CORSMiddleware(settings.cors_origin_list),
            LifespanMiddleware(
                pool,
                startup_hooks=[role_service.seed_default_roles] if settings.seed_roles_on_startup else [],
            ),
        ],
    )


def main() -> None:
    """CLI entry point - serve the API with uvicorn."""
    parser = argparse.ArgumentParser(description=f"Roleguard v{__version__}")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    import uvicorn

    uvicorn.run(
        "roleguard.main:create_roleguard_app",
        host=args.host,
        port=args.port,
        factory=True,
    )
