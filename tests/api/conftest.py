"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from roleguard.interfaces.api.app import create_app
from roleguard.interfaces.api.middleware.cors import CORSMiddleware
from roleguard.interfaces.api.resources.health import HealthResource
from roleguard.interfaces.api.resources.me import MeResource
from roleguard.interfaces.api.resources.permissions import PermissionCatalogResource
from roleguard.interfaces.api.resources.roles import RoleResource, RolesResource


@pytest.fixture
def app(role_service, guard):
    """Falcon ASGI app with API resources over in-memory storage."""
    return create_app(
        roles_resource=RolesResource(role_service),
        role_resource=RoleResource(role_service),
        catalog_resource=PermissionCatalogResource(guard),
        me_resource=MeResource(guard),
        health_resource=HealthResource(),
        middleware=[CORSMiddleware(["http://localhost:3000"])],
    )


@pytest.fixture
def client(app) -> TestClient:
    """Test client for API."""
    return TestClient(app)
