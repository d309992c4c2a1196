"""Unit tests for RoleService result mapping."""

import logging
from contextlib import asynccontextmanager
from uuid import uuid4

import psycopg
import pytest

from roleguard.domain.exceptions import ErrorCode, StorageFailure
from roleguard.infrastructure.permission.authorization_guard import (
    RoleguardAuthorizationGuard,
)
from roleguard.main import build_role_service

from tests.conftest import ADMIN_TOKEN, USER_TOKEN, make_role

READ_CONTENT = [{"resource": "content", "actions": ["read"]}]


@pytest.mark.asyncio
async def test_list_roles_ok(role_service) -> None:
    result = await role_service.list_roles(ADMIN_TOKEN)
    assert result.success is True
    assert result.error is None
    assert len(result.data) == 4


@pytest.mark.asyncio
async def test_unauthenticated_result(role_service) -> None:
    result = await role_service.list_roles(None)
    assert result.success is False
    assert result.error == ErrorCode.UNAUTHENTICATED
    assert result.message == "Not authenticated"
    assert result.is_access_denied


@pytest.mark.asyncio
async def test_forbidden_mutations_leave_store_unchanged(role_service, fake_uow) -> None:
    role = make_role("support")
    fake_uow.roles.add_role(role)

    results = [
        await role_service.create_role(USER_TOKEN, "helpdesk", None, READ_CONTENT),
        await role_service.update_role(USER_TOKEN, role.id, "helpdesk", None, READ_CONTENT),
        await role_service.delete_role(USER_TOKEN, role.id),
    ]
    assert all(r.error == ErrorCode.FORBIDDEN for r in results)
    assert all(r.message == "Administrator role required" for r in results)
    assert fake_uow.roles.writes == 0
    assert await fake_uow.roles.find_all() == [role]


@pytest.mark.asyncio
async def test_validation_failure_carries_field_errors(role_service) -> None:
    result = await role_service.create_role(ADMIN_TOKEN, "a", None, READ_CONTENT)
    assert result.error == ErrorCode.VALIDATION_FAILED
    assert result.message == "Validation failed"
    assert result.field_errors == {"name": ["Role name must be at least 2 characters"]}
    assert not result.is_access_denied


@pytest.mark.asyncio
async def test_domain_failures_keep_their_message(role_service, fake_uow) -> None:
    system = make_role("editor", is_system=True)
    fake_uow.roles.add_role(system)

    result = await role_service.delete_role(ADMIN_TOKEN, system.id)
    assert result.error == ErrorCode.SYSTEM_ROLE_IMMUTABLE
    assert result.message == "System roles cannot be deleted"

    result = await role_service.get_role(ADMIN_TOKEN, uuid4())
    assert result.error == ErrorCode.NOT_FOUND
    assert result.message == "Role not found"


@pytest.mark.asyncio
async def test_create_then_get_round_trip(role_service) -> None:
    created = await role_service.create_role(
        ADMIN_TOKEN, "support", "Tickets", [{"resource": "user", "actions": ["read", "ban"]}]
    )
    assert created.success

    fetched = await role_service.get_role(ADMIN_TOKEN, created.data.id)
    assert fetched.data == created.data


@pytest.mark.asyncio
async def test_seed_default_roles_is_not_gated(role_service) -> None:
    result = await role_service.seed_default_roles()
    assert result.success
    assert result.data == 4


@pytest.mark.asyncio
async def test_storage_failure_logged_and_generic(session_resolver, caplog) -> None:
    """Storage errors are logged with detail and returned without it."""

    class BrokenRepository:
        async def find_by_name(self, name):
            raise StorageFailure("connection refused on 10.0.0.5")

    class BrokenUnitOfWork:
        roles = BrokenRepository()

    @asynccontextmanager
    async def factory():
        yield BrokenUnitOfWork()

    service = build_role_service(factory, RoleguardAuthorizationGuard(session_resolver, factory))

    with caplog.at_level(logging.ERROR):
        result = await service.create_role(ADMIN_TOKEN, "support", None, READ_CONTENT)

    assert result.error == ErrorCode.STORAGE_FAILURE
    assert result.message == "Failed to create role"
    assert "10.0.0.5" not in result.message
    assert "Storage failure while trying to create role" in caplog.text


@pytest.mark.asyncio
async def test_psycopg_error_becomes_storage_failure(session_resolver) -> None:
    """The Postgres UoW factory wraps driver errors."""
    from roleguard.infrastructure.persistence.postgres.unit_of_work import create_uow_factory

    class FailingPool:
        def connection(self):
            @asynccontextmanager
            async def _conn():
                raise psycopg.OperationalError("server closed the connection")
                yield

            return _conn()

    factory = create_uow_factory(FailingPool())
    service = build_role_service(factory, RoleguardAuthorizationGuard(session_resolver, factory))

    result = await service.list_roles(ADMIN_TOKEN)
    assert result.error == ErrorCode.STORAGE_FAILURE
    assert result.message == "Failed to fetch roles"


@pytest.mark.asyncio
async def test_create_with_builtin_name_before_listing(role_service) -> None:
    """The built-in roles stay system roles even if creation comes first."""
    result = await role_service.create_role(ADMIN_TOKEN, "admin", None, READ_CONTENT)
    assert result.error == ErrorCode.DUPLICATE_NAME

    listed = await role_service.list_roles(ADMIN_TOKEN)
    assert {(r.name, r.is_system) for r in listed.data} == {
        ("admin", True),
        ("editor", True),
        ("moderator", True),
        ("user", True),
    }


@pytest.mark.asyncio
async def test_overlong_name_is_a_field_error(role_service, fake_uow) -> None:
    result = await role_service.create_role(ADMIN_TOKEN, "r" * 101, None, READ_CONTENT)
    assert result.error == ErrorCode.VALIDATION_FAILED
    assert result.field_errors == {"name": ["Role name must be at most 100 characters"]}
    assert all(r.is_system for r in await fake_uow.roles.find_all())
