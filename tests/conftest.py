"""Pytest fixtures for Roleguard tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from roleguard.domain.entities import Role, RolePatch, Session
from roleguard.domain.exceptions import DuplicateName, NotFound
from roleguard.domain.value_objects import Permission
from roleguard.infrastructure.permission.authorization_guard import (
    RoleguardAuthorizationGuard,
)

ADMIN_TOKEN = "admin-token"
USER_TOKEN = "user-token"
EDITOR_TOKEN = "editor-token"


# --- Fake repositories ---


class FakeRoleRepository:
    """In-memory role repository. Enforces unique names like the real index."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Role] = {}
        self.writes = 0

    async def find_all(self) -> list[Role]:
        return sorted(self._by_id.values(), key=lambda r: r.name)

    async def find_by_id(self, role_id: UUID) -> Role | None:
        return self._by_id.get(role_id)

    async def find_by_name(self, name: str) -> Role | None:
        return next((r for r in self._by_id.values() if r.name == name), None)

    async def insert(self, role: Role) -> Role:
        if await self.find_by_name(role.name):
            raise DuplicateName("A role with this name already exists")
        self._by_id[role.id] = role
        self.writes += 1
        return role

    async def insert_if_absent(self, role: Role) -> bool:
        if await self.find_by_name(role.name):
            return False
        self._by_id[role.id] = role
        self.writes += 1
        return True

    async def update(self, role_id: UUID, patch: RolePatch) -> Role:
        role = self._by_id.get(role_id)
        if not role:
            raise NotFound("Role not found")
        other = await self.find_by_name(patch.name)
        if other and other.id != role_id:
            raise DuplicateName("Another role with this name already exists")
        updated = replace(
            role,
            name=patch.name,
            description=patch.description,
            permissions=list(patch.permissions),
            updated_at=patch.updated_at,
        )
        self._by_id[role_id] = updated
        self.writes += 1
        return updated

    async def delete(self, role_id: UUID) -> None:
        if role_id not in self._by_id:
            raise NotFound("Role not found")
        del self._by_id[role_id]
        self.writes += 1

    def add_role(self, role: Role) -> None:
        """Helper to add role for tests."""
        self._by_id[role.id] = role


class FakeUserDirectory:
    """In-memory user -> role name assignments."""

    def __init__(self) -> None:
        self._roles: dict[str, str] = {}

    async def get_role(self, user_id: str) -> str | None:
        return self._roles.get(user_id)

    async def exists_user_with_role(self, role_name: str) -> bool:
        return role_name in self._roles.values()

    def assign(self, user_id: str, role_name: str) -> None:
        """Helper to set a user's role for tests."""
        self._roles[user_id] = role_name


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.roles = FakeRoleRepository()
        self.users = FakeUserDirectory()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


class FakeSessionResolver:
    """Token -> Session table."""

    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}

    def add(self, token: str, user_id: str, role: str) -> None:
        self._sessions[token] = Session(user_id=user_id, role=role)

    async def resolve_session(self, credentials: str | None) -> Session | None:
        if not credentials:
            return None
        return self._sessions.get(credentials)


def make_role(
    name: str,
    permissions: list[Permission] | None = None,
    is_system: bool = False,
    description: str | None = None,
) -> Role:
    """Build a role with fresh id and timestamps."""
    now = datetime.now(UTC)
    return Role(
        id=uuid4(),
        name=name,
        description=description,
        is_system=is_system,
        permissions=permissions or [Permission("content", ("read",))],
        created_at=now,
        updated_at=now,
    )


def shared_uow_factory(uow: FakeUnitOfWork):
    """Factory yielding the same UoW on every call, so state survives across calls."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager over the test's FakeUnitOfWork."""
    return shared_uow_factory(fake_uow)


@pytest.fixture
def session_resolver() -> FakeSessionResolver:
    """Admin, user and editor sessions."""
    resolver = FakeSessionResolver()
    resolver.add(ADMIN_TOKEN, "admin-1", "admin")
    resolver.add(USER_TOKEN, "user-1", "user")
    resolver.add(EDITOR_TOKEN, "editor-1", "editor")
    return resolver


@pytest.fixture
def guard(session_resolver, uow_factory) -> RoleguardAuthorizationGuard:
    """Authorization guard over fake sessions and the test's UoW."""
    return RoleguardAuthorizationGuard(session_resolver, uow_factory)


@pytest.fixture
def mock_guard():
    """AsyncMock guard that lets every caller through as administrator."""
    from unittest.mock import AsyncMock

    from roleguard.domain.entities import CallerContext

    mock = AsyncMock()
    mock.require_administrator.return_value = CallerContext(
        user_id="admin-1", role="admin", is_admin=True
    )
    return mock


@pytest.fixture
def role_service(uow_factory, guard):
    """RoleService wired like the composition root."""
    from roleguard.main import build_role_service

    return build_role_service(uow_factory, guard)
