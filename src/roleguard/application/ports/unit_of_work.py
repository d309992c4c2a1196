"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from roleguard.application.ports.repositories.role_repository import RoleRepository
from roleguard.application.ports.repositories.user_directory import UserDirectory


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def roles(self) -> RoleRepository: ...

    @property
    def users(self) -> UserDirectory: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
