"""PostgreSQL role repository implementation."""

from typing import Any
from uuid import UUID

from psycopg import AsyncConnection
from psycopg.errors import UniqueViolation
from psycopg.types.json import Jsonb

from roleguard.domain.entities import Role, RolePatch
from roleguard.domain.exceptions import DuplicateName, NotFound
from roleguard.domain.value_objects import Permission

_COLUMNS = "id, name, description, is_system, permissions, created_at, updated_at"


def _to_role(r: tuple[Any, ...]) -> Role:
    return Role(
        id=r[0],
        name=r[1],
        description=r[2],
        is_system=r[3],
        permissions=[Permission.from_dict(p) for p in r[4]],
        created_at=r[5],
        updated_at=r[6],
    )


def _permissions_json(permissions: list[Permission]) -> Jsonb:
    return Jsonb([p.to_dict() for p in permissions])


class PostgresRoleRepository:
    """Role repository implementation. Uniqueness of name is enforced by ix_role_name."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def find_all(self) -> list[Role]:
        """List all roles ordered by name."""
        cur = await self._conn.execute(f"SELECT {_COLUMNS} FROM role ORDER BY name")
        rows = await cur.fetchall()
        return [_to_role(r) for r in rows]

    async def find_by_id(self, role_id: UUID) -> Role | None:
        """Get role by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM role WHERE id = %s",
            (role_id,),
        )
        r = await cur.fetchone()
        return _to_role(r) if r else None

    async def find_by_name(self, name: str) -> Role | None:
        """Get role by name."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM role WHERE name = %s",
            (name,),
        )
        r = await cur.fetchone()
        return _to_role(r) if r else None

    async def insert(self, role: Role) -> Role:
        """Insert role; DuplicateName if the name is taken."""
        try:
            await self._conn.execute(
                f"INSERT INTO role ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s)",
                (
                    role.id,
                    role.name,
                    role.description,
                    role.is_system,
                    _permissions_json(role.permissions),
                    role.created_at,
                    role.updated_at,
                ),
            )
        except UniqueViolation as e:
            raise DuplicateName("A role with this name already exists") from e
        return role

    async def insert_if_absent(self, role: Role) -> bool:
        """Insert role unless the name exists. True if a row was written."""
        cur = await self._conn.execute(
            f"INSERT INTO role ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s) "
            "ON CONFLICT (name) DO NOTHING",
            (
                role.id,
                role.name,
                role.description,
                role.is_system,
                _permissions_json(role.permissions),
                role.created_at,
                role.updated_at,
            ),
        )
        return cur.rowcount == 1

    async def update(self, role_id: UUID, patch: RolePatch) -> Role:
        """Apply patch; NotFound if absent, DuplicateName on name collision."""
        try:
            cur = await self._conn.execute(
                "UPDATE role SET name = %s, description = %s, permissions = %s, updated_at = %s "
                f"WHERE id = %s RETURNING {_COLUMNS}",
                (
                    patch.name,
                    patch.description,
                    _permissions_json(patch.permissions),
                    patch.updated_at,
                    role_id,
                ),
            )
        except UniqueViolation as e:
            raise DuplicateName("Another role with this name already exists") from e
        r = await cur.fetchone()
        if not r:
            raise NotFound("Role not found")
        return _to_role(r)

    async def delete(self, role_id: UUID) -> None:
        """Delete role; NotFound if absent."""
        cur = await self._conn.execute(
            "DELETE FROM role WHERE id = %s",
            (role_id,),
        )
        if cur.rowcount == 0:
            raise NotFound("Role not found")
