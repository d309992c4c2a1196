"""PostgreSQL user directory - reads role assignments from app_user."""

from psycopg import AsyncConnection


class PostgresUserDirectory:
    """User directory implementation. Users reference roles by name."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_role(self, user_id: str) -> str | None:
        """Get the role name assigned to user."""
        cur = await self._conn.execute(
            "SELECT role FROM app_user WHERE id = %s",
            (user_id,),
        )
        r = await cur.fetchone()
        return r[0] if r else None

    async def exists_user_with_role(self, role_name: str) -> bool:
        """True if any user is assigned role_name."""
        cur = await self._conn.execute(
            "SELECT EXISTS (SELECT 1 FROM app_user WHERE role = %s)",
            (role_name,),
        )
        r = await cur.fetchone()
        return bool(r and r[0])
