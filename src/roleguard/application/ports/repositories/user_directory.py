"""User directory port - read-only view of user role assignments."""

from typing import Protocol


class UserDirectory(Protocol):
    """Port for looking up which role name users carry."""

    async def get_role(self, user_id: str) -> str | None: ...

    async def exists_user_with_role(self, role_name: str) -> bool: ...
