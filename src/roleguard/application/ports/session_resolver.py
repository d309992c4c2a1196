"""Session lookup port."""

from typing import Protocol

from roleguard.domain.entities import Session


class SessionResolver(Protocol):
    """Resolves request credentials to the caller's user id and role."""

    async def resolve_session(self, credentials: str | None) -> Session | None: ...
