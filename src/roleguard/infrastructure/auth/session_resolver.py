"""Session resolver - Keycloak token introspection plus the user directory."""

import asyncio

from roleguard.domain.entities import Session
from roleguard.infrastructure.auth.keycloak_provider import KeycloakProvider


class KeycloakSessionResolver:
    """Maps a bearer token to the user's id and assigned role name."""

    def __init__(
        self,
        keycloak_provider: KeycloakProvider | None,
        unit_of_work_factory: type,
        default_role: str = "user",
    ) -> None:
        self._keycloak = keycloak_provider
        self._uow_factory = unit_of_work_factory
        self._default_role = default_role

    async def resolve_session(self, credentials: str | None) -> Session | None:
        if not credentials or self._keycloak is None:
            return None

        # Introspection is a blocking HTTP call.
        user = await asyncio.to_thread(self._keycloak.decode_token, credentials)
        if user is None or not user.user_id:
            return None

        async with self._uow_factory() as uow:
            role = await uow.users.get_role(user.user_id)
        return Session(user_id=user.user_id, role=role or self._default_role)
