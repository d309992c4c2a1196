"""Permission catalog - the fixed universe of resources and their actions."""

from typing import Final

from roleguard.domain.value_objects import Permission

RESOURCE_ACTIONS: Final[dict[str, tuple[str, ...]]] = {
    "user": ("create", "read", "update", "delete", "ban", "impersonate"),
    "session": ("read", "revoke"),
    "project": ("create", "read", "update", "delete", "share"),
    "content": ("create", "read", "update", "delete", "publish"),
    "settings": ("read", "update"),
    "role": ("create", "read", "update", "delete"),
}


def list_resources() -> tuple[str, ...]:
    """Resource names in catalog order."""
    return tuple(RESOURCE_ACTIONS)


def list_actions(resource: str) -> frozenset[str]:
    """Actions valid for resource; empty for an unknown resource."""
    return frozenset(RESOURCE_ACTIONS.get(resource, ()))


def is_known_resource(resource: str) -> bool:
    return resource in RESOURCE_ACTIONS


def full_grant() -> list[Permission]:
    """Every action on every resource."""
    return [Permission(resource=r, actions=a) for r, a in RESOURCE_ACTIONS.items()]
