"""Permission value object - a grant of actions on one resource."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Permission:
    """Grant of an action set on a resource.

    Actions keep their first-seen order so that stored and returned
    permissions compare equal to the input that created them.
    """

    resource: str
    actions: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "actions", tuple(dict.fromkeys(self.actions)))

    def allows(self, action: str) -> bool:
        return action in self.actions

    def to_dict(self) -> dict[str, Any]:
        return {"resource": self.resource, "actions": list(self.actions)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Permission":
        return cls(resource=data["resource"], actions=tuple(data["actions"]))


def merge_permissions(*groups: list[Permission]) -> list[Permission]:
    """Union permission lists, one entry per resource, order of first appearance."""
    merged: dict[str, list[str]] = {}
    for group in groups:
        for perm in group:
            actions = merged.setdefault(perm.resource, [])
            actions.extend(a for a in perm.actions if a not in actions)
    return [Permission(resource=r, actions=tuple(a)) for r, a in merged.items()]
