"""Unit tests for the Permission value object and role grants."""

from datetime import UTC, datetime
from uuid import uuid4

import pytest

from roleguard.domain.entities import Role
from roleguard.domain.value_objects import Permission, merge_permissions


def test_duplicate_actions_collapse_keeping_order() -> None:
    perm = Permission("content", ("read", "update", "read"))
    assert perm.actions == ("read", "update")


def test_permission_is_immutable() -> None:
    perm = Permission("content", ("read",))
    with pytest.raises(AttributeError):
        perm.resource = "user"  # type: ignore[misc]


def test_from_dict_accepts_list_actions() -> None:
    perm = Permission.from_dict({"resource": "project", "actions": ["read", "share"]})
    assert perm == Permission("project", ("read", "share"))
    assert perm.to_dict() == {"resource": "project", "actions": ["read", "share"]}


def test_merge_unions_actions_per_resource() -> None:
    merged = merge_permissions(
        [Permission("content", ("read",)), Permission("user", ("read",))],
        [Permission("content", ("read", "publish"))],
    )
    assert merged == [
        Permission("content", ("read", "publish")),
        Permission("user", ("read",)),
    ]


def test_merge_of_nothing_is_empty() -> None:
    assert merge_permissions() == []
    assert merge_permissions([], []) == []


def test_role_grants_checks_resource_and_action() -> None:
    now = datetime.now(UTC)
    role = Role(
        id=uuid4(),
        name="support",
        created_at=now,
        updated_at=now,
        permissions=[Permission("user", ("read",)), Permission("session", ("revoke",))],
    )
    assert role.grants("user", "read")
    assert role.grants("session", "revoke")
    assert not role.grants("user", "delete")
    assert not role.grants("content", "read")
