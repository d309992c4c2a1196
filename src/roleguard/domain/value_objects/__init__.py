"""Domain value objects."""

from roleguard.domain.value_objects.permission import Permission, merge_permissions

__all__ = [
    "Permission",
    "merge_permissions",
]
