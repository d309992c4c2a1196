"""Repository ports."""

from roleguard.application.ports.repositories.role_repository import RoleRepository
from roleguard.application.ports.repositories.user_directory import UserDirectory

__all__ = [
    "RoleRepository",
    "UserDirectory",
]
