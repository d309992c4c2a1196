"""Application ports - interfaces for external adapters."""

from roleguard.application.ports.authorization_guard import AuthorizationGuard
from roleguard.application.ports.session_resolver import SessionResolver
from roleguard.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "AuthorizationGuard",
    "SessionResolver",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
