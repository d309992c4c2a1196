"""Caller identity resolved from request credentials."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Session:
    """Result of a session lookup - who the caller is and their role name."""

    user_id: str
    role: str


@dataclass(frozen=True)
class CallerContext:
    """Authenticated caller that passed the administrator gate."""

    user_id: str
    role: str
    is_admin: bool
