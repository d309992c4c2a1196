"""Roleguard - role-based access control core for the admin console."""

__version__ = "0.1.0"
