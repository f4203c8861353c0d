from __future__ import annotations

from typing import Protocol

from skillmatch.config import settings
from skillmatch.schemas import Role


class Authenticator(Protocol):
    def verify(self, username: str, password: str) -> Role | None:
        """Return the role granted to the credentials, or None to reject them."""

    def register(self, username: str, password: str) -> Role:
        """Create an account and return the role it is granted."""


class PlaceholderAuthenticator:
    """Accepts any non-empty credentials without checking the password.

    The admin role goes to the configured admin username only; everyone else,
    including newly registered accounts, is an employee.
    """

    def __init__(self, *, admin_username: str | None = None):
        self.admin_username = admin_username if admin_username is not None else settings.admin_username

    def verify(self, username: str, password: str) -> Role | None:
        if not username or not password:
            return None
        return "admin" if username == self.admin_username else "employee"

    def register(self, username: str, password: str) -> Role:
        return "employee"
