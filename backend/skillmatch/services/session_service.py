from __future__ import annotations

import logging

from skillmatch.schemas import PasswordResetNotice, User
from skillmatch.services.auth import Authenticator, PlaceholderAuthenticator

logger = logging.getLogger(__name__)

REGISTRATION_FAILED_MESSAGE = "Passwords do not match or a required field is empty."


class RegistrationError(ValueError):
    pass


class SessionContext:
    """Holds the current user; ``None`` means logged out."""

    def __init__(self, user: User | None = None):
        self.user = user

    @property
    def logged_in(self) -> bool:
        return self.user is not None

    @property
    def greeting(self) -> str | None:
        if self.user is None:
            return None
        return f"Welcome, {self.user.username}"


def can_edit(session: SessionContext | None) -> bool:
    return bool(session and session.user and session.user.role == "admin")


class SessionManager:
    def __init__(self, session: SessionContext | None = None, *, authenticator: Authenticator | None = None):
        self.session = session if session is not None else SessionContext()
        self.authenticator = authenticator if authenticator is not None else PlaceholderAuthenticator()

    def login(self, username: str, password: str) -> User | None:
        if not username or not password:
            return None

        role = self.authenticator.verify(username, password)
        if role is None:
            logger.info("Login rejected for %s", username)
            return None

        self.session.user = User(username=username, role=role)
        logger.info("Logged in %s as %s", username, role)
        return self.session.user

    def register(self, username: str, password: str, confirm_password: str) -> User:
        if not username or not password or password != confirm_password:
            raise RegistrationError(REGISTRATION_FAILED_MESSAGE)

        role = self.authenticator.register(username, password)
        self.session.user = User(username=username, role=role)
        logger.info("Registered %s as %s", username, role)
        return self.session.user

    def request_password_reset(self, email: str) -> PasswordResetNotice | None:
        if not email:
            return None

        # Nothing is sent; the notice is only shown to the user.
        logger.info("Password reset requested for %s", email)
        return PasswordResetNotice(
            email=email,
            message=f"A password reset link was sent to {email}.",
        )

    def logout(self) -> None:
        if self.session.user is not None:
            logger.info("Logged out %s", self.session.user.username)
        self.session.user = None
