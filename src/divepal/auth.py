"""Pluggable authentication. The app only talks to the AuthProvider protocol."""

import hashlib
import logging
import re
import secrets
import uuid
from dataclasses import dataclass
from typing import Protocol

from divepal.models import User

logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class AuthError(Exception):
    """Sign-in or sign-up rejected."""


class AuthProvider(Protocol):
    def sign_in(self, email: str, password: str) -> User: ...

    def sign_up(self, name: str, email: str, password: str) -> User: ...


@dataclass(frozen=True)
class _Account:
    user: User
    salt: str
    digest: str


def _digest(salt: str, password: str) -> str:
    return hashlib.sha256(f"{salt}:{password}".encode("utf-8")).hexdigest()


def _normalize_email(email: str) -> str:
    email = email.strip().lower()
    if not _EMAIL_RE.match(email):
        raise AuthError("Please enter a valid email address")
    return email


class InMemoryAuthProvider:
    """Process-local account store. Accounts vanish when the process exits."""

    def __init__(self) -> None:
        self._accounts: dict[str, _Account] = {}

    def sign_up(self, name: str, email: str, password: str) -> User:
        if not name.strip() or not password:
            raise AuthError("Name, email and password are required")
        email = _normalize_email(email)
        if email in self._accounts:
            raise AuthError("An account with this email already exists")

        user = User(id=uuid.uuid4().hex, name=name.strip(), email=email)
        salt = secrets.token_hex(8)
        self._accounts[email] = _Account(user=user, salt=salt, digest=_digest(salt, password))
        logger.info("Registered user %s", user.id)
        return user

    def sign_in(self, email: str, password: str) -> User:
        if not email.strip() or not password:
            raise AuthError("Email and password are required")
        account = self._accounts.get(_normalize_email(email))
        if account is None or not secrets.compare_digest(
            account.digest, _digest(account.salt, password)
        ):
            raise AuthError("Invalid email or password")
        logger.info("User %s signed in", account.user.id)
        return account.user
