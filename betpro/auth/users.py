"""Local user list for the login screen."""

import hashlib
import hmac
import secrets
from typing import Optional

from pydantic import BaseModel

from betpro.db.database import USERS_KEY, Database
from betpro.errors import LedgerValidationError


class User(BaseModel):
    """Signed-in user."""
    email: str
    name: str


def hash_password(password: str, salt: Optional[str] = None) -> str:
    """Salted SHA-256 digest stored as "salt$hex"."""
    salt = salt or secrets.token_hex(8)
    digest = hashlib.sha256(f"{salt}:{password}".encode("utf-8")).hexdigest()
    return f"{salt}${digest}"


def verify_password(password: str, stored: str) -> bool:
    salt, _, _ = stored.partition("$")
    return hmac.compare_digest(hash_password(password, salt), stored)


class UserRegistry:
    """Users kept in the local key-value store."""

    def __init__(self, storage: Database):
        self._storage = storage

    def _load(self) -> list[dict]:
        users = self._storage.get_json(USERS_KEY, default=[])
        if not isinstance(users, list):
            return []
        return [u for u in users if isinstance(u, dict) and "email" in u]

    def register(self, email: str, name: str, password: str) -> User:
        """Create a user.

        Raises:
            LedgerValidationError: on empty fields or an email already in use.
        """
        email = (email or "").strip().lower()
        name = (name or "").strip()
        if not email or not name or not password:
            raise LedgerValidationError("Name, email and password are required")

        users = self._load()
        if any(u["email"] == email for u in users):
            raise LedgerValidationError("Email already registered")

        users.append({
            "email": email,
            "name": name,
            "password_hash": hash_password(password),
        })
        self._storage.set_json(USERS_KEY, users)
        return User(email=email, name=name)

    def login(self, email: str, password: str) -> Optional[User]:
        """Return the user when the credentials match."""
        email = (email or "").strip().lower()
        for user in self._load():
            if user["email"] == email and verify_password(password or "", user.get("password_hash", "")):
                return User(email=user["email"], name=user.get("name", ""))
        return None
