"""
Mock Auth Adapter

In-memory users and opaque session tokens.
Stands in for the hosted auth service during development and tests.
"""
import copy
import hashlib
import hmac
import secrets
import uuid
from typing import Any, Dict, Optional

from app.adapters.auth_adapter_interface import (
    AuthAdapterInterface,
    AuthServiceError,
    AuthSession,
    InvalidCredentialsError,
)
from app.models.user import AuthUser


def _hash_password(password: str, salt: bytes) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, 100_000)


class AuthMockAdapter(AuthAdapterInterface):
    """Mock adapter for the auth service"""

    def __init__(self):
        self._users: Dict[str, Dict[str, Any]] = {}  # email -> record
        self._sessions: Dict[str, str] = {}  # token -> email

    async def sign_in(self, email: str, password: str) -> AuthSession:
        record = self._users.get(email.lower())
        if not record:
            raise InvalidCredentialsError()

        candidate = _hash_password(password, record["salt"])
        if not hmac.compare_digest(candidate, record["password_hash"]):
            raise InvalidCredentialsError()

        token = secrets.token_urlsafe(32)
        self._sessions[token] = record["user"].email.lower()
        return AuthSession(access_token=token, user=record["user"])

    async def get_user(self, access_token: str) -> Optional[AuthUser]:
        email = self._sessions.get(access_token)
        if email is None:
            return None
        return self._users[email]["user"]

    async def create_user(
        self,
        email: str,
        password: str,
        email_confirm: bool = True,
        user_metadata: Optional[Dict[str, Any]] = None
    ) -> AuthUser:
        key = email.lower()
        if key in self._users:
            raise AuthServiceError(
                "A user with this email address has already been registered",
                status_code=422
            )
        if not password:
            raise AuthServiceError("Password is required", status_code=422)

        user = AuthUser(
            id=str(uuid.uuid4()),
            email=email,
            user_metadata=copy.deepcopy(user_metadata or {})
        )
        salt = secrets.token_bytes(16)
        self._users[key] = {
            "user": user,
            "salt": salt,
            "password_hash": _hash_password(password, salt),
            "email_confirmed": email_confirm,
        }
        return user
