"""
Auth Adapter Interface

Abstract interface for the hosted authentication service.
Admins sign in with email/password; tokens are resolved back to users
on every admin request.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field

from app.models.user import AuthUser


class AuthServiceError(Exception):
    """Exception raised when the auth service fails"""
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class InvalidCredentialsError(AuthServiceError):
    """Exception raised when email/password do not match"""
    def __init__(self, message: str = "Invalid login credentials"):
        super().__init__(message, status_code=400)


class AuthSession(BaseModel):
    """Result of a successful sign-in"""
    access_token: str = Field(..., description="Bearer token for admin requests")
    token_type: str = Field("bearer", description="Token type")
    user: AuthUser

    class Config:
        json_schema_extra = {
            "example": {
                "access_token": "eyJhbGciOi...",
                "token_type": "bearer",
                "user": {
                    "id": "8d0f5c1e-...",
                    "email": "admin@optimrental.ch",
                    "user_metadata": {"role": "admin"}
                }
            }
        }


class AuthAdapterInterface(ABC):
    """Abstract interface for auth adapters"""

    @abstractmethod
    async def sign_in(self, email: str, password: str) -> AuthSession:
        """
        Sign in with email and password.

        Raises:
            InvalidCredentialsError: If the credentials are rejected
            AuthServiceError: If the service fails
        """
        pass

    @abstractmethod
    async def get_user(self, access_token: str) -> Optional[AuthUser]:
        """Resolve an access token to its user, or None if the token is not valid."""
        pass

    @abstractmethod
    async def create_user(
        self,
        email: str,
        password: str,
        email_confirm: bool = True,
        user_metadata: Optional[Dict[str, Any]] = None
    ) -> AuthUser:
        """
        Create a user with the service-level credential.

        Raises:
            AuthServiceError: If the user cannot be created
        """
        pass
