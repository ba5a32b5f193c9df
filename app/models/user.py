from pydantic import BaseModel, Field
from typing import Any, Dict, Optional
import enum


class UserRole(str, enum.Enum):
    """User role enumeration."""
    ADMIN = "admin"


class AuthUser(BaseModel):
    """
    User as reported by the hosted auth service.
    The role lives in `user_metadata`, set when the admin is seeded.
    """
    id: str
    email: str
    user_metadata: Dict[str, Any] = Field(default_factory=dict)

    @property
    def role(self) -> Optional[str]:
        return self.user_metadata.get("role")

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value
