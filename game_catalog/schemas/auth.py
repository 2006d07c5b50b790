"""Auth Schemas — registration, login, and profile payloads.

Invariants:
    - username: 3-50 chars of letters, digits, underscore
    - email validated by email-validator
    - Passwords never appear in any response schema
"""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from game_catalog.core.domain_types import Role


class RegisterRequest(BaseModel):
    username: str = Field(min_length=3, max_length=50, pattern=r"^[A-Za-z0-9_]+$")
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)


class LoginRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserRead(BaseModel):
    """Public profile."""
    id: int
    username: str
    email: str
    role: Role
    created_at: datetime

    @classmethod
    def from_user(cls, user) -> "UserRead":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            role=Role.from_name(user.role.name),
            created_at=user.created_at,
        )


class AuthResponse(BaseModel):
    message: str
    user: UserRead
    token: str
