"""Credentials — bcrypt password hashing and signed bearer tokens.

Invariants:
    - Passwords are stored only as bcrypt hashes
    - Tokens carry {sub, username, role, iat, exp}; sub is the user id as a string
    - Any decode failure becomes AuthenticationError (expired tokens get their own message)

Design Decisions:
    - PyJWT HS256 with a shared secret from settings: single-service deployment,
      no key distribution needed
    - Token claims are re-validated against the users table by the API dependency,
      so a deleted user's token stops working immediately
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from game_catalog.core.domain_types import Role
from game_catalog.core.errors import AuthenticationError


@dataclass(frozen=True)
class TokenClaims:
    """Verified token payload."""
    subject_id: int
    username: str
    role: str


def hash_password(plain: str, rounds: int = 12) -> str:
    return bcrypt.hashpw(
        plain.encode("utf-8"), bcrypt.gensalt(rounds=rounds),
    ).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # malformed stored hash
        return False


def issue_token(
    user_id: int,
    username: str,
    role: Role,
    secret: str,
    ttl_hours: int = 24,
    algorithm: str = "HS256",
    now: datetime | None = None,
) -> str:
    """Sign a token valid for ttl_hours from now."""
    issued_at = now or datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "username": username,
        "role": role.value,
        "iat": issued_at,
        "exp": issued_at + timedelta(hours=ttl_hours),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def decode_token(token: str, secret: str, algorithm: str = "HS256") -> TokenClaims:
    """Verify signature and expiry. Raises AuthenticationError on any failure."""
    try:
        payload = jwt.decode(
            token, secret, algorithms=[algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Expired authentication token")
    except jwt.InvalidTokenError:
        raise AuthenticationError("Invalid authentication token")

    try:
        subject_id = int(payload["sub"])
    except (TypeError, ValueError):
        raise AuthenticationError("Invalid authentication token")
    return TokenClaims(
        subject_id=subject_id,
        username=payload.get("username", ""),
        role=payload.get("role", ""),
    )
