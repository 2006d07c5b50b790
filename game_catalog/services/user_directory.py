"""User Directory — registration, login, and bearer-token actor resolution.

Invariants:
    - New users get the Player role
    - Duplicate username/email → ConflictError naming the field
    - Login failures never reveal whether the username exists
    - resolve_actor re-reads the user row: a token for a deleted user is rejected,
      and the role comes from the database rather than the token
    - An unknown role name on a user row is an authentication failure, never a default

Design Decisions:
    - bcrypt runs in a worker thread (asyncio.to_thread): hashing is CPU-bound
      and would otherwise stall the event loop
"""

import asyncio
import logging

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from game_catalog.config import Settings
from game_catalog.core.access_policy import Actor
from game_catalog.core.domain_types import Role, UserId
from game_catalog.core.errors import (
    AuthenticationError, ConflictError, ResourceNotFoundError,
)
from game_catalog.infrastructure.security import (
    decode_token, hash_password, issue_token, verify_password,
)
from game_catalog.models.role import RoleModel
from game_catalog.models.user import User

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


class UserDirectory:
    """Accounts and credentials."""

    def __init__(self, db: AsyncSession, settings: Settings):
        self.db = db
        self.settings = settings

    async def get(self, user_id: int) -> User | None:
        return await self.db.get(User, user_id)

    async def register(self, username: str, email: str, password: str) -> User:
        result = await self.db.execute(
            select(User).where(or_(User.username == username, User.email == email)),
        )
        existing = result.scalars().first()
        if existing is not None:
            if existing.username == username:
                raise ConflictError("Username already taken", "username")
            raise ConflictError("Email already registered", "email")

        role = await self.db.scalar(
            select(RoleModel).where(RoleModel.name == Role.PLAYER.value),
        )
        if role is None:
            raise ResourceNotFoundError("Role", Role.PLAYER.value)

        password_hash = await asyncio.to_thread(
            hash_password, password, self.settings.bcrypt_rounds,
        )
        user = User(
            username=username, email=email,
            password_hash=password_hash, role_id=role.id,
        )
        user.role = role
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise ConflictError("Username or email already registered", "username")
        logger.info(f"User '{username}' registered", extra={"user_id": user.id})
        return user

    async def authenticate(self, username: str, password: str) -> User:
        user = await self.db.scalar(select(User).where(User.username == username))
        if user is None:
            raise AuthenticationError(INVALID_CREDENTIALS)
        valid = await asyncio.to_thread(verify_password, password, user.password_hash)
        if not valid:
            logger.warning(
                f"Failed login for '{username}'", extra={"user_id": user.id},
            )
            raise AuthenticationError(INVALID_CREDENTIALS)
        return user

    def issue_token_for(self, user: User) -> str:
        return issue_token(
            user.id,
            user.username,
            Role.from_name(user.role.name),
            secret=self.settings.jwt_secret,
            ttl_hours=self.settings.token_ttl_hours,
            algorithm=self.settings.jwt_algorithm,
        )

    async def resolve_actor(self, token: str) -> Actor:
        """Verify the token and build the Actor from the current user row."""
        claims = decode_token(
            token, self.settings.jwt_secret, self.settings.jwt_algorithm,
        )
        user = await self.get(claims.subject_id)
        if user is None:
            raise AuthenticationError("Invalid authentication token")
        try:
            role = Role.from_name(user.role.name)
        except ValueError:
            logger.error(
                f"User {user.id} has unknown role '{user.role.name}'",
                extra={"user_id": user.id},
            )
            raise AuthenticationError("Invalid authentication token")
        return Actor(id=UserId(user.id), username=user.username, role=role)
