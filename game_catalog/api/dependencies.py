"""API Dependencies — bearer authentication, admin gate, services, and paging.

Invariants:
    - Missing or malformed bearer credentials → AuthenticationError (401), never 403
    - require_admin runs the same access policy the services use (core/access_policy.py)
    - Paging query params are normalized by PageRequest.from_query, never rejected

Design Decisions:
    - HTTPBearer(auto_error=False): the missing-token case goes through the
      CatalogError handler so every 401 has the same JSON shape
"""

from fastapi import Depends, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from game_catalog.config import Settings, get_settings
from game_catalog.core.access_policy import Actor, ensure_admin
from game_catalog.core.errors import AuthenticationError
from game_catalog.core.pagination import PageRequest
from game_catalog.infrastructure.database import get_db
from game_catalog.services.catalog_service import CatalogService
from game_catalog.services.user_directory import UserDirectory

bearer = HTTPBearer(auto_error=False)


def get_catalog_service(db: AsyncSession = Depends(get_db)) -> CatalogService:
    return CatalogService(db)


def get_user_directory(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> UserDirectory:
    return UserDirectory(db, settings)


async def get_current_actor(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
    users: UserDirectory = Depends(get_user_directory),
) -> Actor:
    """Resolve the bearer token to the calling Actor."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError()
    return await users.resolve_actor(credentials.credentials)


async def require_admin(actor: Actor = Depends(get_current_actor)) -> Actor:
    ensure_admin(actor)
    return actor


def get_page_request(
    page: int | None = Query(None, description="1-indexed page number"),
    size: int | None = Query(None, description="Items per page (max 100)"),
    settings: Settings = Depends(get_settings),
) -> PageRequest:
    return PageRequest.from_query(
        page, size,
        default_size=settings.default_page_size,
        max_size=settings.max_page_size,
    )
