"""Category Routes — tree reads for everyone, mutations for Admins.

Invariants:
    - GET /categories: flat list, or roots with two expanded levels when rootOnly=true
    - GET /categories/{id}: the category with its subcategories expanded
    - POST/PUT/DELETE require the Admin role (require_admin)
    - DELETE answers 204; children become roots and items become uncategorized
"""

from fastapi import APIRouter, Depends, Query, Response, status

from game_catalog.api.dependencies import (
    get_catalog_service, get_page_request, require_admin,
)
from game_catalog.core.access_policy import Actor
from game_catalog.core.pagination import PageRequest
from game_catalog.schemas.category import (
    CategoryCreate, CategoryNodeRead, CategoryRead, CategoryUpdate,
)
from game_catalog.schemas.item import ItemRead
from game_catalog.schemas.pagination import Page
from game_catalog.services.catalog_service import CatalogService

router = APIRouter(prefix="/api/v1/categories", tags=["categories"])


@router.get("", response_model=list[CategoryNodeRead])
async def list_categories(
    root_only: bool = Query(False, alias="rootOnly"),
    service: CatalogService = Depends(get_catalog_service),
):
    return await service.list_categories(root_only)


@router.get("/{category_id}", response_model=CategoryNodeRead)
async def get_category(
    category_id: int,
    service: CatalogService = Depends(get_catalog_service),
):
    return await service.get_category(category_id)


@router.get("/{category_id}/items", response_model=Page[ItemRead])
async def list_category_items(
    category_id: int,
    page: PageRequest = Depends(get_page_request),
    service: CatalogService = Depends(get_catalog_service),
):
    """Items directly in this category (subcategories not included)."""
    return await service.list_category_items(category_id, page)


@router.post(
    "", response_model=CategoryRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_category(
    body: CategoryCreate,
    _admin: Actor = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service),
):
    return await service.create_category(body)


@router.put("/{category_id}", response_model=CategoryRead)
async def update_category(
    category_id: int,
    body: CategoryUpdate,
    _admin: Actor = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service),
):
    return await service.update_category(category_id, body.changes())


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: int,
    _admin: Actor = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service),
):
    await service.delete_category(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
