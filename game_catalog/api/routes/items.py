"""Item Routes — filtered listing, search, detail, and Admin mutations.

Invariants:
    - GET /items filters are a conjunction: category, rarity, minLevel, name (contains)
    - GET /items/search requires a non-blank query (400 otherwise)
    - /items/search is registered before /items/{item_id} so "search" never parses as an id
    - POST/PUT/DELETE require the Admin role
"""

from fastapi import APIRouter, Depends, Query, Response, status

from game_catalog.api.dependencies import (
    get_catalog_service, get_page_request, require_admin,
)
from game_catalog.core.access_policy import Actor
from game_catalog.core.item_filters import ItemFilter
from game_catalog.core.pagination import PageRequest
from game_catalog.schemas.item import ItemCreate, ItemRead, ItemUpdate
from game_catalog.schemas.pagination import Page
from game_catalog.services.catalog_service import CatalogService

router = APIRouter(prefix="/api/v1/items", tags=["items"])


@router.get("", response_model=Page[ItemRead])
async def list_items(
    category: int | None = Query(None, description="Category id"),
    rarity: int | None = Query(None, description="Rarity id"),
    min_level: int | None = Query(None, alias="minLevel"),
    name: str | None = Query(None, description="Case-insensitive name fragment"),
    page: PageRequest = Depends(get_page_request),
    service: CatalogService = Depends(get_catalog_service),
):
    item_filter = ItemFilter(
        category_id=category, rarity_id=rarity, min_level=min_level, name=name,
    )
    return await service.list_items(item_filter, page)


@router.get("/search", response_model=Page[ItemRead])
async def search_items(
    query: str = Query("", description="Matched against name and description"),
    page: PageRequest = Depends(get_page_request),
    service: CatalogService = Depends(get_catalog_service),
):
    return await service.search_items(query, page)


@router.get("/{item_id}", response_model=ItemRead)
async def get_item(
    item_id: int,
    service: CatalogService = Depends(get_catalog_service),
):
    return await service.get_item(item_id)


@router.post("", response_model=ItemRead, status_code=status.HTTP_201_CREATED)
async def create_item(
    body: ItemCreate,
    _admin: Actor = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service),
):
    return await service.create_item(body)


@router.put("/{item_id}", response_model=ItemRead)
async def update_item(
    item_id: int,
    body: ItemUpdate,
    _admin: Actor = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service),
):
    return await service.update_item(item_id, body.changes())


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(
    item_id: int,
    _admin: Actor = Depends(require_admin),
    service: CatalogService = Depends(get_catalog_service),
):
    await service.delete_item(item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
