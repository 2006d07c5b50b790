"""Inventory Routes — the caller's inventory and, for owners or Admins, any user's.

Invariants:
    - /inventory routes act on the caller; /inventory/users/{user_id} routes on the subject
    - Access (owner or Admin) is decided inside CatalogService, once per call
    - POST merges by addition (200); PUT replaces, quantity <= 0 removes; DELETE answers 204

Design Decisions:
    - The caller routes pass actor.id as the subject, so both families run
      the same CatalogService calls and the same access check
"""

from fastapi import APIRouter, Depends, Response, status

from game_catalog.api.dependencies import (
    get_catalog_service, get_current_actor, get_page_request,
)
from game_catalog.core.access_policy import Actor
from game_catalog.core.pagination import PageRequest
from game_catalog.schemas.inventory import (
    InventoryAdd, InventoryEntryRead, InventoryQuantityResult,
    InventoryQuantityUpdate,
)
from game_catalog.schemas.pagination import Page
from game_catalog.services.catalog_service import CatalogService

router = APIRouter(prefix="/api/v1/inventory", tags=["inventory"])


# ─── Caller's inventory ──────────────────────────────────────────

@router.get("", response_model=Page[InventoryEntryRead])
async def get_own_inventory(
    page: PageRequest = Depends(get_page_request),
    actor: Actor = Depends(get_current_actor),
    service: CatalogService = Depends(get_catalog_service),
):
    return await service.get_inventory(actor, actor.id, page)


@router.post("", response_model=InventoryEntryRead)
async def add_own_item(
    body: InventoryAdd,
    actor: Actor = Depends(get_current_actor),
    service: CatalogService = Depends(get_catalog_service),
):
    return await service.add_inventory_item(
        actor, actor.id, body.item_id, body.quantity,
    )


@router.put("/{item_id}", response_model=InventoryQuantityResult)
async def set_own_quantity(
    item_id: int,
    body: InventoryQuantityUpdate,
    actor: Actor = Depends(get_current_actor),
    service: CatalogService = Depends(get_catalog_service),
):
    return await service.set_inventory_quantity(
        actor, actor.id, item_id, body.quantity,
    )


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_own_item(
    item_id: int,
    actor: Actor = Depends(get_current_actor),
    service: CatalogService = Depends(get_catalog_service),
):
    await service.remove_inventory_item(actor, actor.id, item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ─── Any user's inventory (owner or Admin) ───────────────────────

@router.get("/users/{user_id}", response_model=Page[InventoryEntryRead])
async def get_user_inventory(
    user_id: int,
    page: PageRequest = Depends(get_page_request),
    actor: Actor = Depends(get_current_actor),
    service: CatalogService = Depends(get_catalog_service),
):
    return await service.get_inventory(actor, user_id, page)


@router.post("/users/{user_id}", response_model=InventoryEntryRead)
async def add_user_item(
    user_id: int,
    body: InventoryAdd,
    actor: Actor = Depends(get_current_actor),
    service: CatalogService = Depends(get_catalog_service),
):
    return await service.add_inventory_item(
        actor, user_id, body.item_id, body.quantity,
    )


@router.put("/users/{user_id}/{item_id}", response_model=InventoryQuantityResult)
async def set_user_quantity(
    user_id: int,
    item_id: int,
    body: InventoryQuantityUpdate,
    actor: Actor = Depends(get_current_actor),
    service: CatalogService = Depends(get_catalog_service),
):
    return await service.set_inventory_quantity(
        actor, user_id, item_id, body.quantity,
    )


@router.delete("/users/{user_id}/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_user_item(
    user_id: int,
    item_id: int,
    actor: Actor = Depends(get_current_actor),
    service: CatalogService = Depends(get_catalog_service),
):
    await service.remove_inventory_item(actor, user_id, item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
