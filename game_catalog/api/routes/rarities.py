"""Rarity Routes — read-only rarity tiers."""

from fastapi import APIRouter, Depends

from game_catalog.api.dependencies import get_catalog_service
from game_catalog.schemas.item import RarityRead
from game_catalog.services.catalog_service import CatalogService

router = APIRouter(prefix="/api/v1/rarities", tags=["rarities"])


@router.get("", response_model=list[RarityRead])
async def list_rarities(service: CatalogService = Depends(get_catalog_service)):
    return await service.list_rarities()
