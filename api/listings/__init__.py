"""Listings API endpoints."""

from typing import List

from fastapi import APIRouter, Depends

from marketplace import MarketplaceManager, Listing
from ..dependencies import get_marketplace

router = APIRouter(tags=["Listings"])

@router.get("/all-listings", response_model=List[Listing])
async def all_listings(marketplace: MarketplaceManager = Depends(get_marketplace)):
    """Get every active listing."""
    return await marketplace.list_active_listings()

@router.get("/listings/{owner}", response_model=List[Listing])
async def listings_for_owner(
    owner: str,
    marketplace: MarketplaceManager = Depends(get_marketplace)
):
    """Get the active listings of an owner address."""
    return await marketplace.list_listings_by_owner(owner.lower())

__all__ = ['router']
