"""Purchases API endpoints."""

from typing import List

from fastapi import APIRouter, Depends

from marketplace import MarketplaceManager, Purchase
from ..dependencies import get_marketplace

router = APIRouter(tags=["Purchases"])

@router.get("/purchases/{address}", response_model=List[Purchase])
async def purchases_for_buyer(
    address: str,
    marketplace: MarketplaceManager = Depends(get_marketplace)
):
    """Get the purchases made by a buyer address."""
    return await marketplace.list_purchases_by_buyer(address.lower())

__all__ = ['router']
