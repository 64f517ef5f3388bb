"""Collection statistics endpoints."""

from fastapi import APIRouter, Depends

from marketplace import MarketplaceManager, CollectionStats
from ..dependencies import get_marketplace

router = APIRouter(tags=["Collections"])

@router.get("/collection-data/{id}", response_model=CollectionStats)
async def collection_data(
    id: str,
    marketplace: MarketplaceManager = Depends(get_marketplace)
):
    """Get floor price and traded volume of an NFT contract.

    Args:
        id: NFT contract address

    Returns:
        CollectionStats with `id`, `floorPrice` and `tradedVolume`
    """
    return await marketplace.get_collection_stats(id.lower())

__all__ = ['router']
