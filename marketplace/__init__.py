"""Marketplace module for querying NFT listings and purchases.

This module provides functionality for:
- Fetching listings and purchases from the marketplace subgraph
- Filtering active listings, listings by owner and purchases by buyer
- Computing collection floor price and traded volume
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from subgraph import SubgraphClient, SubgraphResponseError
from .aggregation import (
    parse_price, filter_active, filter_by_owner, filter_by_buyer,
    filter_by_contract, floor_price, traded_volume
)
from .exceptions import MarketplaceError, NotFoundError, PriceParseError
from .models import Listing, Purchase, CollectionStats

logger = logging.getLogger(__name__)

class MarketplaceManager:
    """Manager class for marketplace read operations.

    Holds no state besides the subgraph client: every call re-fetches the
    records it needs.
    """

    def __init__(self, client: SubgraphClient):
        """Initialize the marketplace manager.

        Args:
            client: Subgraph client used for every upstream query
        """
        self.client = client

    async def fetch_listings(self) -> List[Listing]:
        """Fetch all listings, active and inactive.

        Raises:
            SubgraphError: If the upstream query fails or a record is malformed
        """
        records = await self.client.fetch_listings()
        return _parse_records(Listing, records, self.client.endpoint)

    async def fetch_purchases(self) -> List[Purchase]:
        """Fetch all purchases.

        Raises:
            SubgraphError: If the upstream query fails or a record is malformed
        """
        records = await self.client.fetch_purchases()
        return _parse_records(Purchase, records, self.client.endpoint)

    async def fetch_active_listings(self, owner: Optional[str] = None) -> List[Listing]:
        """Get active listings, optionally restricted to one owner.

        Inactive listings are never returned.

        Args:
            owner: Optional owner address, compared case-insensitively

        Returns:
            Active listings in upstream order

        Raises:
            NotFoundError: If no active listing matches
        """
        listings = filter_active(await self.fetch_listings())

        if owner is None:
            if not listings:
                raise NotFoundError("No active listings found")
            logger.info(f"Found {len(listings)} active listings")
            return listings

        listings = filter_by_owner(listings, owner)
        if not listings:
            raise NotFoundError(f"No active listings for owner {owner}")
        logger.info(f"Found {len(listings)} active listings for owner {owner}")
        return listings

    async def list_active_listings(self) -> List[Listing]:
        """Get every active listing."""
        return await self.fetch_active_listings()

    async def list_listings_by_owner(self, owner: str) -> List[Listing]:
        """Get the active listings of one owner."""
        return await self.fetch_active_listings(owner)

    async def list_purchases_by_buyer(self, buyer: str) -> List[Purchase]:
        """Get the purchases made by one buyer.

        Args:
            buyer: Buyer address, compared case-insensitively

        Returns:
            Purchases in upstream order

        Raises:
            NotFoundError: If the buyer has no purchases
        """
        purchases = filter_by_buyer(await self.fetch_purchases(), buyer)
        if not purchases:
            raise NotFoundError(f"No purchases for address {buyer}")
        logger.info(f"Found {len(purchases)} purchases for address {buyer}")
        return purchases

    async def get_floor_price(self, contract: str) -> int:
        """Get the lowest listing price of a collection.

        Both active and inactive listings count.

        Raises:
            NotFoundError: If no listing of the contract has a parseable price
        """
        listings = filter_by_contract(await self.fetch_listings(), contract)
        price = floor_price(listings)
        if price is None:
            if listings:
                logger.warning(f"No parseable price among {len(listings)} listings of {contract}")
            raise NotFoundError(f"No collection with id {contract} found")
        logger.debug(f"Floor price of {contract}: {price}")
        return price

    async def get_traded_volume(self, contract: str) -> int:
        """Get the summed purchase price of a collection; 0 if it never traded.

        Raises:
            PriceParseError: If a purchase of the contract has an invalid price
        """
        purchases = filter_by_contract(await self.fetch_purchases(), contract)
        volume = traded_volume(purchases)
        logger.debug(f"Traded volume of {contract}: {volume} over {len(purchases)} purchases")
        return volume

    async def get_collection_stats(self, contract: str) -> CollectionStats:
        """Get floor price and traded volume of a collection.

        The two values are computed concurrently and combined once both are
        done. When both fail, a fault (volume first) wins over not-found, so the
        outcome does not depend on which upstream query answers first.

        Args:
            contract: NFT contract address

        Returns:
            CollectionStats for the lowercased contract address

        Raises:
            PriceParseError: If a purchase price is invalid
            SubgraphError: If an upstream query fails
            NotFoundError: If the collection has no priced listing
        """
        contract = contract.lower()
        price, volume = await asyncio.gather(
            self.get_floor_price(contract),
            self.get_traded_volume(contract),
            return_exceptions=True
        )

        for result in (volume, price):
            if isinstance(result, BaseException) and not isinstance(result, NotFoundError):
                raise result
        if isinstance(price, NotFoundError):
            raise price

        return CollectionStats(id=contract, floor_price=price, traded_volume=volume)

def _parse_records(model, records: List[Dict[str, Any]], endpoint: str) -> list:
    try:
        return [model.model_validate(record) for record in records]
    except ValidationError as e:
        raise SubgraphResponseError(
            f"Invalid {model.__name__.lower()} record: {e.errors()[0].get('msg')}", endpoint
        ) from e

__all__ = [
    'MarketplaceManager',
    'MarketplaceError',
    'NotFoundError',
    'PriceParseError',
    'Listing',
    'Purchase',
    'CollectionStats',
    'parse_price',
    'filter_active',
    'filter_by_owner',
    'filter_by_buyer',
    'filter_by_contract',
    'floor_price',
    'traded_volume'
]
