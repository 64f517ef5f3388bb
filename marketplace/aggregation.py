"""Filters and reductions over raw marketplace records.

Everything here is a pure function of its arguments. Addresses are compared
after lowercasing both sides, and prices are base-10 integer strings in the
smallest currency unit.
"""
import re
from typing import Iterable, List, Optional, TypeVar

from .exceptions import PriceParseError
from .models import Listing, Purchase

Record = TypeVar('Record', Listing, Purchase)

_PRICE_PATTERN = re.compile(r'[+-]?[0-9]+')

def parse_price(price: str) -> Optional[int]:
    """Parse an integer price string.

    Returns:
        The price as an int, or None if it is not a plain base-10 integer
    """
    if not isinstance(price, str) or not _PRICE_PATTERN.fullmatch(price):
        return None
    return int(price)

def same_address(left: str, right: str) -> bool:
    return left.lower() == right.lower()

def filter_active(listings: Iterable[Listing]) -> List[Listing]:
    return [listing for listing in listings if listing.is_active]

def filter_by_owner(listings: Iterable[Listing], owner: str) -> List[Listing]:
    return [listing for listing in listings if same_address(listing.owner, owner)]

def filter_by_buyer(purchases: Iterable[Purchase], buyer: str) -> List[Purchase]:
    return [purchase for purchase in purchases if same_address(purchase.buyer, buyer)]

def filter_by_contract(records: Iterable[Record], contract: str) -> List[Record]:
    return [record for record in records if same_address(record.nft_contract_address, contract)]

def floor_price(listings: Iterable[Listing]) -> Optional[int]:
    """Lowest parseable listing price.

    Listings whose price does not parse are skipped.

    Returns:
        The minimum price, or None if no listing has a parseable price
    """
    prices = [parse_price(listing.price) for listing in listings]
    prices = [price for price in prices if price is not None]
    return min(prices) if prices else None

def traded_volume(purchases: Iterable[Purchase]) -> int:
    """Sum of purchase prices; 0 for no purchases.

    Raises:
        PriceParseError: If any purchase price does not parse
    """
    total = 0
    for purchase in purchases:
        price = parse_price(purchase.price)
        if price is None:
            raise PriceParseError(purchase.price, purchase.id)
        total += price
    return total
