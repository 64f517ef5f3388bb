"""Exceptions raised by the marketplace aggregation layer."""

class MarketplaceError(Exception):
    """Base exception for marketplace operations."""
    pass

class NotFoundError(MarketplaceError):
    """Raised when a lookup matches no records."""
    pass

class PriceParseError(MarketplaceError):
    """Raised when a price that must be aggregated is not an integer."""
    def __init__(self, price: str, record_id: str):
        self.price = price
        self.record_id = record_id
        super().__init__(f"Invalid price {price!r} on record {record_id}")
