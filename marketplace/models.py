"""Marketplace records as returned by the subgraph and served by the API."""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class MarketplaceRecord(BaseModel):
    """Immutable record serialized with camelCase field names."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True
    )


class Listing(MarketplaceRecord):
    id: str
    owner: str
    token_id: str
    nft_contract_address: str
    price: str
    is_active: bool
    block_number: str
    block_timestamp: str
    transaction_hash: str


class Purchase(MarketplaceRecord):
    id: str
    buyer: str
    owner: str
    token_id: str
    nft_contract_address: str
    price: str
    block_number: str
    block_timestamp: str
    transaction_hash: str


class CollectionStats(MarketplaceRecord):
    """Floor price and traded volume of one NFT contract, in the smallest currency unit."""
    id: str
    floor_price: int
    traded_volume: int
