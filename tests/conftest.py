"""Shared fixtures: subgraph records and an in-memory subgraph session."""

import time
from typing import Any, Dict, List, Optional
from unittest.mock import Mock

import pytest
import pytest_asyncio
import requests

from marketplace import MarketplaceManager
from subgraph import SubgraphClient

ENDPOINT = "https://subgraph.test/query"

def make_listing(
    id: str,
    owner: str = "0xa",
    contract: str = "0xc1",
    price: str = "100",
    is_active: bool = True
) -> Dict[str, Any]:
    """Build a raw listing record as the subgraph returns it."""
    return {
        "id": id,
        "owner": owner,
        "tokenId": f"token-{id}",
        "nftContractAddress": contract,
        "price": price,
        "isActive": is_active,
        "blockNumber": "100",
        "blockTimestamp": "1690000000",
        "transactionHash": f"0xtx{id}"
    }

def make_purchase(
    id: str,
    buyer: str = "0xb",
    owner: str = "0xa",
    contract: str = "0xc1",
    price: str = "100"
) -> Dict[str, Any]:
    """Build a raw purchase record as the subgraph returns it."""
    return {
        "id": id,
        "buyer": buyer,
        "owner": owner,
        "tokenId": f"token-{id}",
        "nftContractAddress": contract,
        "price": price,
        "blockNumber": "200",
        "blockTimestamp": "1690001000",
        "transactionHash": f"0xbuy{id}"
    }

class FakeSession:
    """Stand-in for requests.Session answering the two marketplace queries."""

    def __init__(
        self,
        listings: Optional[List[Dict[str, Any]]] = None,
        purchases: Optional[List[Dict[str, Any]]] = None,
        payload: Any = None,
        error: Optional[Exception] = None,
        delays: Optional[Dict[str, float]] = None
    ):
        self.listings = listings or []
        self.purchases = purchases or []
        self.payload = payload
        self.error = error
        self.delays = delays or {}
        self.headers: Dict[str, str] = {}
        self.requests: List[Dict[str, Any]] = []
        self.closed = False

    def post(self, url, json=None, timeout=None):
        self.requests.append({"url": url, "json": json, "timeout": timeout})
        if self.error is not None:
            raise self.error

        key = "lists" if "lists" in json["query"] else "buys"
        time.sleep(self.delays.get(key, 0))

        response = Mock(spec=requests.Response)
        response.raise_for_status.return_value = None
        if self.payload is not None:
            response.json.return_value = self.payload
        elif key == "lists":
            response.json.return_value = {"data": {"lists": self.listings}}
        else:
            response.json.return_value = {"data": {"buys": self.purchases}}
        return response

    def close(self):
        self.closed = True

@pytest.fixture
def listings() -> List[Dict[str, Any]]:
    return [
        make_listing("1", owner="0xA", contract="0xC1", price="100", is_active=True),
        make_listing("2", owner="0xA", contract="0xC1", price="50", is_active=False),
        make_listing("3", owner="0xD", contract="0xC2", price="75", is_active=True),
        make_listing("4", owner="0xd", contract="0xc2", price="not-a-number", is_active=True)
    ]

@pytest.fixture
def purchases() -> List[Dict[str, Any]]:
    return [
        make_purchase("1", buyer="0xB", contract="0xC2", price="10"),
        make_purchase("2", buyer="0xE", contract="0xC2", price="20"),
        make_purchase("3", buyer="0xb", contract="0xc2", price="30"),
        make_purchase("4", buyer="0xE", contract="0xC3", price="5")
    ]

@pytest.fixture
def session(listings, purchases) -> FakeSession:
    return FakeSession(listings=listings, purchases=purchases)

@pytest.fixture
def client(session) -> SubgraphClient:
    return SubgraphClient(ENDPOINT, timeout=5, session=session)

@pytest_asyncio.fixture
async def marketplace(client) -> MarketplaceManager:
    return MarketplaceManager(client)
