"""GraphQL documents sent to the marketplace subgraph.

Both queries are parameterless and return the full record set; all filtering
happens locally.
"""

LISTINGS_QUERY = """
query ListingsQuery {
    lists {
        id
        owner
        tokenId
        nftContractAddress
        price
        isActive
        blockTimestamp
        blockNumber
        transactionHash
    }
}
"""

PURCHASES_QUERY = """
query BuysQuery {
    buys {
        id
        buyer
        owner
        tokenId
        nftContractAddress
        price
        blockTimestamp
        blockNumber
        transactionHash
    }
}
"""
