"""FastAPI dependencies shared by the routers."""

from fastapi import Request

from marketplace import MarketplaceManager

def get_marketplace(request: Request) -> MarketplaceManager:
    """Build a marketplace manager around the application's subgraph client."""
    return MarketplaceManager(request.app.state.subgraph_client)
