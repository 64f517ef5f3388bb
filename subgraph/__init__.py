"""Subgraph module for querying the marketplace indexing service over GraphQL"""
import asyncio
import logging
import threading
from typing import Any, Dict, List, Optional

import requests

from .queries import LISTINGS_QUERY, PURCHASES_QUERY

logger = logging.getLogger(__name__)

class SubgraphError(Exception):
    """Base exception for subgraph errors"""
    def __init__(self, message: str, endpoint: Optional[str] = None):
        self.endpoint = endpoint
        super().__init__(message)

class SubgraphConnectionError(SubgraphError):
    """Raised when the subgraph cannot be reached or answers with an HTTP error"""
    pass

class SubgraphQueryError(SubgraphError):
    """Raised when the subgraph rejects a query

    Carries the list of GraphQL error objects returned by the server.
    """
    def __init__(self, errors: List[Dict[str, Any]], endpoint: Optional[str] = None):
        self.errors = errors
        messages = '; '.join(
            str(error.get('message', error)) if isinstance(error, dict) else str(error)
            for error in errors
        )
        super().__init__(f"GraphQL errors: {messages}", endpoint)

class SubgraphResponseError(SubgraphError):
    """Raised when the subgraph response does not have the expected shape"""
    pass

class SubgraphClient:
    """GraphQL client for the marketplace subgraph

    Queries run in worker threads. requests.Session is not guaranteed to be
    thread-safe, so each worker thread gets its own session unless one is
    injected, in which case the caller vouches for concurrent use.
    """

    def __init__(self, endpoint: str, timeout: float = 10.0, session: Optional[requests.Session] = None):
        """Initialize the client.

        Args:
            endpoint: GraphQL endpoint URL
            timeout: Seconds to wait for each query
            session: Optional session shared by all worker threads
        """
        self.endpoint = endpoint
        self.timeout = timeout
        self._shared_session = session
        if session is not None:
            session.headers['content-type'] = 'application/json'
        self._local = threading.local()
        self._sessions: List[requests.Session] = []
        self._sessions_lock = threading.Lock()

    def _get_session(self) -> requests.Session:
        """Return the session for the calling thread."""
        if self._shared_session is not None:
            return self._shared_session

        session = getattr(self._local, 'session', None)
        if session is None:
            session = requests.Session()
            session.headers['content-type'] = 'application/json'
            self._local.session = session
            with self._sessions_lock:
                self._sessions.append(session)
        return session

    def _post(self, document: str, variables: Dict[str, Any]) -> Dict[str, Any]:
        """Send a GraphQL document and return its `data` object

        Args:
            document: GraphQL query document
            variables: Query variables

        Returns:
            The `data` object of the response

        Raises:
            SubgraphConnectionError: Request failed, timed out or returned an HTTP error
            SubgraphQueryError: The server reported GraphQL errors
            SubgraphResponseError: The body is not JSON or has no `data`
        """
        payload = {
            "query": document,
            "variables": variables
        }

        try:
            response = self._get_session().post(self.endpoint, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise SubgraphConnectionError(
                f"Request timed out after {self.timeout} seconds", self.endpoint
            ) from e
        except requests.exceptions.ConnectionError as e:
            raise SubgraphConnectionError(
                f"Failed to connect to subgraph at {self.endpoint}", self.endpoint
            ) from e
        except requests.exceptions.HTTPError as e:
            raise SubgraphConnectionError(
                f"HTTP error occurred: {str(e)}", self.endpoint
            ) from e
        except requests.exceptions.RequestException as e:
            raise SubgraphConnectionError(
                f"Request failed: {str(e)}", self.endpoint
            ) from e

        try:
            result = response.json()
        except ValueError as e:
            raise SubgraphResponseError(
                f"Invalid response format: {str(e)}", self.endpoint
            ) from e

        if not isinstance(result, dict):
            raise SubgraphResponseError("Invalid response format: expected a JSON object", self.endpoint)

        if result.get('errors'):
            raise SubgraphQueryError(result['errors'], self.endpoint)

        data = result.get('data')
        if not isinstance(data, dict):
            raise SubgraphResponseError("Invalid response format: missing data", self.endpoint)

        return data

    async def query(self, document: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Run a GraphQL query without blocking the event loop.

        Args:
            document: GraphQL query document
            variables: Optional query variables

        Returns:
            The `data` object of the response
        """
        return await asyncio.to_thread(self._post, document, variables or {})

    async def _fetch_records(self, document: str, key: str) -> List[Dict[str, Any]]:
        data = await self.query(document)
        records = data.get(key)
        if not isinstance(records, list):
            raise SubgraphResponseError(f"Invalid response format: missing {key}", self.endpoint)
        logger.debug(f"Fetched {len(records)} {key} from {self.endpoint}")
        return records

    async def fetch_listings(self) -> List[Dict[str, Any]]:
        """Fetch every listing record known to the subgraph."""
        return await self._fetch_records(LISTINGS_QUERY, 'lists')

    async def fetch_purchases(self) -> List[Dict[str, Any]]:
        """Fetch every purchase record known to the subgraph."""
        return await self._fetch_records(PURCHASES_QUERY, 'buys')

    def close(self) -> None:
        """Close every HTTP session opened by this client."""
        with self._sessions_lock:
            sessions, self._sessions = self._sessions, []
        for session in sessions:
            session.close()
        if self._shared_session is not None:
            self._shared_session.close()

__all__ = [
    'SubgraphClient',
    'SubgraphError',
    'SubgraphConnectionError',
    'SubgraphQueryError',
    'SubgraphResponseError',
    'LISTINGS_QUERY',
    'PURCHASES_QUERY'
]
