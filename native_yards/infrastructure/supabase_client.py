"""
Infrastructure layer: Hosted table client for the Supabase REST API.
"""
import logging
import threading
from typing import Any, Dict, Iterable, List, Optional
import httpx

from native_yards.config import settings
from native_yards.infrastructure.api_constants import APIConstants, SupabaseEndpoints

logger = logging.getLogger(__name__)


class BackendError(Exception):
    """Raised when the hosted backend rejects a request or cannot be reached."""

    def __init__(self, message: str, status_code: int = 502):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class SupabaseClient:
    """
    Client for the Supabase tables backing the waitlist and analytics.

    Requests are sent once; failures surface as BackendError.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the client with configuration.

        Args:
            base_url: Supabase project URL (defaults to settings)
            api_key: Anonymous API key (defaults to settings)
            timeout: Request timeout in seconds (defaults to settings)
        """
        self.base_url = (base_url or settings.supabase_url).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.supabase_anon_key
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "apikey": self.api_key,
                "Authorization": f"Bearer {self.api_key}",
                "accept": APIConstants.CONTENT_TYPE_JSON,
            },
            timeout=timeout or settings.backend_timeout_seconds,
        )

    async def __aenter__(self) -> "SupabaseClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def _send(
        self,
        method: str,
        endpoint: str,
        **kwargs
    ) -> httpx.Response:
        """
        Send an HTTP request and check its status.

        Args:
            method: HTTP method (GET, POST, HEAD)
            endpoint: API endpoint path
            **kwargs: Additional arguments for the request

        Returns:
            The successful response

        Raises:
            BackendError: On a non-2xx status or a transport failure
        """
        try:
            response = await self.client.request(method, endpoint, **kwargs)
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            raise BackendError(
                f"Backend request failed: {e.response.status_code} - {e.response.text}",
                status_code=e.response.status_code,
            )
        except httpx.RequestError as e:
            raise BackendError(f"Backend request error: {str(e)}")

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        **kwargs
    ) -> Any:
        """
        Send an HTTP request and decode the JSON body.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint path
            **kwargs: Additional arguments for the request

        Returns:
            Decoded JSON body

        Raises:
            BackendError: If the request fails
        """
        response = await self._send(method, endpoint, **kwargs)
        return response.json()

    async def insert(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a row into a table.

        Args:
            table: Table name
            row: Column values

        Returns:
            The stored row as returned by the backend

        Raises:
            BackendError: If the insert fails
        """
        data = await self._make_request(
            "POST",
            SupabaseEndpoints.table(table),
            json=[row],
            headers={"Prefer": APIConstants.PREFER_RETURN_REPRESENTATION},
        )
        logger.debug(f"Inserted row into {table}")
        if isinstance(data, list):
            return data[0] if data else {}
        return data

    async def count(self, table: str) -> int:
        """
        Count the rows in a table.

        Args:
            table: Table name

        Returns:
            Exact row count

        Raises:
            BackendError: If the request fails or no count is returned
        """
        response = await self._send(
            "HEAD",
            SupabaseEndpoints.table(table),
            params={"select": "*"},
            headers={"Prefer": APIConstants.PREFER_COUNT_EXACT},
        )
        return self.parse_content_range(response.headers.get(APIConstants.CONTENT_RANGE))

    async def select(
        self,
        table: str,
        columns: Iterable[str],
        filters: Optional[Dict[str, str]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Select rows from a table.

        Args:
            table: Table name
            columns: Columns to return
            filters: PostgREST filters keyed by column, e.g. {"event_type": "eq.conversion"}

        Returns:
            List of rows

        Raises:
            BackendError: If the request fails
        """
        params = {"select": ",".join(columns)}
        params.update(filters or {})
        data = await self._make_request("GET", SupabaseEndpoints.table(table), params=params)
        return data or []

    def parse_content_range(self, content_range: Optional[str]) -> int:
        """
        Parse the total from a Content-Range header.

        Args:
            content_range: Header value such as "0-24/3573" or "*/42"

        Returns:
            Total row count

        Raises:
            BackendError: If the header is missing or has no exact total
        """
        if not content_range or "/" not in content_range:
            raise BackendError("Backend response did not include a row count")

        total = content_range.rsplit("/", 1)[1].strip()
        if not total.isdigit():
            raise BackendError(f"Backend returned an inexact row count: {content_range}")
        return int(total)


# Singleton instance
_backend_client: Optional[SupabaseClient] = None
_backend_client_lock = threading.Lock()


def get_backend_client() -> SupabaseClient:
    """
    Get or create the singleton backend client instance.

    FastAPI resolves this sync dependency in a worker thread, so creation
    is guarded by a lock.

    Returns:
        SupabaseClient instance
    """
    global _backend_client
    with _backend_client_lock:
        if _backend_client is None:
            _backend_client = SupabaseClient()
        return _backend_client


async def close_backend_client() -> None:
    """Close and discard the singleton backend client, if one was created."""
    global _backend_client
    if _backend_client is not None:
        await _backend_client.close()
        _backend_client = None
