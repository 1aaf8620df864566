"""
oVirt engine REST API client.

Fetches XML responses and hands them to the hydrator. Transport only:
no caching or retries.
"""

import logging
from typing import Any

import httpx

from ovirt_hydrator.schemas.api_node import ApiNodeLike
from ovirt_hydrator.services.hydrator import HydratorService

logger = logging.getLogger(__name__)


class OvirtClient:
    """
    Async HTTP client for the oVirt engine API.

    Features:
    - Basic authentication
    - XML content negotiation
    - Hydration of responses into API nodes
    """

    API_PATH = "/api"

    def __init__(
        self,
        base_url: str,
        username: str | None = None,
        password: str | None = None,
        verify_ssl: bool = True,
        timeout: float = 30.0,
        hydrator: HydratorService | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.username = username
        self.password = password
        self.verify_ssl = verify_ssl
        self.timeout = timeout
        self.hydrator = hydrator or HydratorService()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def headers(self) -> dict[str, str]:
        """Get default headers for API requests."""
        return {
            "Accept": "application/xml",
            "Version": "4",
            "User-Agent": "ovirt-hydrator/1.0",
        }

    @property
    def auth(self) -> httpx.BasicAuth | None:
        if self.username and self.password is not None:
            return httpx.BasicAuth(self.username, self.password)
        return None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=self.headers,
                auth=self.auth,
                verify=self.verify_ssl,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def get(self, path: str = API_PATH, **kwargs) -> bytes:
        """
        Make a GET request to the engine API.

        Args:
            path: API path (without base URL)
            **kwargs: Additional request arguments

        Returns:
            Raw response body

        Raises:
            httpx.HTTPStatusError: On HTTP errors
        """
        client = await self._get_client()
        logger.info(f"GET {path}")
        response = await client.get(path, **kwargs)
        response.raise_for_status()
        return response.content

    async def get_hash(self, path: str = API_PATH, **kwargs) -> dict[str, Any]:
        """Fetch a path and convert the XML response to a raw hash."""
        return self.hydrator.converter.convert(await self.get(path, **kwargs))

    async def hydrate(self, path: str = API_PATH, target: Any = "api") -> ApiNodeLike:
        """
        Fetch a path and hydrate the response into an API node.

        Args:
            path: API path (without base URL)
            target: Node type name, node constructor or API node instance

        Returns:
            Hydrated API node
        """
        raw = await self.get_hash(path)
        return self.hydrator.hydrate(target, raw)

    async def search(self, collection: str, query: str, target: Any = "api") -> ApiNodeLike:
        """
        Run a search against a collection of the API root.

        Raises:
            ValueError: If the collection is unknown or not searchable
        """
        root = await self.hydrate(self.API_PATH)
        descriptor = root.collections.get(collection)
        if descriptor is None:
            raise ValueError(f"Unknown collection: {collection}")

        href = descriptor.search_url(query)
        if href is None:
            raise ValueError(f"Collection {collection} is not searchable")
        return await self.hydrate(self._relative(href), target)

    def _relative(self, href: str) -> str:
        # hrefs are absolute paths including the engine prefix
        prefix = httpx.URL(self.base_url).path.rstrip("/")
        if prefix and href.startswith(prefix + "/"):
            return href[len(prefix):]
        return href

    async def __aenter__(self) -> "OvirtClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()
