"""
Shopify Admin API client (GraphQL reads, REST variant updates).
"""

import logging
from typing import Any, Dict, Optional

import httpx

from ..state.models import normalize_domain

logger = logging.getLogger(__name__)


class ShopifyClientError(Exception):
    """Base exception for Shopify client errors."""
    pass


class ShopifyUpstreamError(ShopifyClientError):
    """Shopify answered with an error payload."""

    def __init__(
        self,
        message: str,
        details: Any = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.details = details
        self.status_code = status_code


class ShopifyAuthError(ShopifyUpstreamError):
    """Authentication error."""
    pass


class ShopifyTransportError(ShopifyClientError):
    """Network or connection failure, no response received."""
    pass


def extract_error_details(response: httpx.Response) -> Any:
    """
    Pull the error payload out of a failed response.

    Falls back from the JSON "errors" value, to the whole JSON body, to the
    raw text, to the reason phrase. Never raises.
    """
    try:
        body = response.json()
    except ValueError:
        text = response.text.strip()
        return text or response.reason_phrase

    if isinstance(body, dict) and body.get("errors"):
        return body["errors"]
    return body


def extract_numeric_id(gid: str) -> str:
    """
    Get the trailing numeric segment of a Shopify GID.

    "gid://shopify/ProductVariant/1234567890" -> "1234567890"
    """
    if not gid:
        raise ValueError("Empty id")
    tail = str(gid).rsplit("/", 1)[-1]
    return tail.split("?", 1)[0]


class ShopifyClient:
    """
    Async HTTP client for a single shop's Admin API.

    Every call is attempted once; failures are raised as ShopifyUpstreamError
    or ShopifyTransportError.
    """

    API_VERSION = "2025-01"

    def __init__(
        self,
        shop_domain: str,
        access_token: str,
        api_version: Optional[str] = None,
        timeout: float = 30.0,
        connect_timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Shopify client.

        Args:
            shop_domain: Store domain (e.g., "mystore.myshopify.com")
            access_token: Admin API access token
            api_version: Admin API version, defaults to API_VERSION
            timeout: Overall request timeout in seconds
            connect_timeout: Connect timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        domain = normalize_domain(shop_domain)

        self.shop_domain = domain
        self.access_token = access_token
        self.api_version = api_version or self.API_VERSION
        self.base_url = f"https://{domain}/admin/api/{self.api_version}"
        self.graphql_url = f"{self.base_url}/graphql.json"

        self._timeout = httpx.Timeout(timeout, connect=connect_timeout)
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                headers={
                    "Content-Type": "application/json",
                    "X-Shopify-Access-Token": self.access_token,
                },
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        """Send one request and raise on transport failure or non-2xx status."""
        client = await self._get_client()

        try:
            response = await client.request(method, url, **kwargs)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise ShopifyTransportError(str(e) or e.__class__.__name__) from e

        if response.is_success:
            return response

        details = extract_error_details(response)
        if response.status_code in (401, 403):
            raise ShopifyAuthError(
                f"Authentication failed for {self.shop_domain}",
                details=details,
                status_code=response.status_code,
            )
        raise ShopifyUpstreamError(
            f"{self.shop_domain} returned HTTP {response.status_code}",
            details=details,
            status_code=response.status_code,
        )

    async def execute(
        self,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Execute a GraphQL query.

        Args:
            query: GraphQL query string
            variables: Optional variables for the query

        Returns:
            The 'data' portion of the GraphQL response

        Raises:
            ShopifyUpstreamError: On HTTP or GraphQL errors
            ShopifyTransportError: If no response was received
        """
        payload: Dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        response = await self._request("POST", self.graphql_url, json=payload)

        try:
            result = response.json()
        except ValueError as e:
            raise ShopifyUpstreamError(
                f"Invalid JSON from {self.shop_domain}",
                details=response.text,
                status_code=response.status_code,
            ) from e

        if not isinstance(result, dict):
            raise ShopifyUpstreamError(
                f"Unexpected response from {self.shop_domain}",
                details=result,
                status_code=response.status_code,
            )

        if result.get("errors"):
            errors = result["errors"]
            error_messages = [
                e.get("message", str(e)) if isinstance(e, dict) else str(e)
                for e in (errors if isinstance(errors, list) else [errors])
            ]
            raise ShopifyUpstreamError(
                f"GraphQL errors: {error_messages}",
                details=errors,
                status_code=response.status_code,
            )

        # Log rate limit status if available
        cost = result.get("extensions", {}).get("cost")
        if cost:
            available = cost.get("throttleStatus", {}).get("currentlyAvailable", 0)
            if available < 100:
                logger.warning(f"Low rate limit points: {available} available")

        return result.get("data") or {}

    async def update_variant(
        self,
        variant_id: str,
        changes: Dict[str, Any],
    ) -> Dict[str, Any]:
        """
        Update a variant through the REST endpoint.

        Args:
            variant_id: Numeric variant ID (not the GID, not the SKU)
            changes: Variant fields to change, e.g. {"price": "25.99"}

        Returns:
            The parsed response body, or {} if it is not JSON
        """
        url = f"{self.base_url}/variants/{variant_id}.json"
        response = await self._request("PUT", url, json={"variant": changes})

        try:
            return response.json()
        except ValueError:
            return {}

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
