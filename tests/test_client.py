"""
Tests for the Shopify client and its error adapters.
"""

import asyncio
import json

import httpx
import pytest

from variant_relay.shopify import (
    ShopifyAuthError,
    ShopifyClient,
    ShopifyTransportError,
    ShopifyUpstreamError,
    extract_error_details,
    extract_numeric_id,
)


def make_client(handler, domain: str = "https://shop-a.myshopify.com/") -> ShopifyClient:
    return ShopifyClient(domain, "shpat_a", transport=httpx.MockTransport(handler))


class TestExtractNumericId:
    """Tests for extract_numeric_id."""

    def test_variant_gid(self):
        assert extract_numeric_id("gid://shopify/ProductVariant/1234567890") == "1234567890"

    def test_bare_id_passes_through(self):
        assert extract_numeric_id("1234567890") == "1234567890"

    def test_query_suffix_dropped(self):
        assert extract_numeric_id("gid://shopify/ProductVariant/55?version=2") == "55"

    def test_empty_id(self):
        with pytest.raises(ValueError):
            extract_numeric_id("")


class TestExtractErrorDetails:
    """Tests for extract_error_details fallbacks."""

    def test_errors_key(self):
        response = httpx.Response(422, json={"errors": {"price": ["must be a number"]}})

        assert extract_error_details(response) == {"price": ["must be a number"]}

    def test_json_without_errors_key(self):
        response = httpx.Response(500, json={"message": "boom"})

        assert extract_error_details(response) == {"message": "boom"}

    def test_plain_text_body(self):
        response = httpx.Response(502, text="Bad gateway from upstream")

        assert extract_error_details(response) == "Bad gateway from upstream"

    def test_empty_body_uses_reason_phrase(self):
        response = httpx.Response(503)

        assert extract_error_details(response) == "Service Unavailable"


class TestExecute:
    """Tests for GraphQL execution."""

    def test_returns_data_and_sends_token(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"data": {"shop": {"name": "A"}}})

        client = make_client(handler)
        data = asyncio.run(client.execute("{ shop { name } }", {"x": 1}))

        assert data == {"shop": {"name": "A"}}
        request = seen[0]
        assert str(request.url) == "https://shop-a.myshopify.com/admin/api/2025-01/graphql.json"
        assert request.headers["X-Shopify-Access-Token"] == "shpat_a"
        assert json.loads(request.content)["variables"] == {"x": 1}

    def test_graphql_errors_raise_with_details(self):
        errors = [{"message": "Field 'nope' doesn't exist"}]

        client = make_client(lambda request: httpx.Response(200, json={"errors": errors}))

        with pytest.raises(ShopifyUpstreamError) as exc_info:
            asyncio.run(client.execute("{ nope }"))

        assert exc_info.value.details == errors
        assert "doesn't exist" in str(exc_info.value)

    def test_http_error_raises_upstream_error(self):
        client = make_client(lambda request: httpx.Response(500, json={"errors": "Internal"}))

        with pytest.raises(ShopifyUpstreamError) as exc_info:
            asyncio.run(client.execute("{ shop { name } }"))

        assert exc_info.value.status_code == 500
        assert exc_info.value.details == "Internal"

    def test_unauthorized_raises_auth_error(self):
        client = make_client(
            lambda request: httpx.Response(401, json={"errors": "Invalid API key or access token"})
        )

        with pytest.raises(ShopifyAuthError):
            asyncio.run(client.execute("{ shop { name } }"))

    def test_connection_failure_raises_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)

        with pytest.raises(ShopifyTransportError, match="connection refused"):
            asyncio.run(client.execute("{ shop { name } }"))

    def test_transport_error_message_is_raw(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)

        with pytest.raises(ShopifyTransportError) as exc_info:
            asyncio.run(client.update_variant("1", {"price": "1.00"}))

        assert str(exc_info.value) == "connection refused"

    def test_invalid_url_raises_transport_error(self):
        client = make_client(lambda request: httpx.Response(200, json={}), domain="bad-shop.myshopify.com:abc")

        with pytest.raises(ShopifyTransportError):
            asyncio.run(client.update_variant("1", {"price": "1.00"}))

    def test_no_retry_on_failure(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(429, json={"errors": "Throttled"})

        client = make_client(handler)

        with pytest.raises(ShopifyUpstreamError):
            asyncio.run(client.execute("{ shop { name } }"))

        assert len(calls) == 1


class TestUpdateVariant:
    """Tests for the REST variant update."""

    def test_puts_changes_to_variant_url(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"variant": {"id": 1234567890, "price": "25.99"}})

        client = make_client(handler)
        body = asyncio.run(client.update_variant("1234567890", {"price": "25.99"}))

        assert body["variant"]["price"] == "25.99"
        request = seen[0]
        assert request.method == "PUT"
        assert request.url.path == "/admin/api/2025-01/variants/1234567890.json"
        assert json.loads(request.content) == {"variant": {"price": "25.99"}}

    def test_custom_api_version(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={})

        client = ShopifyClient(
            "shop-a.myshopify.com", "shpat_a",
            api_version="2023-04",
            transport=httpx.MockTransport(handler),
        )
        asyncio.run(client.update_variant("1", {"price": "1.00"}))

        assert seen[0].url.path == "/admin/api/2023-04/variants/1.json"

    def test_non_json_success_body(self):
        client = make_client(lambda request: httpx.Response(200, text="ok"))

        assert asyncio.run(client.update_variant("1", {"price": "1.00"})) == {}

    def test_validation_error_keeps_details(self):
        client = make_client(
            lambda request: httpx.Response(422, json={"errors": {"price": ["is invalid"]}})
        )

        with pytest.raises(ShopifyUpstreamError) as exc_info:
            asyncio.run(client.update_variant("1", {"price": "abc"}))

        assert exc_info.value.details == {"price": ["is invalid"]}
        assert exc_info.value.status_code == 422
