"""
Shared fixtures: shops, an empty snapshot store and a fake Shopify backend.
"""

import json
from typing import Callable, Dict, List

import httpx
import pytest

from variant_relay.shopify import ShopifyClient
from variant_relay.state import Shop, ShopRegistry, SnapshotStore


SHOP_A = Shop(name="ShopA", domain="shop-a.myshopify.com", token="shpat_a")
SHOP_B = Shop(name="ShopB", domain="shop-b.myshopify.com", token="shpat_b")
SHOP_C = Shop(name="ShopC", domain="shop-c.myshopify.com", token="shpat_c")


def variant_node(sku: str = "SKU123", variant_id: str = "1234567890", **extra) -> dict:
    """Build a productVariant node as returned by the GraphQL API."""
    node = {
        "id": f"gid://shopify/ProductVariant/{variant_id}",
        "sku": sku,
        "title": "Sample Product",
        "price": "29.99",
        "compareAtPrice": None,
        "inventoryQuantity": 7,
        "barcode": None,
        "image": {"url": "http://example.com/image1.jpg"},
        "product": {"id": "gid://shopify/Product/42", "title": "Sample Product"},
    }
    node.update(extra)
    return node


class FakeShopify:
    """
    In-process stand-in for the Admin API of several shops.

    Variants are looked up by SKU on GraphQL calls, REST variant updates
    echo the payload back. Per-host failures can be injected.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.variants: Dict[str, dict] = {}
        self.failures: Dict[str, Callable[[httpx.Request], httpx.Response]] = {}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        failure = self.failures.get(request.url.host)
        if failure is not None:
            return failure(request)

        if request.url.path.endswith("/graphql.json"):
            body = json.loads(request.content)
            search = body["variables"]["query"]
            sku = search[len('sku:"'):-1]
            node = self.variants.get(sku)
            edges = [{"node": node}] if node else []
            return httpx.Response(
                200, json={"data": {"productVariants": {"edges": edges}}}
            )

        if request.method == "PUT" and "/variants/" in request.url.path:
            body = json.loads(request.content)
            return httpx.Response(200, json={"variant": body["variant"]})

        return httpx.Response(404, json={"errors": "Not Found"})

    def fail_with_status(self, shop: Shop, status_code: int, body: dict) -> None:
        self.failures[shop.domain] = lambda request: httpx.Response(status_code, json=body)

    def fail_with_connect_error(self, shop: Shop, message: str = "connection refused") -> None:
        def raise_error(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError(message, request=request)
        self.failures[shop.domain] = raise_error

    def client_factory(self, shop: Shop) -> ShopifyClient:
        return ShopifyClient(
            shop.domain, shop.token, transport=httpx.MockTransport(self.handler)
        )

    @property
    def updates(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == "PUT"]


@pytest.fixture
def registry() -> ShopRegistry:
    return ShopRegistry([SHOP_A, SHOP_B, SHOP_C], "ShopA")


@pytest.fixture
def store() -> SnapshotStore:
    return SnapshotStore()


@pytest.fixture
def fake_shopify() -> FakeShopify:
    fake = FakeShopify()
    fake.variants["SKU123"] = variant_node()
    return fake
