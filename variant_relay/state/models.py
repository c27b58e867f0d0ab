"""
Pydantic models for shops, variant snapshots and update requests.
Wire format is camelCase, attributes are snake_case.
"""

from typing import Any, Dict, List, Optional, Union

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


RowNumber = Union[int, str, None]


class CamelModel(BaseModel):
    """Base model accepting both camelCase and snake_case keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def normalize_domain(domain: str) -> str:
    """Strip scheme and trailing slash from a shop domain."""
    domain = domain.strip()
    if domain.startswith("https://"):
        domain = domain[8:]
    elif domain.startswith("http://"):
        domain = domain[7:]
    return domain.rstrip("/")


class Shop(BaseModel):
    """A configured Shopify storefront."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    domain: str = Field(min_length=1)  # e.g., "mystore.myshopify.com"
    token: str = Field(min_length=1, repr=False)  # Admin API token (shpat_...)

    @field_validator("domain")
    @classmethod
    def _clean_domain(cls, value: str) -> str:
        value = normalize_domain(value)
        if not value:
            raise ValueError("domain must not be empty")
        try:
            host = httpx.URL(f"https://{value}").host
        except httpx.InvalidURL as e:
            raise ValueError(f"invalid domain: {e}") from e
        if not host:
            raise ValueError("invalid domain: no host")
        return value


class VariantSnapshot(CamelModel):
    """Last fetched copy of a variant, keyed by SKU."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    sku: str
    numeric_variant_id: str
    variant_id: Optional[str] = None  # gid://shopify/ProductVariant/...
    price: Optional[str] = None
    title: Optional[str] = None
    inventory_quantity: Optional[int] = None
    image: Optional[str] = None  # image URL


class UpdateRequestRow(CamelModel):
    """One edited row: the SKU and the fields to change."""
    sku: str
    changes: Dict[str, Any] = Field(default_factory=dict)
    row_number: RowNumber = None

    @field_validator("sku")
    @classmethod
    def _strip_sku(cls, value: str) -> str:
        return value.strip()


class UpdateRequest(CamelModel):
    """Body of POST /update."""
    updated_rows: List[UpdateRequestRow]
    selected_shops: List[str]


class UpdateResult(CamelModel):
    """Outcome for one (row, shop) pair, or for a skipped row."""
    sku: str
    row_number: RowNumber = None
    shop: Optional[str] = None
    shops: Optional[List[str]] = None  # only set when the whole row was skipped
    message: str
