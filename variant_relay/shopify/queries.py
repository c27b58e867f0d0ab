"""
GraphQL query strings for Shopify Admin API.
"""


# Look up at most one variant by SKU
VARIANT_BY_SKU_QUERY = '''
query variantBySku($query: String!) {
  productVariants(first: 1, query: $query) {
    edges {
      node {
        id
        sku
        title
        price
        compareAtPrice
        inventoryQuantity
        barcode
        image {
          url
        }
        product {
          id
          title
          status
          vendor
          productType
        }
      }
    }
  }
}
'''


def build_sku_search(sku: str) -> str:
    """
    Build the search string for a SKU.

    Args:
        sku: Merchant SKU, may contain spaces or quotes

    Returns:
        Search syntax string, e.g. 'sku:"SKU123"'
    """
    escaped = sku.replace("\\", "\\\\").replace('"', '\\"')
    return f'sku:"{escaped}"'
