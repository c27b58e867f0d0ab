"""
Errors raised by the fetch and update handlers.
"""


class RelayError(Exception):
    """Base error for handler failures."""
    pass


class InvalidInputError(RelayError):
    """Required input is missing or malformed."""
    pass


class VariantNotFoundError(RelayError):
    """No variant matches the requested SKU."""
    pass
