"""
Processor package for fetch and update operations.
"""

from .errors import RelayError, InvalidInputError, VariantNotFoundError
from .fetch import fetch_variant, normalize_variant
from .update import (
    update_variants,
    describe_failure,
    ClientFactory,
    SKIPPED_MESSAGE,
    SUCCESS_MESSAGE,
)

__all__ = [
    "RelayError",
    "InvalidInputError",
    "VariantNotFoundError",
    "fetch_variant",
    "normalize_variant",
    "update_variants",
    "describe_failure",
    "ClientFactory",
    "SKIPPED_MESSAGE",
    "SUCCESS_MESSAGE",
]
