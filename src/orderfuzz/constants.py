"""Shared constants for orderfuzz.

Centralized protocol values used by the order model, the context builder and
the zone variants. Placing them here avoids circular imports between
``orders``, ``context`` and ``zones`` and keeps a single source of truth.

Constants are grouped by domain:
- Zero values: Default address, key and hash for empty fields
- Selectors: 4-byte function selectors of the zone capability
- Interface ids: ERC-165 capability identifiers
- Zone metadata: Schema id and default sentinel for the conditional zone

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Zero values
    "ZERO_ADDRESS",
    "ZERO_BYTES32",
    # Selectors
    "VALIDATE_ORDER_SELECTOR",
    "GET_SEAPORT_METADATA_SELECTOR",
    "SUPPORTS_INTERFACE_SELECTOR",
    "VALID_ORDER_MAGIC",
    "REJECTED_RESPONSE",
    # Interface ids
    "ERC165_INTERFACE_ID",
    "ZONE_INTERFACE_ID",
    # Zone metadata
    "ZONE_SCHEMA_ID",
    "DEFAULT_EXPECTED_IDENTIFIER",
]

# ============================================================================
# ZERO VALUES
# ============================================================================

# A zero caller means "no impersonation"; a zero recipient means "the caller".
ZERO_ADDRESS: str = "0x" + "0" * 40

# Zero conduit key, zone hash and order hash.
ZERO_BYTES32: bytes = bytes(32)

# ============================================================================
# SELECTORS
# ============================================================================

# validateOrder(ZoneParameters)
VALIDATE_ORDER_SELECTOR: bytes = bytes.fromhex("17b1f942")

# getSeaportMetadata()
GET_SEAPORT_METADATA_SELECTOR: bytes = bytes.fromhex("2e778efc")

# supportsInterface(bytes4)
SUPPORTS_INTERFACE_SELECTOR: bytes = bytes.fromhex("01ffc9a7")

# A zone approves an order by echoing the validateOrder selector.
# Any other response, including an empty one, is a rejection.
VALID_ORDER_MAGIC: bytes = VALIDATE_ORDER_SELECTOR

# Zero-length response returned by a zone that rejects without reverting.
REJECTED_RESPONSE: bytes = b""

# ============================================================================
# INTERFACE IDS
# ============================================================================


def _xor_selectors(*selectors: bytes) -> bytes:
    """Combine selectors into an ERC-165 interface id."""
    value = 0
    for selector in selectors:
        value ^= int.from_bytes(selector, "big")
    return value.to_bytes(4, "big")


# ERC-165 introspection capability (the interface id equals its only selector).
ERC165_INTERFACE_ID: bytes = SUPPORTS_INTERFACE_SELECTOR

# Zone capability: functions declared by the zone interface itself.
# Inherited introspection functions are not part of the id.
ZONE_INTERFACE_ID: bytes = _xor_selectors(
    VALIDATE_ORDER_SELECTOR, GET_SEAPORT_METADATA_SELECTOR
)

# ============================================================================
# ZONE METADATA
# ============================================================================

# Schema id reported by the test zones through getSeaportMetadata().
ZONE_SCHEMA_ID: int = 3003

# Identifier the conditional zone expects on the first consideration item.
DEFAULT_EXPECTED_IDENTIFIER: int = 1
