"""Zone capability interface and decision encoding.

A zone is the validation oracle the protocol consults while executing a
restricted order. The protocol only looks at the raw response: an order is
approved when the zone returns the 4-byte valid-order magic value, and
rejected on any other response, including a zero-length one. Rejection is
a normal outcome, not a fault.

Internally the decision is an explicit Decision enum; Decision.to_response()
encodes it for the protocol and interpret_response() decodes a raw response
the way the protocol does.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from orderfuzz.constants import (
    ERC165_INTERFACE_ID,
    REJECTED_RESPONSE,
    VALID_ORDER_MAGIC,
    ZONE_INTERFACE_ID,
)

if TYPE_CHECKING:
    from orderfuzz.orders import Schema, ZoneParameters

__all__ = [
    "SUPPORTED_INTERFACE_IDS",
    "Decision",
    "ValidationOracle",
    "interpret_response",
    "supports_zone_interface",
]

# Zone capability plus the introspection capability it is layered on.
SUPPORTED_INTERFACE_IDS: frozenset[bytes] = frozenset(
    {ZONE_INTERFACE_ID, ERC165_INTERFACE_ID}
)


class Decision(StrEnum):
    """Outcome of one validate_order call.

    StrEnum provides automatic string conversion: str(Decision.APPROVED) == "approved"
    """

    APPROVED = "approved"
    """Zone returned the valid-order magic value."""

    REJECTED = "rejected"
    """Zone returned anything else; encoded as a zero-length response."""

    def to_response(self) -> bytes:
        """Encode the decision as the raw bytes the protocol receives."""
        if self is Decision.APPROVED:
            return VALID_ORDER_MAGIC
        return REJECTED_RESPONSE


def interpret_response(response: bytes) -> Decision:
    """Decode a raw zone response the way the protocol does.

    Only an exact match of the valid-order magic value approves. Empty
    responses, other 4-byte values and longer payloads all reject.

    Args:
        response: Raw bytes returned by validate_order

    Returns:
        Decision.APPROVED or Decision.REJECTED

    Example:
        >>> interpret_response(bytes.fromhex("17b1f942"))
        <Decision.APPROVED: 'approved'>
        >>> interpret_response(b"")
        <Decision.REJECTED: 'rejected'>
    """
    if response == VALID_ORDER_MAGIC:
        return Decision.APPROVED
    return Decision.REJECTED


def supports_zone_interface(interface_id: bytes) -> bool:
    """Check whether interface_id is one every zone implements."""
    return interface_id in SUPPORTED_INTERFACE_IDS


# pylint: disable=unnecessary-ellipsis
# Ellipsis (...) is the standard Protocol method body per PEP 544
@runtime_checkable
class ValidationOracle(Protocol):
    """Capability interface every zone variant implements.

    Runtime-checkable so discovery code can test isinstance(obj,
    ValidationOracle) without knowing the concrete variant.
    """

    def decide(self, parameters: ZoneParameters) -> Decision:
        """Decide whether to approve the order described by parameters."""
        ...

    def validate_order(self, parameters: ZoneParameters) -> bytes:
        """Return the valid-order magic value, or a zero-length rejection."""
        ...

    def get_seaport_metadata(self) -> tuple[str, tuple[Schema, ...]]:
        """Return the zone name and its metadata schemas."""
        ...

    def supports_interface(self, interface_id: bytes) -> bool:
        """Report whether the zone implements interface_id."""
        ...
# pylint: enable=unnecessary-ellipsis
