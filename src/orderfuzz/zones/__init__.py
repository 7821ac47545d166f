"""Validation oracles (zones) consulted by the protocol during execution.

Exports:
    ValidationOracle: Runtime-checkable capability protocol
    Decision: Explicit approve/reject outcome
    GoodZone: Always-approve variant
    BadZone: Identifier-conditioned variant with silent rejection
    interpret_response: Decode a raw zone response as the protocol does
    create_zone: Instantiate a variant by name

Python 3.13+.
"""

from .interface import (
    SUPPORTED_INTERFACE_IDS,
    Decision,
    ValidationOracle,
    interpret_response,
    supports_zone_interface,
)
from .registry import ZONE_VARIANTS, create_zone
from .variants import BadZone, GoodZone

__all__ = [
    "SUPPORTED_INTERFACE_IDS",
    "ZONE_VARIANTS",
    "BadZone",
    "Decision",
    "GoodZone",
    "ValidationOracle",
    "create_zone",
    "interpret_response",
    "supports_zone_interface",
]
