"""Concrete zone variants used by fuzz scenarios.

    - GoodZone: Approves every order
    - BadZone: Approves only orders whose first consideration item carries
      the expected identifier, and rejects the rest with a zero-length
      response instead of raising

Both variants are stateless apart from their configured rule, so a single
instance can serve concurrent calls.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from orderfuzz.constants import DEFAULT_EXPECTED_IDENTIFIER, ZONE_SCHEMA_ID
from orderfuzz.errors import MalformedZoneParametersError
from orderfuzz.orders import Schema

from .interface import Decision, supports_zone_interface

if TYPE_CHECKING:
    from orderfuzz.orders import ZoneParameters

__all__ = ["BadZone", "GoodZone"]

logger = logging.getLogger(__name__)

# Both zones publish the same single schema with an empty payload.
_ZONE_SCHEMAS: tuple[Schema, ...] = (Schema(id=ZONE_SCHEMA_ID, metadata=b""),)


class GoodZone:
    """Zone that approves every order and ignores its input.

    Example:
        >>> GoodZone().validate_order(ZoneParameters()).hex()
        '17b1f942'
    """

    __slots__ = ()

    name = "GoodZone"

    def decide(self, parameters: ZoneParameters) -> Decision:  # noqa: ARG002
        """Approve unconditionally."""
        return Decision.APPROVED

    def validate_order(self, parameters: ZoneParameters) -> bytes:
        """Return the valid-order magic value."""
        return self.decide(parameters).to_response()

    def get_seaport_metadata(self) -> tuple[str, tuple[Schema, ...]]:
        """Return ("GoodZone", (Schema(3003, b""),))."""
        return self.name, _ZONE_SCHEMAS

    def supports_interface(self, interface_id: bytes) -> bool:
        """Report support for the zone and introspection capabilities."""
        return supports_zone_interface(interface_id)

    def __repr__(self) -> str:
        return "GoodZone()"


class BadZone:
    """Zone that approves only a specific first consideration identifier.

    The identifier of parameters.consideration[0] is compared against
    expected_identifier. A match approves; anything else rejects by
    returning a zero-length response. A rejection is an ordinary return
    value and the protocol continues with the next order.

    Zone parameters without any consideration item cannot be judged and
    raise MalformedZoneParametersError; this is a harness contract
    violation, distinct from a rejection.

    Attributes:
        expected_identifier: Identifier that approves an order

    Example:
        >>> zone = BadZone(expected_identifier=1)
        >>> zone.decide(ZoneParameters(consideration=(ReceivedItem(identifier=1),)))
        <Decision.APPROVED: 'approved'>
        >>> zone.validate_order(ZoneParameters(consideration=(ReceivedItem(identifier=2),)))
        b''
    """

    __slots__ = ("_expected_identifier",)

    name = "BadZone"

    def __init__(self, expected_identifier: int = DEFAULT_EXPECTED_IDENTIFIER) -> None:
        """Initialize with the identifier that approves an order."""
        self._expected_identifier = expected_identifier

    @property
    def expected_identifier(self) -> int:
        """Identifier that approves an order."""
        return self._expected_identifier

    def decide(self, parameters: ZoneParameters) -> Decision:
        """Approve iff the first consideration identifier matches.

        Raises:
            MalformedZoneParametersError: If parameters has no consideration
        """
        if not parameters.consideration:
            msg = "BadZone requires at least one consideration item"
            raise MalformedZoneParametersError(msg, field_name="consideration")

        identifier = parameters.consideration[0].identifier
        if identifier == self._expected_identifier:
            return Decision.APPROVED

        logger.debug(
            "BadZone rejected order %s: identifier %s != expected %s",
            parameters.order_hash.hex(),
            identifier,
            self._expected_identifier,
        )
        return Decision.REJECTED

    def validate_order(self, parameters: ZoneParameters) -> bytes:
        """Return the valid-order magic value, or b"" on rejection."""
        return self.decide(parameters).to_response()

    def get_seaport_metadata(self) -> tuple[str, tuple[Schema, ...]]:
        """Return ("BadZone", (Schema(3003, b""),))."""
        return self.name, _ZONE_SCHEMAS

    def supports_interface(self, interface_id: bytes) -> bool:
        """Report support for the zone and introspection capabilities."""
        return supports_zone_interface(interface_id)

    def __repr__(self) -> str:
        return f"BadZone(expected_identifier={self._expected_identifier!r})"
