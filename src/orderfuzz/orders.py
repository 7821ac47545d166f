"""Immutable order model for fuzz scenarios.

Record types mirroring the order-fulfillment protocol's structs:
    - OfferItem / ConsiderationItem: Items an order offers and requires
    - OrderParameters / AdvancedOrder: One party's signed order
    - CriteriaResolver: Resolves a criteria-based item at execution time
    - FulfillmentComponent / Fulfillment: Item pairings for match calls
    - SpentItem / ReceivedItem / ZoneParameters: What a zone is shown
    - Schema: One zone metadata record

Immutability:
    Every record is a frozen dataclass. Sequence fields are normalized to
    tuples in __post_init__, so a record built from a caller's list never
    shares storage with it. Records can therefore be shared freely between
    contexts and fuzz iterations without copying.

Values are not validated. Out-of-range item types, inverted time windows
or zero denominators are legitimate fuzz inputs; rejecting them is the
protocol's job.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeAlias, TypeVar

from orderfuzz.constants import ZERO_ADDRESS, ZERO_BYTES32
from orderfuzz.enums import ItemType, OrderType, Side

__all__ = [
    "AdvancedOrder",
    "ConsiderationItem",
    "CriteriaResolver",
    "Fulfillment",
    "FulfillmentComponent",
    "OfferItem",
    "OrderParameters",
    "ReceivedItem",
    "Schema",
    "SpentItem",
    "ZoneParameters",
]

Address: TypeAlias = str
"""Hex account address (e.g., '0x' followed by 40 hex digits)."""


T = TypeVar("T")


def _freeze(items: Iterable[T]) -> tuple[T, ...]:
    """Copy an iterable into a tuple (no-op for tuples)."""
    return items if isinstance(items, tuple) else tuple(items)


def _freeze_attr(instance: object, *names: str) -> None:
    for name in names:
        object.__setattr__(instance, name, _freeze(getattr(instance, name)))


# ============================================================================
# ITEMS
# ============================================================================


@dataclass(frozen=True, slots=True)
class OfferItem:
    """Item an offerer supplies.

    Attributes:
        item_type: Asset kind (ItemType member or raw fuzzed int)
        token: Token contract address (zero address for NATIVE)
        identifier_or_criteria: Token id, or merkle root for criteria items
        start_amount: Amount at order start time
        end_amount: Amount at order end time
    """

    item_type: ItemType | int = ItemType.NATIVE
    token: Address = ZERO_ADDRESS
    identifier_or_criteria: int = 0
    start_amount: int = 0
    end_amount: int = 0


@dataclass(frozen=True, slots=True)
class ConsiderationItem:
    """Item an order requires in return, paid to recipient.

    Attributes:
        item_type: Asset kind (ItemType member or raw fuzzed int)
        token: Token contract address (zero address for NATIVE)
        identifier_or_criteria: Token id, or merkle root for criteria items
        start_amount: Amount at order start time
        end_amount: Amount at order end time
        recipient: Address receiving the item
    """

    item_type: ItemType | int = ItemType.NATIVE
    token: Address = ZERO_ADDRESS
    identifier_or_criteria: int = 0
    start_amount: int = 0
    end_amount: int = 0
    recipient: Address = ZERO_ADDRESS


@dataclass(frozen=True, slots=True)
class SpentItem:
    """Offer item as resolved at execution time."""

    item_type: ItemType | int = ItemType.NATIVE
    token: Address = ZERO_ADDRESS
    identifier: int = 0
    amount: int = 0


@dataclass(frozen=True, slots=True)
class ReceivedItem:
    """Consideration item as resolved at execution time."""

    item_type: ItemType | int = ItemType.NATIVE
    token: Address = ZERO_ADDRESS
    identifier: int = 0
    amount: int = 0
    recipient: Address = ZERO_ADDRESS


# ============================================================================
# ORDERS
# ============================================================================


@dataclass(frozen=True, slots=True)
class OrderParameters:
    """Signed body of an order.

    Attributes:
        offerer: Account offering the items
        zone: Zone consulted for restricted orders
        offer: Items offered (normalized to tuple)
        consideration: Items required in return (normalized to tuple)
        order_type: Fill and restriction policy
        start_time: Validity window start (seconds)
        end_time: Validity window end (seconds)
        zone_hash: Opaque value forwarded to the zone
        salt: Entropy making otherwise identical orders distinct
        conduit_key: Conduit the offerer approves transfers through
        total_original_consideration_items: Consideration count at signing
    """

    offerer: Address = ZERO_ADDRESS
    zone: Address = ZERO_ADDRESS
    offer: tuple[OfferItem, ...] = ()
    consideration: tuple[ConsiderationItem, ...] = ()
    order_type: OrderType | int = OrderType.FULL_OPEN
    start_time: int = 0
    end_time: int = 0
    zone_hash: bytes = ZERO_BYTES32
    salt: int = 0
    conduit_key: bytes = ZERO_BYTES32
    total_original_consideration_items: int = 0

    def __post_init__(self) -> None:
        """Normalize item sequences to tuples."""
        _freeze_attr(self, "offer", "consideration")


@dataclass(frozen=True, slots=True)
class AdvancedOrder:
    """Order plus the fill fraction and per-call data used to fulfill it.

    Attributes:
        parameters: Signed order body
        numerator: Fill fraction numerator
        denominator: Fill fraction denominator
        signature: Offerer signature bytes
        extra_data: Data forwarded to the zone
    """

    parameters: OrderParameters = OrderParameters()
    numerator: int = 1
    denominator: int = 1
    signature: bytes = b""
    extra_data: bytes = b""

    @property
    def offer(self) -> tuple[OfferItem, ...]:
        """Offer items of the underlying parameters."""
        return self.parameters.offer

    @property
    def consideration(self) -> tuple[ConsiderationItem, ...]:
        """Consideration items of the underlying parameters."""
        return self.parameters.consideration


@dataclass(frozen=True, slots=True)
class CriteriaResolver:
    """Supplies the concrete identifier for a criteria-based item.

    Attributes:
        order_index: Index of the order in the context's order list
        side: Offer or consideration list of that order
        index: Item index within that list
        identifier: Concrete token id chosen by the fulfiller
        criteria_proof: Merkle proof elements (normalized to tuple)
    """

    order_index: int = 0
    side: Side | int = Side.OFFER
    index: int = 0
    identifier: int = 0
    criteria_proof: tuple[bytes, ...] = ()

    def __post_init__(self) -> None:
        """Normalize the proof to a tuple."""
        _freeze_attr(self, "criteria_proof")


@dataclass(frozen=True, slots=True)
class FulfillmentComponent:
    """Points at one item of one order."""

    order_index: int = 0
    item_index: int = 0


@dataclass(frozen=True, slots=True)
class Fulfillment:
    """Offer components matched against consideration components."""

    offer_components: tuple[FulfillmentComponent, ...] = ()
    consideration_components: tuple[FulfillmentComponent, ...] = ()

    def __post_init__(self) -> None:
        """Normalize component sequences to tuples."""
        _freeze_attr(self, "offer_components", "consideration_components")


# ============================================================================
# ZONE INTERFACE TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class ZoneParameters:
    """Arguments the protocol passes to a zone's validate_order.

    Attributes:
        order_hash: Hash of the order being validated
        fulfiller: Account fulfilling the order
        offerer: Account that created the order
        offer: Items spent by the offerer (normalized to tuple)
        consideration: Items received in return (normalized to tuple)
        extra_data: Data supplied by the fulfiller for the zone
        order_hashes: Hashes of all orders fulfilled in the same call
        start_time: Order validity window start
        end_time: Order validity window end
        zone_hash: Opaque value the offerer signed for the zone
    """

    order_hash: bytes = ZERO_BYTES32
    fulfiller: Address = ZERO_ADDRESS
    offerer: Address = ZERO_ADDRESS
    offer: tuple[SpentItem, ...] = ()
    consideration: tuple[ReceivedItem, ...] = ()
    extra_data: bytes = b""
    order_hashes: tuple[bytes, ...] = ()
    start_time: int = 0
    end_time: int = 0
    zone_hash: bytes = ZERO_BYTES32

    def __post_init__(self) -> None:
        """Normalize sequences to tuples."""
        _freeze_attr(self, "offer", "consideration", "order_hashes")

    @classmethod
    def from_order(
        cls,
        order: AdvancedOrder,
        *,
        order_hash: bytes = ZERO_BYTES32,
        fulfiller: Address = ZERO_ADDRESS,
        order_hashes: Iterable[bytes] = (),
    ) -> ZoneParameters:
        """Derive the zone call arguments for an order.

        Amounts are taken from start_amount and identifiers from
        identifier_or_criteria; no time-based interpolation or criteria
        resolution is applied.

        Args:
            order: Order being validated
            order_hash: Hash the protocol computed for the order
            fulfiller: Account fulfilling the order
            order_hashes: Hashes of all orders in the same call

        Returns:
            ZoneParameters for the order

        Example:
            >>> order = AdvancedOrder(OrderParameters(
            ...     consideration=(ConsiderationItem(identifier_or_criteria=1),),
            ... ))
            >>> ZoneParameters.from_order(order).consideration[0].identifier
            1
        """
        params = order.parameters
        return cls(
            order_hash=order_hash,
            fulfiller=fulfiller,
            offerer=params.offerer,
            offer=tuple(
                SpentItem(
                    item_type=item.item_type,
                    token=item.token,
                    identifier=item.identifier_or_criteria,
                    amount=item.start_amount,
                )
                for item in params.offer
            ),
            consideration=tuple(
                ReceivedItem(
                    item_type=item.item_type,
                    token=item.token,
                    identifier=item.identifier_or_criteria,
                    amount=item.start_amount,
                    recipient=item.recipient,
                )
                for item in params.consideration
            ),
            extra_data=order.extra_data,
            order_hashes=tuple(order_hashes),
            start_time=params.start_time,
            end_time=params.end_time,
            zone_hash=params.zone_hash,
        )


@dataclass(frozen=True, slots=True)
class Schema:
    """One zone metadata record: schema id and opaque payload."""

    id: int
    metadata: bytes = b""
