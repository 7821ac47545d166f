"""Enumerations for orderfuzz type-safe constants.

Protocol enums use IntEnum so members compare equal to the integer values
the protocol encodes on the wire: ItemType.ERC721 == 2.

Python 3.13+.
"""

from enum import IntEnum


class ItemType(IntEnum):
    """Kind of asset carried by an offer or consideration item."""

    NATIVE = 0
    """Chain-native currency; token is the zero address."""

    ERC20 = 1
    """Fungible token; identifier is ignored."""

    ERC721 = 2
    """Non-fungible token identified by token id."""

    ERC1155 = 3
    """Semi-fungible token identified by token id."""

    ERC721_WITH_CRITERIA = 4
    """ERC721 item whose identifier is a merkle root resolved at fulfillment."""

    ERC1155_WITH_CRITERIA = 5
    """ERC1155 item whose identifier is a merkle root resolved at fulfillment."""


class OrderType(IntEnum):
    """Fill and restriction policy of an order.

    Restricted orders are the ones the protocol routes through a zone.
    """

    FULL_OPEN = 0
    PARTIAL_OPEN = 1
    FULL_RESTRICTED = 2
    PARTIAL_RESTRICTED = 3
    CONTRACT = 4


class Side(IntEnum):
    """Which item list of an order a criteria resolver targets."""

    OFFER = 0
    CONSIDERATION = 1


__all__ = [
    "ItemType",
    "OrderType",
    "Side",
]
