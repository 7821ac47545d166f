"""Name-based registry of zone variants.

Scenario builders pick a zone by name and inject the instance into the
execution driver, which only relies on the ValidationOracle capability.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import MappingProxyType
from typing import Any

from orderfuzz.errors import UnknownZoneError

from .interface import ValidationOracle
from .variants import BadZone, GoodZone

__all__ = ["ZONE_VARIANTS", "create_zone"]

logger = logging.getLogger(__name__)

# Read-only so callers cannot register variants behind the harness's back.
ZONE_VARIANTS: MappingProxyType[str, Callable[..., ValidationOracle]] = MappingProxyType(
    {
        GoodZone.name: GoodZone,
        BadZone.name: BadZone,
    }
)


def create_zone(name: str, **kwargs: Any) -> ValidationOracle:
    """Instantiate a registered zone variant.

    Args:
        name: Variant name ("GoodZone" or "BadZone")
        **kwargs: Forwarded to the variant constructor

    Returns:
        New zone instance

    Raises:
        UnknownZoneError: If name is not registered

    Example:
        >>> create_zone("BadZone", expected_identifier=5)
        BadZone(expected_identifier=5)
    """
    factory = ZONE_VARIANTS.get(name)
    if factory is None:
        logger.warning("Unknown zone variant '%s' (known: %s)", name, ", ".join(ZONE_VARIANTS))
        raise UnknownZoneError(name)
    return factory(**kwargs)
