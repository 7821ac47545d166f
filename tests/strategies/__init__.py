"""Hypothesis strategies for orderfuzz property-based testing.

Strategies are organized by domain:

- orders: Items, orders, resolvers, fulfillments, contexts and zone parameters

Usage:
    from tests.strategies import advanced_orders, fuzz_contexts
    from tests.strategies.orders import zone_parameters_for

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - advanced_orders, fuzz_contexts, zone_parameters_for
"""

from .orders import (
    UINT256_MAX,
    addresses,
    advanced_orders,
    bytes32,
    check_ids,
    component_groups,
    consideration_items,
    criteria_resolvers,
    fulfillment_components,
    fulfillments,
    fuzz_contexts,
    fuzz_params,
    identifiers,
    item_types,
    offer_items,
    order_parameters,
    received_items,
    small_identifiers,
    spent_items,
    uint256,
    zone_parameters,
    zone_parameters_for,
)

__all__ = [
    "UINT256_MAX",
    "addresses",
    "advanced_orders",
    "bytes32",
    "check_ids",
    "component_groups",
    "consideration_items",
    "criteria_resolvers",
    "fulfillment_components",
    "fulfillments",
    "fuzz_contexts",
    "fuzz_params",
    "identifiers",
    "item_types",
    "offer_items",
    "order_parameters",
    "received_items",
    "small_identifiers",
    "spent_items",
    "uint256",
    "zone_parameters",
    "zone_parameters_for",
]
