"""State machine fuzzer for FuzzTestContext branching and zone calls.

Generates random trees of contexts: each rule picks an existing context,
applies one with_* setter, then scrambles the argument it passed in. A
ShadowContext mirrors every branch. After each step every context ever
produced must still match its shadow, which fails on any aliasing between
branches or between a context and its caller's arguments.

Zone rules run the orders of a random context through GoodZone and BadZone
and check the decision against the first consideration identifier.

Run with:
    pytest tests/fuzz/test_context_state_machine.py -v

Python 3.13+.
"""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import event, settings
from hypothesis import strategies as st
from hypothesis.stateful import (
    Bundle,
    RuleBasedStateMachine,
    initialize,
    invariant,
    rule,
)

from orderfuzz.context import FuzzTestContext
from orderfuzz.orders import ZoneParameters
from orderfuzz.zones import BadZone, Decision, GoodZone, interpret_response
from tests.strategies.orders import (
    addresses,
    advanced_orders,
    bytes32,
    check_ids,
    component_groups,
    criteria_resolvers,
    fulfillments,
    fuzz_params,
    small_identifiers,
    uint256,
)

from .shadow_context import SETTER_FIELDS, ShadowContext

# Mark entire module as fuzz tests (excluded from normal test runs)
pytestmark = pytest.mark.fuzz

_VALUE_STRATEGIES: dict[str, st.SearchStrategy[Any]] = {
    "with_orders": st.lists(advanced_orders(), max_size=3),
    "with_initial_orders": st.lists(advanced_orders(), max_size=2),
    "with_executor": st.sampled_from(["reference", "optimized", None]),
    "with_caller": addresses,
    "with_fuzz_params": fuzz_params,
    "with_checks": st.lists(check_ids, max_size=4),
    "with_counter": uint256,
    "with_fulfiller_conduit_key": bytes32,
    "with_criteria_resolvers": st.lists(criteria_resolvers, max_size=3),
    "with_recipient": addresses,
    "with_fulfillments": st.lists(fulfillments, max_size=3),
    "with_offer_fulfillments": component_groups,
    "with_consideration_fulfillments": component_groups,
    "with_maximum_fulfilled": st.integers(0, 16),
}


def _scramble(value: Any) -> None:
    """Mutate a caller-owned list argument in place (and its inner lists)."""
    if not isinstance(value, list):
        return
    for item in value:
        if isinstance(item, list):
            item.clear()
    value.reverse()
    value.append(value[0] if value else [])


class ContextBranchingStateMachine(RuleBasedStateMachine):
    """Branch contexts at random and compare each against its shadow."""

    contexts = Bundle("contexts")

    def __init__(self) -> None:
        super().__init__()
        self.history: list[tuple[FuzzTestContext, ShadowContext]] = []

    @initialize(target=contexts)
    def init_empty(self) -> tuple[FuzzTestContext, ShadowContext]:
        pair = (FuzzTestContext.empty(), ShadowContext())
        self.history.append(pair)
        return pair

    @rule(
        target=contexts,
        orders=st.lists(advanced_orders(), max_size=3),
        caller=addresses,
        params=fuzz_params,
    )
    def from_orders(
        self, orders: list[Any], caller: str, params: Any
    ) -> tuple[FuzzTestContext, ShadowContext]:
        ctx = FuzzTestContext.from_orders(orders, "reference", caller, params)
        shadow = (
            ShadowContext()
            .apply("with_orders", orders)
            .apply("with_initial_orders", orders)
            .apply("with_executor", "reference")
            .apply("with_caller", caller)
            .apply("with_fuzz_params", params)
        )
        _scramble(orders)
        pair = (ctx, shadow)
        self.history.append(pair)
        return pair

    @rule(target=contexts, parent=contexts, data=st.data())
    def branch(
        self, parent: tuple[FuzzTestContext, ShadowContext], data: st.DataObject
    ) -> tuple[FuzzTestContext, ShadowContext]:
        ctx, shadow = parent
        setter = data.draw(st.sampled_from(sorted(SETTER_FIELDS)), label="setter")
        value = data.draw(_VALUE_STRATEGIES[setter], label="value")
        event(f"branch={setter}")

        child = (getattr(ctx, setter)(value), shadow.apply(setter, value))
        _scramble(value)

        self.history.append(child)
        return child

    @rule(pair=contexts, sentinel=small_identifiers)
    def run_zones(self, pair: tuple[FuzzTestContext, ShadowContext], sentinel: int) -> None:
        ctx, _shadow = pair
        good = GoodZone()
        bad = BadZone(expected_identifier=sentinel)
        for order in ctx.orders:
            params = ZoneParameters.from_order(order)
            assert interpret_response(good.validate_order(params)) is Decision.APPROVED
            if not params.consideration:
                event("zone=no_consideration")
                continue
            expected = (
                Decision.APPROVED
                if params.consideration[0].identifier == sentinel
                else Decision.REJECTED
            )
            event(f"zone={expected}")
            assert bad.decide(params) is expected
            assert interpret_response(bad.validate_order(params)) is expected

    @invariant()
    def every_context_matches_shadow(self) -> None:
        for ctx, shadow in self.history:
            assert shadow.mismatches(ctx) == []


TestContextBranching = ContextBranchingStateMachine.TestCase
TestContextBranching.settings = settings(
    max_examples=100, stateful_step_count=30, deadline=None
)
