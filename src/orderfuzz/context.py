"""Execution context for one fuzz scenario.

FuzzTestContext bundles every input the execution driver needs to run one
scenario against the protocol: the orders, the protocol instance under
test, the caller to impersonate, the fuzz parameters, the post-execution
checks and the auxiliary call parameters that belong to no single order.

Architecture:
    - FuzzParams: Opaque fuzz seed and generation bounds
    - FuzzTestContext: Frozen value refined through with_* transformations

Value Semantics:
    Contexts are frozen dataclasses and every sequence field is a tuple
    built from the caller's input. A with_* call returns a new context and
    leaves its receiver untouched, so one base context can be branched into
    many iterations. Mutating the list passed to a with_* call afterwards
    never reaches the stored context, and the stored tuples cannot be
    mutated through the context.

Thread Safety:
    Contexts hold no mutable state and may be shared across threads.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import Any, TypeAlias

from orderfuzz.constants import ZERO_ADDRESS, ZERO_BYTES32
from orderfuzz.orders import (
    AdvancedOrder,
    CriteriaResolver,
    Fulfillment,
    FulfillmentComponent,
)

__all__ = ["FuzzParams", "FuzzTestContext"]

CheckId: TypeAlias = str
"""Name of a post-execution check (e.g., 'check_all_orders_filled')."""

FulfillmentGroups: TypeAlias = tuple[tuple[FulfillmentComponent, ...], ...]
"""Offer or consideration components grouped per fulfillment."""


@dataclass(frozen=True, slots=True)
class FuzzParams:
    """Fuzz parameters of a scenario.

    None of these values are interpreted by the context; they are carried
    for downstream randomization and checks.

    Attributes:
        seed: Opaque seed from the data generation engine
        total_orders: Number of orders the generator was asked for
        max_offer_items: Upper bound on offer items per order
        max_consideration_items: Upper bound on consideration items per order
    """

    seed: int = 0
    total_orders: int = 0
    max_offer_items: int = 0
    max_consideration_items: int = 0


def _groups(groups: Iterable[Iterable[FulfillmentComponent]]) -> FulfillmentGroups:
    return tuple(tuple(group) for group in groups)


@dataclass(frozen=True, slots=True)
class FuzzTestContext:
    """Inputs for one fuzz scenario.

    Build with empty() or from_orders(), then refine with the with_*
    methods. Each with_* returns a new context differing from the receiver
    in exactly one field.

    Attributes:
        orders: Orders to fulfill, in fulfillment order
        executor: Protocol instance under test (externally owned)
        caller: Account to impersonate; zero address means none
        fuzz_params: Fuzz seed and generation bounds
        checks: Names of post-execution checks, in execution order
        counter: Offerer counter passed through to the protocol
        fulfiller_conduit_key: Conduit the fulfiller routes transfers through
        criteria_resolvers: Resolutions for criteria-based items
        recipient: Recipient of unspent offer items; zero means the caller
        initial_orders: Orders as first supplied to from_orders()
        fulfillments: Item pairings for match calls
        offer_fulfillments: Offer component groups for fulfill-available calls
        consideration_fulfillments: Consideration component groups for
            fulfill-available calls
        maximum_fulfilled: Cap on orders fulfilled by fulfill-available calls

    Example:
        >>> ctx = FuzzTestContext.from_orders([], None, "0xA", FuzzParams(seed=7))
        >>> ctx = ctx.with_counter(3).with_checks(["check_executions"])
        >>> ctx.fuzz_params.seed, ctx.counter, ctx.checks
        (7, 3, ('check_executions',))
    """

    __test__ = False  # not a pytest test class

    orders: tuple[AdvancedOrder, ...] = ()
    executor: Any = None
    caller: str = ZERO_ADDRESS
    fuzz_params: FuzzParams = field(default_factory=FuzzParams)
    checks: tuple[CheckId, ...] = ()
    counter: int = 0
    fulfiller_conduit_key: bytes = ZERO_BYTES32
    criteria_resolvers: tuple[CriteriaResolver, ...] = ()
    recipient: str = ZERO_ADDRESS
    initial_orders: tuple[AdvancedOrder, ...] = ()
    fulfillments: tuple[Fulfillment, ...] = ()
    offer_fulfillments: FulfillmentGroups = ()
    consideration_fulfillments: FulfillmentGroups = ()
    maximum_fulfilled: int = 0

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls) -> FuzzTestContext:
        """Return the zero-value context.

        Sequence fields are empty tuples, scalars are zero, the executor is
        None and addresses/keys are the zero address/key.
        """
        return cls()

    @classmethod
    def from_orders(
        cls,
        orders: Iterable[AdvancedOrder],
        executor: Any,
        caller: str,
        fuzz_params: FuzzParams,
    ) -> FuzzTestContext:
        """Return a context with orders, executor, caller and fuzz params set.

        The orders are also recorded as initial_orders. Every other field
        keeps its zero value.

        Args:
            orders: Orders to fulfill
            executor: Protocol instance under test
            caller: Account to impersonate
            fuzz_params: Fuzz seed and generation bounds

        Returns:
            New FuzzTestContext
        """
        order_tuple = tuple(orders)
        return cls(
            orders=order_tuple,
            executor=executor,
            caller=caller,
            fuzz_params=fuzz_params,
            initial_orders=order_tuple,
        )

    # ------------------------------------------------------------------
    # Sequence fields (copied)
    # ------------------------------------------------------------------

    def with_orders(self, orders: Iterable[AdvancedOrder]) -> FuzzTestContext:
        """Return a copy with orders replaced by a snapshot of the argument."""
        return replace(self, orders=tuple(orders))

    def with_initial_orders(
        self, initial_orders: Iterable[AdvancedOrder]
    ) -> FuzzTestContext:
        """Return a copy with initial_orders replaced by a snapshot."""
        return replace(self, initial_orders=tuple(initial_orders))

    def with_checks(self, checks: Iterable[CheckId]) -> FuzzTestContext:
        """Return a copy with checks replaced by a snapshot of the argument."""
        return replace(self, checks=tuple(checks))

    def with_criteria_resolvers(
        self, criteria_resolvers: Iterable[CriteriaResolver]
    ) -> FuzzTestContext:
        """Return a copy with criteria resolvers replaced by a snapshot."""
        return replace(self, criteria_resolvers=tuple(criteria_resolvers))

    def with_fulfillments(
        self, fulfillments: Iterable[Fulfillment]
    ) -> FuzzTestContext:
        """Return a copy with match fulfillments replaced by a snapshot."""
        return replace(self, fulfillments=tuple(fulfillments))

    def with_offer_fulfillments(
        self, offer_fulfillments: Iterable[Iterable[FulfillmentComponent]]
    ) -> FuzzTestContext:
        """Return a copy with offer component groups replaced by a snapshot.

        Both the outer sequence and each inner group are copied.
        """
        return replace(self, offer_fulfillments=_groups(offer_fulfillments))

    def with_consideration_fulfillments(
        self, consideration_fulfillments: Iterable[Iterable[FulfillmentComponent]]
    ) -> FuzzTestContext:
        """Return a copy with consideration component groups replaced by a snapshot.

        Both the outer sequence and each inner group are copied.
        """
        return replace(
            self, consideration_fulfillments=_groups(consideration_fulfillments)
        )

    def with_fuzz_params(self, fuzz_params: FuzzParams) -> FuzzTestContext:
        """Return a copy with fuzz params replaced by a copy of the argument.

        FuzzParams is frozen and flat today, so the copy is cheap. It is
        kept so that adding a sequence field to FuzzParams cannot alias.
        """
        return replace(self, fuzz_params=replace(fuzz_params))

    # ------------------------------------------------------------------
    # Scalar and reference fields
    # ------------------------------------------------------------------

    def with_executor(self, executor: Any) -> FuzzTestContext:
        """Return a copy targeting another protocol instance."""
        return replace(self, executor=executor)

    def with_caller(self, caller: str) -> FuzzTestContext:
        """Return a copy impersonating another account."""
        return replace(self, caller=caller)

    def with_counter(self, counter: int) -> FuzzTestContext:
        """Return a copy with another offerer counter."""
        return replace(self, counter=counter)

    def with_fulfiller_conduit_key(
        self, fulfiller_conduit_key: bytes
    ) -> FuzzTestContext:
        """Return a copy with another fulfiller conduit key."""
        return replace(self, fulfiller_conduit_key=fulfiller_conduit_key)

    def with_recipient(self, recipient: str) -> FuzzTestContext:
        """Return a copy with another recipient."""
        return replace(self, recipient=recipient)

    def with_maximum_fulfilled(self, maximum_fulfilled: int) -> FuzzTestContext:
        """Return a copy with another maximum-fulfilled cap."""
        return replace(self, maximum_fulfilled=maximum_fulfilled)
