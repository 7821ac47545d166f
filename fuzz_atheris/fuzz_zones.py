#!/usr/bin/env python3
# FUZZ_PLUGIN_HEADER_START
# FUZZ_PLUGIN: zones - Context Builder and Zone Oracles
# FUZZ_PLUGIN_HEADER_END
"""Context and Zone Fuzzer (Atheris).

Builds FuzzTestContext values and zone parameters from raw libFuzzer bytes
and checks the library's contracts:
- Branching a context never changes the parent or any sibling
- Scrambling a setter's list argument afterwards never reaches the context
- GoodZone always answers with the valid-order magic value
- BadZone approves iff the first consideration identifier is the sentinel,
  answers b"" otherwise, and raises only MalformedZoneParametersError
- interpret_response approves only the exact magic value

Metrics:
- Pattern coverage
- Zone decision distribution
- Contract violations (raised as ZoneFuzzError, reported as findings)

Run with:
    python fuzz_atheris/fuzz_zones.py -runs=100000
"""

from __future__ import annotations

import argparse
import atexit
import json
import logging
import pathlib
import sys
from dataclasses import asdict, dataclass, field
from typing import Any

_atheris_mod: Any = None

try:  # noqa: SIM105 - need module ref for dependency check
    import atheris as _atheris_mod  # type: ignore[no-redef]
except ImportError:
    pass

if _atheris_mod is None:
    print("-" * 80, file=sys.stderr)
    print("ERROR: Missing required dependency for fuzzing: atheris", file=sys.stderr)
    print("Install with: pip install 'orderfuzz[fuzz]'", file=sys.stderr)
    print("-" * 80, file=sys.stderr)
    sys.exit(1)

import atheris  # noqa: E402  # pylint: disable=C0412,C0413

# --- Domain Metrics ---


@dataclass
class ZoneFuzzStats:
    """Counters reported at exit."""

    iterations: int = 0
    findings: int = 0
    pattern_coverage: dict[str, int] = field(default_factory=dict)
    decisions: dict[str, int] = field(default_factory=dict)
    malformed_rejections: int = 0
    checkpoint_interval: int = 1000


_stats = ZoneFuzzStats()

_PATTERN_WEIGHTS: tuple[tuple[str, int], ...] = (
    ("context_branching", 35),
    ("zone_decision", 35),
    ("response_decoding", 20),
    ("malformed_parameters", 10),
)

_PATTERN_SCHEDULE: tuple[str, ...] = tuple(
    name for name, weight in _PATTERN_WEIGHTS for _ in range(weight)
)


class ZoneFuzzError(Exception):
    """Raised when a contract violation is detected."""


# --- Reporting ---

_REPORT_DIR = pathlib.Path(".fuzz_atheris_corpus") / "zones"
_REPORT_FILENAME = "fuzz_zones_report.json"


def _emit_report() -> None:
    """Write the stats report (best effort at interpreter exit)."""
    _REPORT_DIR.mkdir(parents=True, exist_ok=True)
    report = _REPORT_DIR / _REPORT_FILENAME
    report.write_text(json.dumps(asdict(_stats), indent=2, sort_keys=True), encoding="utf-8")
    print(f"[zones] {_stats.iterations} iterations, {_stats.findings} findings -> {report}")


atexit.register(_emit_report)

# Suppress logging and instrument imports
logging.getLogger("orderfuzz").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["orderfuzz"]):
    from orderfuzz.constants import VALID_ORDER_MAGIC
    from orderfuzz.context import FuzzParams, FuzzTestContext
    from orderfuzz.errors import MalformedZoneParametersError
    from orderfuzz.orders import (
        AdvancedOrder,
        ConsiderationItem,
        OfferItem,
        OrderParameters,
        ReceivedItem,
        ZoneParameters,
    )
    from orderfuzz.zones import BadZone, Decision, GoodZone, interpret_response


# --- Input Generators ---


def _gen_address(fdp: atheris.FuzzedDataProvider) -> str:
    return "0x" + fdp.ConsumeBytes(20).ljust(20, b"\x00").hex()


def _gen_identifier(fdp: atheris.FuzzedDataProvider) -> int:
    # Mostly tiny values so the sentinel is hit regularly.
    if fdp.ConsumeBool():
        return fdp.ConsumeIntInRange(0, 3)
    return fdp.ConsumeIntInRange(0, 2**256 - 1)


def _gen_order(fdp: atheris.FuzzedDataProvider) -> AdvancedOrder:
    offer = [
        OfferItem(
            item_type=fdp.ConsumeIntInRange(0, 5),
            token=_gen_address(fdp),
            identifier_or_criteria=_gen_identifier(fdp),
            start_amount=fdp.ConsumeIntInRange(0, 2**128),
            end_amount=fdp.ConsumeIntInRange(0, 2**128),
        )
        for _ in range(fdp.ConsumeIntInRange(0, 3))
    ]
    consideration = [
        ConsiderationItem(
            item_type=fdp.ConsumeIntInRange(0, 5),
            token=_gen_address(fdp),
            identifier_or_criteria=_gen_identifier(fdp),
            start_amount=fdp.ConsumeIntInRange(0, 2**128),
            end_amount=fdp.ConsumeIntInRange(0, 2**128),
            recipient=_gen_address(fdp),
        )
        for _ in range(fdp.ConsumeIntInRange(0, 3))
    ]
    return AdvancedOrder(
        parameters=OrderParameters(
            offerer=_gen_address(fdp),
            offer=offer,  # type: ignore[arg-type]
            consideration=consideration,  # type: ignore[arg-type]
            order_type=fdp.ConsumeIntInRange(0, 4),
        ),
        extra_data=fdp.ConsumeBytes(fdp.ConsumeIntInRange(0, 32)),
    )


# --- Patterns ---


def _pattern_context_branching(fdp: atheris.FuzzedDataProvider) -> None:
    orders = [_gen_order(fdp) for _ in range(fdp.ConsumeIntInRange(0, 3))]
    base = FuzzTestContext.from_orders(
        orders, None, _gen_address(fdp), FuzzParams(seed=fdp.ConsumeIntInRange(0, 2**64))
    )
    expected_orders = tuple(orders)
    orders.reverse()
    orders.append(_gen_order(fdp))
    if base.orders != expected_orders or base.initial_orders != expected_orders:
        msg = "from_orders aliased the caller's list"
        raise ZoneFuzzError(msg)

    checks = [f"check_{i}" for i in range(fdp.ConsumeIntInRange(0, 4))]
    left = base.with_checks(checks).with_counter(fdp.ConsumeIntInRange(0, 2**64))
    right = base.with_orders(orders).with_caller(_gen_address(fdp))
    expected_checks = tuple(checks)
    checks.clear()

    if left.checks != expected_checks:
        msg = "with_checks aliased the caller's list"
        raise ZoneFuzzError(msg)
    if base.checks or base.counter or right.checks:
        msg = "branching leaked state between contexts"
        raise ZoneFuzzError(msg)
    if left.orders != expected_orders or right.fuzz_params != base.fuzz_params:
        msg = "setter touched an unrelated field"
        raise ZoneFuzzError(msg)


def _pattern_zone_decision(fdp: atheris.FuzzedDataProvider) -> None:
    order = _gen_order(fdp)
    params = ZoneParameters.from_order(order, fulfiller=_gen_address(fdp))
    sentinel = fdp.ConsumeIntInRange(0, 3)

    if GoodZone().validate_order(params) != VALID_ORDER_MAGIC:
        msg = "GoodZone did not approve"
        raise ZoneFuzzError(msg)

    if not params.consideration:
        return
    response = BadZone(expected_identifier=sentinel).validate_order(params)
    hit = params.consideration[0].identifier == sentinel
    if response != (VALID_ORDER_MAGIC if hit else b""):
        msg = f"BadZone answered {response!r} (hit={hit})"
        raise ZoneFuzzError(msg)
    decision = interpret_response(response)
    _stats.decisions[decision] = _stats.decisions.get(decision, 0) + 1


def _pattern_response_decoding(fdp: atheris.FuzzedDataProvider) -> None:
    response = fdp.ConsumeBytes(fdp.ConsumeIntInRange(0, 8))
    decision = interpret_response(response)
    if (decision is Decision.APPROVED) != (response == VALID_ORDER_MAGIC):
        msg = f"interpret_response({response!r}) returned {decision}"
        raise ZoneFuzzError(msg)


def _pattern_malformed_parameters(fdp: atheris.FuzzedDataProvider) -> None:
    params = ZoneParameters(
        offerer=_gen_address(fdp),
        consideration=(
            (ReceivedItem(identifier=_gen_identifier(fdp)),) if fdp.ConsumeBool() else ()
        ),
    )
    try:
        BadZone().validate_order(params)
    except MalformedZoneParametersError:
        if params.consideration:
            raise
        _stats.malformed_rejections += 1
    else:
        if not params.consideration:
            msg = "BadZone judged parameters without consideration"
            raise ZoneFuzzError(msg)


_PATTERN_DISPATCH = {
    "context_branching": _pattern_context_branching,
    "zone_decision": _pattern_zone_decision,
    "response_decoding": _pattern_response_decoding,
    "malformed_parameters": _pattern_malformed_parameters,
}


def test_one_input(data: bytes) -> None:
    """Atheris entry point: fuzz context building and zone decisions."""
    _stats.iterations += 1
    if _stats.iterations % _stats.checkpoint_interval == 0:
        _emit_report()

    fdp = atheris.FuzzedDataProvider(data)
    pattern = _PATTERN_SCHEDULE[_stats.iterations % len(_PATTERN_SCHEDULE)]
    _stats.pattern_coverage[pattern] = _stats.pattern_coverage.get(pattern, 0) + 1

    try:
        _PATTERN_DISPATCH[pattern](fdp)
    except ZoneFuzzError:
        _stats.findings += 1
        raise


def main() -> None:
    """Run the zone fuzzer with CLI support."""
    parser = argparse.ArgumentParser(
        description="Context builder and zone fuzzer using Atheris/libFuzzer",
        epilog="All unrecognized arguments are passed to libFuzzer.",
    )
    parser.add_argument(
        "--checkpoint-interval", type=int, default=1000,
        help="Write report every N iterations (default: 1000)",
    )
    args, remaining = parser.parse_known_args()
    _stats.checkpoint_interval = args.checkpoint_interval

    sys.argv = [sys.argv[0], *remaining]
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
