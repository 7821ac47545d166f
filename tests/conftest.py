"""Pytest configuration for the orderfuzz test suite.

Hypothesis profiles (single source of truth for max_examples):
- dev: Local development, 300 examples
- ci: CI runs, 50 examples, derandomized for reproducible failures
- verbose: Debug mode with progress output, 100 examples

Profile selection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true -> "ci"
- Otherwise -> "dev"

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz (the stateful context fuzzer) are
skipped in normal runs. Run them via: pytest -m fuzz
"""

from __future__ import annotations

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from orderfuzz.context import FuzzParams, FuzzTestContext
from orderfuzz.orders import AdvancedOrder
from tests.helpers.orders import CALLER_A, make_order

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_PHASES = [Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink]

settings.register_profile("dev", max_examples=300, phases=_PHASES)
settings.register_profile(
    "ci", max_examples=50, phases=_PHASES, derandomize=True, print_blob=True
)
settings.register_profile(
    "verbose", max_examples=100, phases=_PHASES, verbosity=Verbosity.verbose
)


def _detect_profile() -> str:
    """Pick the Hypothesis profile for this run."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless requested with -m fuzz or by file name."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    for arg in config.invocation_params.args:
        if "test_context_state_machine" in str(arg):
            return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def order1() -> AdvancedOrder:
    """Restricted order whose first consideration identifier is 1."""
    return make_order(1, salt=1)


@pytest.fixture
def order2() -> AdvancedOrder:
    """Restricted order whose first consideration identifier is 2."""
    return make_order(2, salt=2)


@pytest.fixture
def base_context(order1: AdvancedOrder) -> FuzzTestContext:
    """Context holding order1, impersonating CALLER_A, seed 0."""
    return FuzzTestContext.from_orders([], object(), CALLER_A, FuzzParams(seed=0)).with_orders(
        [order1]
    )
