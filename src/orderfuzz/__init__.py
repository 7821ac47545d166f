"""orderfuzz - Fuzz scenario context and validation oracles for order fulfillment.

Builds immutable execution contexts for fuzzing an order-fulfillment
protocol and provides the zone callbacks the protocol consults to approve
or reject restricted orders.

Public API:
    FuzzTestContext - Immutable scenario context refined through with_* calls
    FuzzParams - Opaque fuzz seed and generation bounds
    GoodZone - Zone approving every order
    BadZone - Zone approving only an expected consideration identifier
    Decision - Explicit approve/reject outcome of a zone call
    ValidationOracle - Runtime-checkable zone capability protocol
    interpret_response - Decode a raw zone response

Exceptions:
    OrderFuzzError - Base exception class
    MalformedZoneParametersError - Zone input lacks required shape
    UnknownZoneError - Zone variant name not registered

Submodules:
    orderfuzz.orders - Order, item, resolver and zone parameter records
    orderfuzz.enums - ItemType, OrderType, Side
    orderfuzz.constants - Protocol selectors, interface ids, zero values
    orderfuzz.zones - Zone variants and registry
"""

from .context import FuzzParams, FuzzTestContext
from .errors import MalformedZoneParametersError, OrderFuzzError, UnknownZoneError
from .zones import BadZone, Decision, GoodZone, ValidationOracle, interpret_response

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("orderfuzz")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BadZone",
    "Decision",
    "FuzzParams",
    "FuzzTestContext",
    "GoodZone",
    "MalformedZoneParametersError",
    "OrderFuzzError",
    "UnknownZoneError",
    "ValidationOracle",
    "__version__",
    "interpret_response",
]
