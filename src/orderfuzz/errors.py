"""orderfuzz exception hierarchy.

Only contract violations raise. A zone rejecting an order is a normal
result and is never represented by an exception.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "MalformedZoneParametersError",
    "OrderFuzzError",
    "UnknownZoneError",
]


class OrderFuzzError(Exception):
    """Base exception for all orderfuzz errors."""


class MalformedZoneParametersError(OrderFuzzError):
    """Zone parameters do not have the shape a zone needs to decide.

    The calling protocol enforces shape before invoking a zone, so this
    signals a harness bug rather than a rejected order.

    Attributes:
        field_name: Name of the ZoneParameters field that was malformed
    """

    def __init__(self, message: str, *, field_name: str = "") -> None:
        """Initialize MalformedZoneParametersError.

        Args:
            message: Human-readable description of the violation
            field_name: Offending ZoneParameters field
        """
        super().__init__(message)
        self.field_name = field_name


class UnknownZoneError(OrderFuzzError, KeyError):
    """Zone variant name is not registered.

    Attributes:
        name: The name that was looked up
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown zone variant: {name!r}")
        self.name = name

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return str(self.args[0])
