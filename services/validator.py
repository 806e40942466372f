"""Range validation for coordinates and sensor readings.

Every check here is pure: no I/O, no state. Bounds are inclusive, and a NaN
value never satisfies one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from models.records import SignalKind, format_value


class SensorDataError(ValueError):
    """Base class for rejected sensor input."""


class RangeError(SensorDataError):
    """Raised when a value falls outside its inclusive bound."""

    def __init__(self, field: str, value: float, minimum: float, maximum: float) -> None:
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"{field} must be between {format_value(minimum)} and {format_value(maximum)}"
            f" (got {format_value(value)})"
        )


class UnknownKindError(SensorDataError):
    """Raised when a signal kind does not match any known variant."""

    def __init__(self, kind: Any) -> None:
        self.kind = kind
        super().__init__(f"Unknown sensor signal type: {kind!r}")


class ParseError(SensorDataError):
    """Raised when input text cannot be read as a number."""

    def __init__(self, field: str, raw: str | None, reason: str) -> None:
        self.field = field
        self.raw = raw
        super().__init__(f"Invalid value for {field}: {raw!r} ({reason})")


@dataclass(frozen=True)
class Bound:
    minimum: float
    maximum: float

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum


LATITUDE_BOUND = Bound(-90.0, 90.0)
LONGITUDE_BOUND = Bound(-180.0, 180.0)

READING_BOUNDS: Dict[SignalKind, Bound] = {
    SignalKind.temperature: Bound(-50.0, 50.0),
    SignalKind.humidity: Bound(0.0, 100.0),
    SignalKind.light: Bound(0.0, 100000.0),
}


def _check(field: str, value: float, bound: Bound) -> None:
    if not bound.contains(value):
        raise RangeError(field, value, bound.minimum, bound.maximum)


def _resolve_kind(kind: Any) -> SignalKind:
    try:
        return SignalKind(kind)
    except ValueError:
        raise UnknownKindError(kind) from None


def parse_kind(raw: str) -> SignalKind:
    """Resolve user text to a signal kind by value or member name."""
    candidate = raw.strip().lower()
    for kind in SignalKind:
        if candidate in (kind.value.lower(), kind.name):
            return kind
    raise UnknownKindError(raw)


def bounds_for(kind: Any) -> Bound:
    return READING_BOUNDS[_resolve_kind(kind)]


def validate_coordinates(lat: float, lon: float) -> None:
    """Check a latitude/longitude pair; latitude is checked first."""
    _check("latitude", lat, LATITUDE_BOUND)
    _check("longitude", lon, LONGITUDE_BOUND)


def validate_reading(kind: Any, value: float) -> SignalKind:
    """Check ``value`` against the bound table entry for ``kind``.

    ``kind`` may be any object; values that do not resolve to a
    :class:`SignalKind` raise :class:`UnknownKindError`. Returns the
    resolved kind.
    """
    resolved = _resolve_kind(kind)
    _check(resolved.value, value, READING_BOUNDS[resolved])
    return resolved
