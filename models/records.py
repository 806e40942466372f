"""Domain models shared across services."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class SignalKind(str, Enum):
    """Sensor measurement categories, in reporting order."""

    temperature = "Temperature"
    humidity = "Humidity"
    light = "Light"


@dataclass(frozen=True, slots=True)
class Reading:
    """A single sensor data point submitted for registration."""

    kind: SignalKind
    value: float


def format_value(value: float) -> str:
    """Render integral floats without a trailing ``.0``."""
    value = float(value)
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)
