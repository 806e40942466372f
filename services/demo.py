"""Fixed demonstration flow over a :class:`SensorRegistry`."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

import typer

from datastore.registry import SensorRegistry
from models.records import Reading, SignalKind
from models.schemas import parse_reading
from services.messages import message

logger = logging.getLogger(__name__)

SAMPLE_READINGS: Sequence[Reading] = (
    Reading(kind=SignalKind.temperature, value=25.0),
    Reading(kind=SignalKind.humidity, value=70.0),
    Reading(kind=SignalKind.light, value=50000.0),
)

ValueReader = Callable[[str], Optional[str]]


class DemoRunner:
    """Registers sample data, reports presence, then registers user input.

    ``read_value`` receives the prompt text and returns one line of input,
    or ``None`` once input is exhausted. Any :class:`SensorDataError` aborts
    the run; readings registered before the failure stay in the registry.
    """

    def __init__(
        self,
        registry: SensorRegistry,
        read_value: ValueReader,
        echo: Callable[[str], None] = typer.echo,
        samples: Sequence[Reading] = SAMPLE_READINGS,
    ) -> None:
        self.registry = registry
        self.read_value = read_value
        self.echo = echo
        self.samples = samples

    @property
    def language(self) -> str:
        return self.registry.language

    def run(self) -> None:
        self.register_samples()
        self.report_presence()
        self.register_user_input()

    def register_samples(self) -> None:
        for reading in self.samples:
            self.registry.register(reading)

    def report_presence(self) -> None:
        for kind in SignalKind:
            key = "exists" if self.registry.has_data_for(kind) else "none"
            self.echo(message(key, self.language, kind=kind.value))

    def register_user_input(self) -> None:
        for kind in SignalKind:
            raw = self.read_value(message("prompt", self.language, kind=kind.value))
            reading = parse_reading(kind, raw)
            self.registry.register(reading)
        logger.debug(
            "Demo input registered",
            extra={"registry": self.registry.name, "reading_count": len(self.registry)},
        )
