from __future__ import annotations

import logging
from typing import Callable, List, Optional

import typer

from models.records import Reading, SignalKind, format_value
from services.messages import DEFAULT_LANGUAGE, message, unit_for
from services.validator import SensorDataError, validate_reading
from settings import get_settings

logger = logging.getLogger(__name__)


class SensorRegistry:
    """In-memory, insertion-ordered store of validated readings."""

    def __init__(
        self,
        name: str,
        language: str = DEFAULT_LANGUAGE,
        echo: Callable[[str], None] = typer.echo,
    ) -> None:
        self.name = name
        self.language = language
        self._echo = echo
        self._readings: List[Reading] = []

    def __len__(self) -> int:
        return len(self._readings)

    def register(self, reading: Reading) -> None:
        """Validate and append ``reading`` with its kind resolved.

        Nothing is stored on failure.
        """
        try:
            kind = validate_reading(reading.kind, reading.value)
        except SensorDataError as exc:
            logger.warning(
                "Reading rejected",
                extra={
                    "registry": self.name,
                    "kind": getattr(reading.kind, "value", reading.kind),
                    "value": reading.value,
                    "reason": str(exc),
                },
            )
            raise

        stored = Reading(kind=kind, value=reading.value)
        self._readings.append(stored)
        unit = unit_for(kind, self.language)
        logger.info(
            "Reading registered",
            extra={
                "registry": self.name,
                "kind": kind.value,
                "value": stored.value,
                "unit": unit,
                "reading_count": len(self._readings),
            },
        )
        self._echo(
            message(
                "registered",
                self.language,
                kind=kind.value,
                value=format_value(stored.value),
                unit=unit,
            )
        )

    def has_data_for(self, kind: SignalKind) -> bool:
        return any(reading.kind == kind for reading in self._readings)

    def scan(self) -> list[Reading]:
        """Return the stored readings in insertion order."""
        return list(self._readings)


def build_default_registry(
    name: Optional[str] = None,
    language: Optional[str] = None,
    echo: Callable[[str], None] = typer.echo,
) -> SensorRegistry:
    settings = get_settings()
    registry_name = settings.registry_name if name is None else name
    registry_language = settings.language if language is None else language
    return SensorRegistry(name=registry_name, language=registry_language, echo=echo)
