"""Tests for the sample registration flow."""

from __future__ import annotations

from typing import Iterable, List, Optional

import pytest

from datastore.registry import SensorRegistry
from models.records import Reading, SignalKind
from services.demo import SAMPLE_READINGS, DemoRunner
from services.validator import ParseError, RangeError


class ScriptedInput:
    def __init__(self, answers: Iterable[Optional[str]]) -> None:
        self._answers = list(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> Optional[str]:
        self.prompts.append(prompt)
        if not self._answers:
            return None
        return self._answers.pop(0)


def _runner(answers: Iterable[Optional[str]], language: str = "en"):
    lines: List[str] = []
    registry = SensorRegistry(name="demo", language=language, echo=lines.append)
    reader = ScriptedInput(answers)
    runner = DemoRunner(registry=registry, read_value=reader, echo=lines.append)
    return runner, registry, reader, lines


def test_full_run_registers_samples_and_input() -> None:
    runner, registry, reader, lines = _runner(["18.5", "45", "1200"])

    runner.run()

    assert lines == [
        "Data registered: Temperature - 25 °C",
        "Data registered: Humidity - 70 %",
        "Data registered: Light - 50000 lux",
        "Data exists for signal: Temperature",
        "Data exists for signal: Humidity",
        "Data exists for signal: Light",
        "Data registered: Temperature - 18.5 °C",
        "Data registered: Humidity - 45 %",
        "Data registered: Light - 1200 lux",
    ]
    assert reader.prompts == [
        "Enter value for Temperature: ",
        "Enter value for Humidity: ",
        "Enter value for Light: ",
    ]
    assert registry.scan() == list(SAMPLE_READINGS) + [
        Reading(SignalKind.temperature, 18.5),
        Reading(SignalKind.humidity, 45.0),
        Reading(SignalKind.light, 1200.0),
    ]


def test_presence_report_shows_missing_kinds() -> None:
    lines: List[str] = []
    registry = SensorRegistry(name="demo", echo=lines.append)
    runner = DemoRunner(
        registry=registry,
        read_value=ScriptedInput([]),
        echo=lines.append,
        samples=[Reading(SignalKind.humidity, 30.0)],
    )

    runner.register_samples()
    runner.report_presence()

    assert lines[1:] == [
        "No data for signal: Temperature",
        "Data exists for signal: Humidity",
        "No data for signal: Light",
    ]


def test_out_of_range_input_stops_the_run() -> None:
    runner, registry, reader, _ = _runner(["20", "120", "500"])

    with pytest.raises(RangeError, match="Humidity must be between 0 and 100"):
        runner.run()

    assert len(registry) == 4
    assert len(reader.prompts) == 2


def test_non_numeric_input_raises_parse_error() -> None:
    runner, registry, reader, _ = _runner(["warm"])

    with pytest.raises(ParseError, match="'warm'"):
        runner.run()

    assert len(registry) == len(SAMPLE_READINGS)
    assert reader.prompts == ["Enter value for Temperature: "]


def test_exhausted_input_raises_parse_error() -> None:
    runner, registry, _, _ = _runner(["10"])

    with pytest.raises(ParseError, match="no input available"):
        runner.run()

    assert len(registry) == len(SAMPLE_READINGS) + 1


def test_ukrainian_prompts() -> None:
    runner, _, reader, lines = _runner(["0", "0", "0"], language="uk")

    runner.run()

    assert reader.prompts[0] == "Введіть значення для Temperature: "
    assert "Існують дані для сигналу: Light" in lines
