from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

import typer

from cli.render import echo_line, render_error
from datastore.registry import build_default_registry
from logging_config import configure_logging
from models.records import format_value
from models.schemas import parse_reading
from services.demo import DemoRunner
from services.messages import SUPPORTED_LANGUAGES, message, unit_for
from services.validator import (
    SensorDataError,
    parse_kind,
    validate_coordinates,
    validate_reading,
)
from settings import Settings, get_settings

logger = logging.getLogger(__name__)

_ARGUMENT_SETTINGS = {"ignore_unknown_options": True}


@dataclass
class CLIState:
    settings: Settings
    language: str


app = typer.Typer(
    help="Register sensor readings and check them against physical ranges.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    return ctx.obj


def _read_line(prompt: str) -> Optional[str]:
    typer.echo(prompt, nl=False)
    line = sys.stdin.readline()
    if not line:
        typer.echo()
        return None
    return line.rstrip("\r\n")


@contextmanager
def _abort_on_error(language: str) -> Iterator[None]:
    try:
        yield
    except SensorDataError as exc:
        logger.error("Terminated early", extra={"reason": str(exc)})
        render_error(exc, language)
        raise typer.Exit(code=1) from exc


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    language: Optional[str] = typer.Option(
        None,
        "--lang",
        "-l",
        help="Output language (en or uk; defaults to SENSOR_REGISTRY_LANGUAGE env or en).",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level for stderr output (defaults to LOG_LEVEL env or WARNING).",
    ),
) -> None:
    """Without a subcommand, run the sample registration flow."""
    settings = get_settings()
    selected = (language or settings.language).strip().lower()
    if selected not in SUPPORTED_LANGUAGES:
        raise typer.BadParameter(
            f"Unsupported language {language!r}; choose from {', '.join(SUPPORTED_LANGUAGES)}.",
            param_hint="--lang",
        )
    configure_logging(log_level.strip().upper() if log_level else None)
    ctx.obj = CLIState(settings=settings, language=selected)

    if ctx.invoked_subcommand is None:
        _run_demo(ctx.obj)


def _run_demo(state: CLIState) -> None:
    registry = build_default_registry(language=state.language, echo=echo_line)
    runner = DemoRunner(registry=registry, read_value=_read_line, echo=echo_line)
    with _abort_on_error(state.language):
        runner.run()


@app.command("check", context_settings=_ARGUMENT_SETTINGS)
def check_command(
    ctx: typer.Context,
    kind: str = typer.Argument(..., help="Signal kind: Temperature, Humidity or Light."),
    value: str = typer.Argument(..., help="Reading value."),
) -> None:
    """Validate a single reading without registering it."""
    state = _get_state(ctx)
    with _abort_on_error(state.language):
        reading = parse_reading(parse_kind(kind), value)
        validate_reading(reading.kind, reading.value)
    echo_line(
        message(
            "reading_ok",
            state.language,
            kind=reading.kind.value,
            value=format_value(reading.value),
            unit=unit_for(reading.kind, state.language),
        )
    )


@app.command("coordinates", context_settings=_ARGUMENT_SETTINGS)
def coordinates_command(
    ctx: typer.Context,
    lat: float = typer.Argument(..., help="Latitude in degrees."),
    lon: float = typer.Argument(..., help="Longitude in degrees."),
) -> None:
    """Validate a latitude/longitude pair."""
    state = _get_state(ctx)
    with _abort_on_error(state.language):
        validate_coordinates(lat, lon)
    echo_line(
        message(
            "coordinates_ok",
            state.language,
            lat=format_value(lat),
            lon=format_value(lon),
        )
    )
