from __future__ import annotations

import typer

from services.messages import message
from services.validator import RangeError, SensorDataError


def echo_line(text: str) -> None:
    typer.echo(text)


def render_error(exc: SensorDataError, language: str) -> None:
    key = "validation_error" if isinstance(exc, RangeError) else "error"
    typer.secho(message(key, language, message=str(exc)), fg=typer.colors.RED)
