"""Pydantic schemas for parsing untrusted reading input."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from models.records import Reading, SignalKind
from services.validator import ParseError


class ReadingInput(BaseModel):
    """A reading as typed by a user, before range validation."""

    model_config = ConfigDict(frozen=True)

    kind: SignalKind
    value: float = Field(..., allow_inf_nan=False)

    def to_reading(self) -> Reading:
        return Reading(kind=self.kind, value=self.value)


def parse_reading(kind: SignalKind, raw: str | None) -> Reading:
    """Parse raw text for ``kind`` into a :class:`Reading`.

    ``None`` stands for end of input and is treated like any other
    unparseable value.
    """
    field = kind.value
    if raw is None:
        raise ParseError(field, raw, "no input available")

    candidate = raw.strip()
    try:
        parsed = ReadingInput(kind=kind, value=candidate)
    except ValidationError as exc:
        raise ParseError(field, candidate, "not a finite number") from exc
    return parsed.to_reading()
