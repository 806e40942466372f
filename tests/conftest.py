from __future__ import annotations

from typing import Iterator

import pytest

from settings import get_settings

_ENV_VARS = ("SENSOR_REGISTRY_NAME", "SENSOR_REGISTRY_LANGUAGE", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch) -> Iterator[None]:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # CliRunner swaps sys.stderr per invocation; a handler bound to one of those
    # streams would outlive it.
    monkeypatch.setattr("cli.app.configure_logging", lambda level=None: None)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
