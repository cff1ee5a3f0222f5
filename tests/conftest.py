from __future__ import annotations

from io import StringIO
from typing import Any

import pytest
from rich.console import Console

from lib_log_gateway.adapters import InMemoryBus, StaticCapabilityHost
from lib_log_gateway.runtime import Gateway
from tests._fakes import RecordingProvider


@pytest.fixture(autouse=True)
def _reset_recording_providers():
    RecordingProvider.instances.clear()
    yield
    RecordingProvider.instances.clear()


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=120, color_system=None)


@pytest.fixture
def bus() -> InMemoryBus:
    return InMemoryBus()


@pytest.fixture
def diagnostics() -> list[tuple[str, dict[str, Any]]]:
    return []


@pytest.fixture
def gateway(bus: InMemoryBus, diagnostics: list[tuple[str, dict[str, Any]]]) -> Gateway:
    host = StaticCapabilityHost({"core.logger": RecordingProvider})
    return Gateway(bus=bus, host=host, diagnostic=lambda name, payload: diagnostics.append((name, payload)))
