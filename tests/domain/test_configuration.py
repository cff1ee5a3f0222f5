from __future__ import annotations

import pytest

from lib_log_gateway.domain.configuration import ControlMessage, GatewayConfig


def test_config_extracts_console_and_freezes_mapping() -> None:
    console = object()
    payload = {"global": {"console": console}, "extra": 1}
    config = GatewayConfig.from_mapping(payload)

    assert config is not None
    assert config.console is console
    payload["extra"] = 2
    assert config.raw["extra"] == 1
    with pytest.raises(TypeError):
        config.raw["extra"] = 3  # type: ignore[index]


@pytest.mark.parametrize("payload", [None, "x", {}, {"global": None}, {"global": {"other": 1}}])
def test_config_rejects_missing_console(payload: object) -> None:
    assert GatewayConfig.from_mapping(payload) is None


def test_control_message_parses_valid_shape() -> None:
    parsed = ControlMessage.parse({"channel": "c1", "config": {"global": {"console": None}}})
    assert parsed is not None
    assert parsed.channel == "c1"
    assert parsed.config.console is None


@pytest.mark.parametrize(
    "message",
    [
        None,
        [],
        {"config": {"global": {"console": None}}},
        {"channel": 7, "config": {"global": {"console": None}}},
        {"channel": "", "config": {"global": {"console": None}}},
        {"channel": "c1"},
        {"channel": "c1", "config": {"global": {}}},
    ],
)
def test_control_message_rejects_malformed_shapes(message: object) -> None:
    assert ControlMessage.parse(message) is None
