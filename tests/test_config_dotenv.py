from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from lib_log_gateway import cli as cli_module
from lib_log_gateway import config as gateway_config


@pytest.fixture(autouse=True)
def _reset_dotenv_state() -> None:
    """Reset shared dotenv state around each test."""

    gateway_config._reset_dotenv_state_for_testing()
    yield
    gateway_config._reset_dotenv_state_for_testing()


@pytest.fixture
def clean_gateway_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        gateway_config.TRUSTED_SOURCE_ENV_VAR,
        gateway_config.CAPABILITY_ENV_VAR,
        gateway_config.FORCE_COLOR_ENV_VAR,
        gateway_config.NO_COLOR_ENV_VAR,
    ):
        monkeypatch.delenv(name, raising=False)


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_GATEWAY_CAPABILITY=dotenv.logger\n")
    monkeypatch.chdir(nested)
    monkeypatch.delenv("LOG_GATEWAY_CAPABILITY", raising=False)

    loaded = gateway_config.enable_dotenv()

    assert loaded == env_file.resolve()
    assert gateway_config.loaded_dotenv() == env_file.resolve()
    assert os.environ["LOG_GATEWAY_CAPABILITY"] == "dotenv.logger"

    os.environ.pop("LOG_GATEWAY_CAPABILITY", None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Existing environment variables keep precedence over .env entries."""

    nested = tmp_path / "nested"
    nested.mkdir()
    (tmp_path / ".env").write_text("LOG_GATEWAY_CAPABILITY=dotenv.logger\n")
    monkeypatch.setenv("LOG_GATEWAY_CAPABILITY", "real.logger")

    result = gateway_config.enable_dotenv(start=nested)

    assert result == (tmp_path / ".env").resolve()
    assert os.environ["LOG_GATEWAY_CAPABILITY"] == "real.logger"


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over environment toggle when deciding whether to load .env."""

    runner = CliRunner()
    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def record_enable(*args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr(gateway_config, "enable_dotenv", record_enable)
    monkeypatch.delenv(gateway_config.DOTENV_ENV_VAR, raising=False)

    result = runner.invoke(cli_module.cli, ["--use-dotenv", "info"])
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    result = runner.invoke(cli_module.cli, ["info"], env={gateway_config.DOTENV_ENV_VAR: "1"})
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    result = runner.invoke(cli_module.cli, ["--no-use-dotenv", "info"], env={gateway_config.DOTENV_ENV_VAR: "1"})
    assert result.exit_code == 0
    assert calls == []

    result = runner.invoke(cli_module.cli, ["info"])
    assert result.exit_code == 0
    assert calls == []


@pytest.mark.parametrize(
    "explicit, env_value, expected",
    [
        (True, None, True),
        (False, "1", False),
        (None, "on", True),
        (None, "off", False),
        (None, None, False),
    ],
)
def test_should_use_dotenv(explicit: bool | None, env_value: str | None, expected: bool) -> None:
    assert gateway_config.should_use_dotenv(explicit=explicit, env_value=env_value) is expected


def test_should_use_dotenv_rejects_garbage() -> None:
    with pytest.raises(ValueError, match=gateway_config.DOTENV_ENV_VAR):
        gateway_config.should_use_dotenv(env_value="sometimes")


def test_build_settings_defaults(clean_gateway_env: None) -> None:
    settings = gateway_config.build_settings()

    assert settings == gateway_config.GatewaySettings()
    assert settings.trusted_source == "control"
    assert settings.capability == "core.logger"


def test_build_settings_environment_then_arguments(clean_gateway_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(gateway_config.TRUSTED_SOURCE_ENV_VAR, "hub")
    monkeypatch.setenv(gateway_config.CAPABILITY_ENV_VAR, "env.logger")
    monkeypatch.setenv(gateway_config.NO_COLOR_ENV_VAR, "true")

    from_env = gateway_config.build_settings()
    overridden = gateway_config.build_settings(trusted_source="direct", no_color=False)

    assert (from_env.trusted_source, from_env.capability, from_env.no_color) == ("hub", "env.logger", True)
    assert (overridden.trusted_source, overridden.capability, overridden.no_color) == ("direct", "env.logger", False)


def test_settings_reject_blank_values() -> None:
    with pytest.raises(ValueError, match="trusted_source"):
        gateway_config.GatewaySettings(trusted_source=" ")
    with pytest.raises(ValueError, match="capability"):
        gateway_config.GatewaySettings(capability="")
