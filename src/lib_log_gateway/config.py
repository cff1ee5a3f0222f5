"""Configuration helpers: ``.env`` loading and gateway settings.

Purpose
-------
Keep environment handling in one place so the CLI, the demo, and host
composition resolve the same values.

Contents
--------
* :data:`DOTENV_ENV_VAR` - toggle enabling ``.env`` loading.
* :func:`should_use_dotenv` / :func:`enable_dotenv` - python-dotenv bridge.
* :class:`GatewaySettings` / :func:`build_settings` - resolved gateway options.

Precedence
----------
Explicit arguments win over environment variables, which win over the
built-in defaults. ``.env`` files never override variables already present
in the process environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from lib_log_gateway.application.ports.capability import DEFAULT_LOGGER_CAPABILITY
from lib_log_gateway.application.use_cases.bind_channel import TRUSTED_SOURCE

DOTENV_ENV_VAR = "LOG_GATEWAY_USE_DOTENV"
TRUSTED_SOURCE_ENV_VAR = "LOG_GATEWAY_TRUSTED_SOURCE"
CAPABILITY_ENV_VAR = "LOG_GATEWAY_CAPABILITY"
FORCE_COLOR_ENV_VAR = "LOG_GATEWAY_FORCE_COLOR"
NO_COLOR_ENV_VAR = "LOG_GATEWAY_NO_COLOR"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}

_DOTENV_LOADED: Path | None = None


def _parse_bool(value: str, *, name: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {value!r}")


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is requested.

    An explicit CLI choice wins; otherwise the :data:`DOTENV_ENV_VAR` value is
    interpreted as a boolean flag.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return _parse_bool(env_value, name=DOTENV_ENV_VAR)


def enable_dotenv(start: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` found by walking upwards from ``start``.

    Returns the resolved path of the loaded file, or ``None`` when no file was
    found. Existing environment variables keep precedence.
    """

    global _DOTENV_LOADED
    if start is None:
        found = find_dotenv(usecwd=True)
    else:
        found = _search_upwards(start)
    if not found:
        return None
    path = Path(found).resolve()
    load_dotenv(path, override=False)
    _DOTENV_LOADED = path
    return path


def _search_upwards(start: Path) -> str:
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return str(candidate)
    return ""


def loaded_dotenv() -> Path | None:
    """Return the path loaded by the last successful :func:`enable_dotenv`."""

    return _DOTENV_LOADED


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED
    _DOTENV_LOADED = None


@dataclass(frozen=True)
class GatewaySettings:
    """Resolved options used to compose a gateway."""

    trusted_source: str = TRUSTED_SOURCE
    capability: str = DEFAULT_LOGGER_CAPABILITY
    force_color: bool = False
    no_color: bool = False

    def __post_init__(self) -> None:
        if not self.trusted_source.strip():
            raise ValueError("trusted_source must not be empty")
        if not self.capability.strip():
            raise ValueError("capability must not be empty")


def build_settings(
    *,
    trusted_source: str | None = None,
    capability: str | None = None,
    force_color: bool | None = None,
    no_color: bool | None = None,
) -> GatewaySettings:
    """Resolve :class:`GatewaySettings` from arguments and the environment."""

    def _text(value: str | None, env_name: str, default: str) -> str:
        if value is not None:
            return value
        return os.getenv(env_name) or default

    def _flag(value: bool | None, env_name: str) -> bool:
        if value is not None:
            return value
        raw = os.getenv(env_name)
        return False if raw is None else _parse_bool(raw, name=env_name)

    return GatewaySettings(
        trusted_source=_text(trusted_source, TRUSTED_SOURCE_ENV_VAR, TRUSTED_SOURCE),
        capability=_text(capability, CAPABILITY_ENV_VAR, DEFAULT_LOGGER_CAPABILITY),
        force_color=_flag(force_color, FORCE_COLOR_ENV_VAR),
        no_color=_flag(no_color, NO_COLOR_ENV_VAR),
    )


__all__ = [
    "CAPABILITY_ENV_VAR",
    "DOTENV_ENV_VAR",
    "FORCE_COLOR_ENV_VAR",
    "GatewaySettings",
    "NO_COLOR_ENV_VAR",
    "TRUSTED_SOURCE_ENV_VAR",
    "build_settings",
    "enable_dotenv",
    "loaded_dotenv",
    "should_use_dotenv",
]
