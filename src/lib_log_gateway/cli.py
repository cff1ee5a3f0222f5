"""Click command group exposing the metadata banner and the gateway demo.

Purpose
-------
Provide ``lib_log_gateway`` / ``python -m lib_log_gateway`` so operators can
check the installed version and watch the buffer-then-replay behaviour.

Contents
--------
* :func:`cli` - root group with ``--use-dotenv`` and ``--traceback`` toggles.
* ``info`` / ``demo`` subcommands.
* :func:`main` - runs the group through :func:`lib_cli_exit_tools.run_cli`
  and restores traceback preferences afterwards.
"""

from __future__ import annotations

import os
from collections.abc import Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as gateway_config
from .lib_log_gateway import DEMO_CHANNEL, gatewaydemo, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

_gatewaydemo = gatewaydemo


def _explicit(ctx: click.Context, name: str, value: bool) -> bool | None:
    """Return ``value`` when the user passed the option, otherwise ``None``."""
    if ctx.get_parameter_source(name) is click.core.ParameterSource.DEFAULT:
        return None
    return value


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load environment variables from the nearest .env (defaults to ${gateway_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Deferred-dispatch logging gateway utilities."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    env_toggle = os.getenv(gateway_config.DOTENV_ENV_VAR)
    explicit = _explicit(ctx, "use_dotenv", use_dotenv)
    if gateway_config.should_use_dotenv(explicit=explicit, env_value=env_toggle):
        gateway_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--channel", default=DEMO_CHANNEL, show_default=True, help="Channel name sent in the control message.")
@click.option("--force-color/--no-force-color", default=False, help="Force coloured output.")
@click.option("--no-color", is_flag=True, default=False, help="Disable coloured output.")
@click.pass_context
def cli_demo(ctx: click.Context, channel: str, force_color: bool, no_color: bool) -> None:
    """Log before binding, bind, and show the replayed output."""

    settings = gateway_config.build_settings(
        force_color=_explicit(ctx, "force_color", force_color),
        no_color=True if no_color else None,
    )
    result = _gatewaydemo(channel=channel, settings=settings)
    click.echo(
        f"buffered={result['buffered']} emitted={result['emitted']} channel={result['channel']}",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return its exit code.

    Traceback preferences are restored afterwards so embedding hosts keep
    their own configuration.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        lib_cli_exit_tools.config.traceback = previous_traceback
        lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
