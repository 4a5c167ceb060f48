"""Root CLI group for acctctl with global flags and command registration."""

from __future__ import annotations

import click

from acctctl import __version__
from acctctl.commands import register_commands
from acctctl.commands._base import AcctGroup
from acctctl.commands._context import AppContext
from acctctl.config.settings import AcctSettings


@click.group(
    cls=AcctGroup,
    invoke_without_command=True,
    examples="""\
  acctctl menu
  acctctl balance
  acctctl credit 250
  acctctl --json debit 100
  acctctl batch steps.json --partial""",
)
@click.version_option(version=__version__, prog_name="acctctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output (bare balance).")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
) -> None:
    """acctctl — account balance manager with overdraft protection."""
    settings = AcctSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_interact=no_interact,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
