"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Owns the session's BalanceStore and AccountService
and centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from acctctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from acctctl.config.settings import AcctSettings
    from acctctl.infrastructure.store import BalanceStore
    from acctctl.services.account import AccountService
    from acctctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  The store and service
    are created lazily on first use so ``--help`` and ``--version`` never
    build them. One AppContext means one balance for the whole process.
    """

    def __init__(self, settings: AcctSettings) -> None:
        self.settings = settings
        self._store: BalanceStore | None = None
        self._account: AccountService | None = None

        from acctctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def store(self) -> BalanceStore:
        """The session's balance store, opened at the configured balance."""
        if self._store is None:
            from acctctl.infrastructure.store import BalanceStore

            self._store = BalanceStore(self.settings.account.opening_balance)
        return self._store

    @property
    def account(self) -> AccountService:
        """The only service allowed to write :attr:`store`."""
        if self._account is None:
            from acctctl.services.account import AccountService

            self._account = AccountService(
                self.store,
                display_limit=self.settings.account.display_limit,
            )
        return self._account

    @property
    def interactive(self) -> bool:
        """False when ``--no-interact`` was given."""
        return not self.settings.no_interact

    def emit(self, result: ServiceResult, *, exit_on_error: bool = True) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure with *exit_on_error*: writes to stderr, exits with code 1.
        * Failure without *exit_on_error* (menu loop): writes to stdout and
          returns, so the session carries on.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        elif exit_on_error:
            click.echo(output, err=True)
            raise SystemExit(1)
        else:
            click.echo(output)
