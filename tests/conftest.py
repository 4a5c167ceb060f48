"""Shared pytest fixtures for acctctl tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from acctctl.infrastructure.store import BalanceStore
from acctctl.services.account import AccountService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def store() -> BalanceStore:
    """Fresh store at the default 1000.00 opening balance."""
    return BalanceStore()


@pytest.fixture
def account(store: BalanceStore) -> AccountService:
    """AccountService writing to the ``store`` fixture."""
    return AccountService(store)


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no acctctl env overrides.

    Keeps a developer's own ``acctctl.toml`` or ``ACCTCTL_*`` variables
    from leaking into CLI tests.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ACCTCTL_CONFIG", raising=False)
    monkeypatch.delenv("ACCTCTL_ACCOUNT__OPENING_BALANCE", raising=False)
