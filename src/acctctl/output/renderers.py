"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from rich.text import Text

from acctctl.domain.money import format_amount
from acctctl.output.console import create_console, get_output, style_for_op

if TYPE_CHECKING:
    from rich.console import Console

    from acctctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Successful results print the bare balance so scripts can capture it.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    balance = result.data.get("balance")
    if isinstance(balance, Decimal):
        return format_amount(balance)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _display(value: Any) -> str:
    if isinstance(value, Decimal) and value.is_finite():
        return format_amount(value)
    return str(value)


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="acct.ok")
    op = Text(f"  {result.op}", style="acct.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="acct.key")
    if key == "balance":
        v = Text(_display(value), style="acct.balance")
    else:
        v = Text(_display(value))
    console.print(k, v, end="")
    console.print()


def _balance_line(console: Console, prefix: str, balance: Any, *, style: str = "") -> None:
    console.print(Text(prefix, style=style), Text(_display(balance), style="acct.balance"), sep="")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="acct.error")
    op = Text(f"  {result.op}", style="acct.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    for step_error in result.data.get("errors", []):
        idx = step_error.get("index")
        console.print(f"  [acct.error]error[/acct.error] step={idx}: {step_error.get('error')}")

    if verbose:
        if "balance" in result.data:
            _field(console, "balance", result.data["balance"])
        if err and err.detail:
            console.print(Text("  detail:", style="dim"))
            for k, v in err.detail.items():
                console.print(f"    {k}: {v}")


# ── Balance renderers ─────────────────────────────────────────────────


def _render_view(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render view_balance as ``Current balance: 1000.00``."""
    _balance_line(console, "Current balance: ", result.data.get("balance"))


def _render_transaction(
    result: ServiceResult,
    console: Console,
    *,
    verbose: bool = False,
) -> None:
    """Render a successful credit or debit."""
    verb = "credited" if result.op == "credit" else "debited"
    _balance_line(
        console,
        f"Amount {verb}. New balance: ",
        result.data.get("balance"),
        style=style_for_op(result.op),
    )
    if verbose:
        for key in ("amount", "previous_balance"):
            if key in result.data:
                _field(console, key, result.data[key])


def _render_batch(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render batch results: counts, final balance, and each applied step if verbose."""
    _status_line(console, result)
    d = result.data
    _field(console, "steps", d.get("steps", 0))
    _field(console, "applied", len(d.get("applied", [])))
    _field(console, "errors", len(d.get("errors", [])))
    _field(console, "balance", d.get("balance"))

    if verbose:
        for step in d.get("applied", []):
            amount = step.get("amount")
            amount_text = f" {_display(amount)}" if amount is not None else ""
            console.print(
                f"    [{step['index']}] {step['op']}{amount_text} -> {_display(step['balance'])}"
            )


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":"), default=str))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "view_balance": _render_view,
    "credit": _render_transaction,
    "debit": _render_transaction,
    "batch": _render_batch,
}
