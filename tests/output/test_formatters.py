"""Tests for the format_result dispatcher and OutputSettings."""

import json
from decimal import Decimal

import pytest
from pydantic import ValidationError

from acctctl.output.formatters import OutputSettings, format_result
from acctctl.services.result import ServiceError, ServiceResult


def _ok(op: str = "credit", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "debit", msg: str = "Insufficient funds for this debit.") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        data={"balance": Decimal("1000.00")},
        error=ServiceError(code="INSUFFICIENT_FUNDS", message=msg),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False

    def test_frozen(self) -> None:
        s = OutputSettings(json_output=True)
        with pytest.raises(ValidationError):
            s.quiet = True  # type: ignore[misc]


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        result = _ok("credit", balance=Decimal("1250.00"), amount=Decimal("250.00"))
        output = format_result(result, settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "credit"
        assert data["data"]["balance"] == "1250.00"
        assert data["data"]["amount"] == "250.00"

    def test_json_mode_error(self) -> None:
        output = format_result(_err(), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["code"] == "INSUFFICIENT_FUNDS"
        assert data["data"]["balance"] == "1000.00"

    def test_json_output_kwarg(self) -> None:
        output = format_result(_ok(balance=Decimal("1.00")), json_output=True)
        assert json.loads(output)["ok"] is True

    def test_settings_overrides_kwarg(self) -> None:
        result = _ok(balance=Decimal("1.00"))
        output = format_result(result, settings=OutputSettings(), json_output=True)
        assert not output.startswith("{")


class TestFormatResultQuiet:
    def test_quiet_success_prints_balance(self) -> None:
        result = _ok("credit", balance=Decimal("1250.00"))
        assert format_result(result, settings=OutputSettings(quiet=True)) == "1250.00"

    def test_quiet_error(self) -> None:
        output = format_result(_err(), settings=OutputSettings(quiet=True))
        assert output.startswith("ERROR: debit")
        assert "Insufficient funds" in output


class TestFormatResultRich:
    def test_default_mode(self) -> None:
        result = _ok("view_balance", balance=Decimal("1000.00"))
        assert format_result(result) == "Current balance: 1000.00"

    def test_verbose_adds_fields(self) -> None:
        result = _ok(
            "debit",
            balance=Decimal("750.00"),
            previous_balance=Decimal("1000.00"),
            amount=Decimal("250.00"),
        )
        output = format_result(result, settings=OutputSettings(verbose=True))
        assert "Amount debited. New balance: 750.00" in output
        assert "previous_balance: 1000.00" in output
