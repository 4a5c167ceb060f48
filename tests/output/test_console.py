"""Tests for Rich Console factory and theme."""

from io import StringIO

from acctctl.output.console import (
    ACCT_THEME,
    create_console,
    get_output,
    style_for_op,
)


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[bold red]hello[/bold red]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_custom_width(self) -> None:
        console = create_console(width=80)
        assert console.width == 80

    def test_default_width(self) -> None:
        console = create_console()
        assert console.width == 120

    def test_highlight_disabled(self) -> None:
        console = create_console()
        console.print("balance=1000.00")
        assert "\x1b" not in get_output(console)


class TestGetOutput:
    def test_extracts_printed_text(self) -> None:
        console = create_console(no_color=True)
        console.print("hello world")
        assert "hello world" in get_output(console)

    def test_empty_console(self) -> None:
        console = create_console()
        assert get_output(console) == ""


class TestStyleForOp:
    def test_mutations(self) -> None:
        assert style_for_op("credit") == "acct.credit"
        assert style_for_op("debit") == "acct.debit"

    def test_other_ops_unstyled(self) -> None:
        assert style_for_op("view_balance") == ""
        assert style_for_op("batch") == ""


class TestTheme:
    def test_theme_has_expected_styles(self) -> None:
        expected = [
            "acct.ok",
            "acct.error",
            "acct.warning",
            "acct.op",
            "acct.key",
            "acct.balance",
            "acct.credit",
            "acct.debit",
        ]
        for name in expected:
            assert name in ACCT_THEME.styles, f"Missing theme style: {name}"
