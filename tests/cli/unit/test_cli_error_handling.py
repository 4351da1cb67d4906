"""CLI error-handling tests."""

from __future__ import annotations

from property_sunset_checker.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["check", "--output", "/tmp/out.xlsx"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--diff" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["check", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_invalid_fail_on_level_is_rejected(capsys) -> None:
    exit_code = main(["check", "--diff", "diff.yaml", "--fail-on", "fatal"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "--fail-on" in captured.err
