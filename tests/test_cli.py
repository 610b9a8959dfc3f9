"""CLI tests via typer's CliRunner."""

import pytest
from typer.testing import CliRunner

import calcpad.__main__ as cli
from calcpad.__main__ import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("CALCPAD_PRECISION", raising=False)
    monkeypatch.delenv("CALCPAD_LOG_LEVEL", raising=False)


# --- eval ---

def test_eval_prints_formatted_result():
    result = runner.invoke(app, ["eval", "5 + 3 * 2"])
    assert result.exit_code == 0
    assert result.output.strip() == "11"


def test_eval_hides_float_noise():
    result = runner.invoke(app, ["eval", "0.1 + 0.2"])
    assert result.exit_code == 0
    assert result.output.strip() == "0.3"


def test_eval_raw():
    result = runner.invoke(app, ["eval", "0.1 + 0.2", "--raw"])
    assert result.exit_code == 0
    assert result.output.strip() == "0.30000000000000004"


def test_eval_precision_option():
    result = runner.invoke(app, ["eval", "10 / 3", "--precision", "2"])
    assert result.output.strip() == "3.33"


def test_eval_precision_from_env(monkeypatch):
    monkeypatch.setenv("CALCPAD_PRECISION", "1")
    result = runner.invoke(app, ["eval", "10 / 3"])
    assert result.output.strip() == "3.3"


def test_eval_error_exits_nonzero():
    result = runner.invoke(app, ["eval", "5 / 0"])
    assert result.exit_code == 1
    assert "Division by zero" in result.output
    assert "division-by-zero" in result.output


def test_eval_invalid_number():
    result = runner.invoke(app, ["eval", "5 + abc"])
    assert result.exit_code == 1
    assert "Invalid number: abc" in result.output


# --- format ---

def test_format_command():
    result = runner.invoke(app, ["format", "0.30000000000000004"])
    assert result.exit_code == 0
    assert result.output.strip() == "0.3"


def test_format_integer():
    result = runner.invoke(app, ["format", "8.0"])
    assert result.output.strip() == "8"


def test_format_rejects_text():
    result = runner.invoke(app, ["format", "abc"])
    assert result.exit_code == 1
    assert "Invalid number" in result.output


# --- keys ---

def test_keys_command():
    result = runner.invoke(app, ["keys", "5+3*2="])
    assert result.exit_code == 0
    assert "11" in result.output
    assert "idle" in result.output


def test_keys_words_mode():
    result = runner.invoke(app, ["keys", "--words", "7 8 Backspace * 2 Enter"])
    assert result.exit_code == 0
    assert "14" in result.output


def test_keys_error_exits_nonzero():
    result = runner.invoke(app, ["keys", "5/0="])
    assert result.exit_code == 1
    assert "Division by zero" in result.output


def test_keys_reports_ignored():
    result = runner.invoke(app, ["keys", "1x+1="])
    assert result.exit_code == 0
    assert "Ignored keys" in result.output


# --- repl ---

def test_repl_session():
    result = runner.invoke(app, ["repl"], input="5 + 3 * 2\n5 / 0\n\n20 - 4 / 2\nquit\n")
    assert result.exit_code == 0
    assert "11" in result.output
    assert "Division by zero" in result.output
    assert "18" in result.output


def test_repl_stops_at_eof():
    result = runner.invoke(app, ["repl"], input="2 * 3\n")
    assert result.exit_code == 0
    assert "6" in result.output


# --- logging ---

def test_verbose_flag_logs_folds():
    result = runner.invoke(app, ["--verbose", "eval", "2 * 3"])
    assert result.exit_code == 0
    assert "Fold" in result.output


# --- settings ---

def test_settings_loaded_once_per_invocation(monkeypatch):
    calls = []
    real_load = cli.load_settings

    def counting_load():
        calls.append(1)
        return real_load()

    monkeypatch.setattr(cli, "load_settings", counting_load)
    monkeypatch.setenv("CALCPAD_PRECISION", "ten")
    result = runner.invoke(app, ["eval", "10 / 3"])
    assert result.exit_code == 0
    assert result.output.strip().endswith("3.3333333333")
    assert len(calls) == 1


def test_keys_uses_env_precision(monkeypatch):
    monkeypatch.setenv("CALCPAD_PRECISION", "2")
    result = runner.invoke(app, ["keys", "10/3="])
    assert result.exit_code == 0
    assert "3.33" in result.output
    assert "3.333" not in result.output
