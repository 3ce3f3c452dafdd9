"""Tests for the calcpad CLI, run through typer's CliRunner."""

import json

from typer.testing import CliRunner

from calcpad.__main__ import app

runner = CliRunner()


# --- keys ---

def test_keys_lists_keypad():
    result = runner.invoke(app, ["keys"])
    assert result.exit_code == 0
    assert "Keypad" in result.output
    assert "operation" in result.output


# --- press ---

def test_press_renders_result():
    result = runner.invoke(app, ["press", "7", "+", "5", "="])
    assert result.exit_code == 0
    assert "7 + 5 = 12" in result.output


def test_press_json_record():
    result = runner.invoke(app, ["press", "6", "/", "4", "=", "--json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["display_value"] == "1.5"
    assert data["last_result"] == "6 ÷ 4 = 1.5"
    assert data["pending_operator"] is None
    assert data["ready_to_replace"] is True


def test_press_pending_operator_in_json():
    result = runner.invoke(app, ["press", "8", "x", "--json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["pending_operator"] == "×"
    assert data["equation_text"] == "8 × "


def test_press_division_by_zero():
    result = runner.invoke(app, ["press", "5", "/", "0", "=", "--json"])
    assert result.exit_code == 0
    assert json.loads(result.output)["display_value"] == "inf"


def test_press_unknown_key_fails():
    result = runner.invoke(app, ["press", "7", "sqrt"])
    assert result.exit_code == 1
    assert "Unknown key" in result.output


def test_press_light_theme():
    result = runner.invoke(app, ["press", "1", "--light"])
    assert result.exit_code == 0
    assert "○ off" in result.output


# --- run ---

def test_run_interactive_session():
    result = runner.invoke(app, ["run"], input="7 + 5 =\nq\n")
    assert result.exit_code == 0
    assert "7 + 5 = 12" in result.output


def test_run_skips_unknown_and_toggles_theme():
    result = runner.invoke(app, ["run"], input="9 bogus\ntheme\n")
    assert result.exit_code == 0
    assert "Skipped unknown key" in result.output
    assert "○ off" in result.output


def test_run_ends_on_eof():
    result = runner.invoke(app, ["run"], input="")
    assert result.exit_code == 0


def test_run_reset_drops_last_result():
    result = runner.invoke(app, ["run"], input="7 + 5 =\nreset 4\nq\n")
    assert result.exit_code == 0
    # The screen after "reset 4" is the last one rendered
    last_screen = result.output.rsplit("keys>", 1)[0].rsplit("Dark Mode", 1)[1]
    assert "7 + 5 = 12" not in last_screen
    assert "4" in last_screen


def test_press_json_reports_theme():
    result = runner.invoke(app, ["press", "1", "--json", "--light"])
    assert json.loads(result.output)["theme"] == "light"
