"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from yaml_to_jsonschema.cli import main


@pytest.fixture(autouse=True)
def _isolated_working_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)


def test_missing_input_returns_configuration_error(capsys) -> None:
    exit_code = main(["generate"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "At least one input file is required" in captured.err
    assert "Traceback" not in captured.err


def test_odd_indent_returns_error_without_writing_output(tmp_path: Path, capsys) -> None:
    values = tmp_path / "values.yaml"
    values.write_text("a: 1\n", encoding="utf-8")
    output = tmp_path / "schema.json"

    exit_code = main(["generate", "-i", str(values), "-o", str(output), "--indent", "3"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "indent must be an even number" in captured.err
    assert not output.exists()


def test_unreadable_input_names_the_file(tmp_path: Path, capsys) -> None:
    good = tmp_path / "good.yaml"
    good.write_text("a: 1\n", encoding="utf-8")
    output = tmp_path / "schema.json"

    exit_code = main(["generate", "-i", str(good), "-i", "nope.yaml", "-o", str(output)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "nope.yaml" in captured.err
    assert not output.exists()


def test_invalid_boolean_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["generate", "--additional-properties", "maybe"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "--additional-properties" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["generate", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option" in captured.err
    assert "--bogus" in captured.err
    assert "Traceback" not in captured.err
