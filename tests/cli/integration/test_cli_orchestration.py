"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner
from yaml_to_jsonschema.cli import cli


@pytest.fixture(autouse=True)
def _isolated_working_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_generate_command_writes_merged_schema(tmp_path: Path) -> None:
    first = _write(tmp_path / "values.yaml", "image:\n  repository: nginx\n  tag: ~\nports: []\n")
    second = _write(tmp_path / "prod.yaml", "image:\n  tag: '1.25'\nreplicas: 3\n")
    output = tmp_path / "values.schema.json"
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "generate",
            "-i",
            str(first),
            "-i",
            str(second),
            "-o",
            str(output),
            "--indent",
            "2",
            "--schema-root-title",
            "Values",
            "--additional-properties",
            "false",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "JSON schema successfully generated" in result.output
    schema = json.loads(output.read_text(encoding="utf-8"))
    assert schema == {
        "$schema": "https://json-schema.org/draft/2020-12/schema",
        "title": "Values",
        "type": "object",
        "properties": {
            "image": {
                "type": "object",
                "properties": {"repository": {"type": "string"}, "tag": {"type": "string"}},
                "required": ["repository", "tag"],
                "additionalProperties": False,
            },
            "ports": {"type": "array"},
            "replicas": {"type": "integer"},
        },
        "required": ["image", "ports", "replicas"],
        "additionalProperties": False,
    }
    assert output.read_text(encoding="utf-8").startswith('{\n  "$schema"')


def test_generate_command_reads_default_configuration_file(tmp_path: Path) -> None:
    _write(tmp_path / "values.yaml", "a: 1\n")
    _write(
        tmp_path / ".schema.yaml",
        "input: [values.yaml]\noutput: out.json\ndraft: 4\nschemaRoot:\n  id: urn:values\n",
    )
    runner = CliRunner()

    result = runner.invoke(cli, ["generate"])

    assert result.exit_code == 0, result.output
    schema = json.loads((tmp_path / "out.json").read_text(encoding="utf-8"))
    assert schema["$schema"] == "http://json-schema.org/draft-04/schema#"
    assert schema["id"] == "urn:values"


def test_command_line_overrides_configuration_file(tmp_path: Path) -> None:
    _write(tmp_path / "values.yaml", "a: 1\n")
    _write(tmp_path / "other.yaml", "b: 1\n")
    config = _write(
        tmp_path / "custom.yaml",
        "input: [values.yaml]\nschemaRoot:\n  additionalProperties: true\n",
    )
    runner = CliRunner()

    result = runner.invoke(
        cli,
        [
            "generate",
            "--config",
            str(config),
            "-i",
            "other.yaml",
            "--schema-root-additional-properties",
            "false",
            "--stdout",
        ],
    )

    assert result.exit_code == 0, result.output
    schema = json.loads(result.output)
    assert list(schema["properties"]) == ["b"]
    assert schema["additionalProperties"] is False
    assert not (tmp_path / "values.schema.json").exists()


def test_generate_config_command_writes_template(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["generate-config"])

    assert result.exit_code == 0, result.output
    assert (tmp_path / ".schema.yaml").exists()
    assert str((tmp_path / ".schema.yaml").resolve()) in result.output


def test_generate_config_command_refuses_to_overwrite(tmp_path: Path) -> None:
    _write(tmp_path / ".schema.yaml", "input: values.yaml\n")
    runner = CliRunner()

    result = runner.invoke(cli, ["generate-config"])

    assert result.exit_code != 0
    assert (tmp_path / ".schema.yaml").read_text(encoding="utf-8") == "input: values.yaml\n"
