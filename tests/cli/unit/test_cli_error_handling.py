"""CLI error-handling tests."""

from __future__ import annotations

import json
from pathlib import Path

from json_hive_schema.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["generate", "--output", "/tmp/out.hql"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--input" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["generate", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "--bogus" in captured.err
    assert "Traceback" not in captured.err


def test_generation_failure_returns_exit_code_one(tmp_path: Path, capsys) -> None:
    input_path = tmp_path / "doc.json"
    input_path.write_text(
        json.dumps({"KeyedResponse": {"Response": {"tags": []}}}), encoding="utf-8"
    )
    output_path = tmp_path / "doc.hql"

    exit_code = main(["generate", "--input", str(input_path), "--output", str(output_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Cannot infer element type of empty array at 'Response.tags'" in captured.err
    assert "Traceback" not in captured.err
    assert not output_path.exists()


def test_undecodable_input_returns_exit_code_one(tmp_path: Path, capsys) -> None:
    input_path = tmp_path / "doc.json"
    input_path.write_bytes(b'{"KeyedResponse": {"Response": {"a": "\xff"}}}')
    output_path = tmp_path / "doc.hql"

    exit_code = main(["generate", "--input", str(input_path), "--output", str(output_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "not valid UTF-8" in captured.err
    assert "Traceback" not in captured.err
    assert not output_path.exists()


def test_invalid_configuration_returns_exit_code_one(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("input_type: csv\n", encoding="utf-8")

    exit_code = main(
        [
            "generate",
            "--input",
            str(tmp_path / "doc.json"),
            "--output",
            str(tmp_path / "doc.hql"),
            "--config",
            str(config_path),
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "input_type must be JSON or XML." in captured.err
