# tests/test_cli.py
"""
Tests for the chat-tokens CLI.
"""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from chat_tokens.cli import app

runner = CliRunner()


@pytest.fixture
def request_file(tmp_path):
    path = tmp_path / "request.json"
    path.write_text(
        json.dumps(
            {
                "model": "gpt-3.5-turbo",
                "messages": [{"role": "user", "content": "hello"}],
                "functions": [{"name": "foo", "parameters": {"type": "object", "properties": {}}}],
            }
        )
    )
    return path


def test_prompt_prints_total(request_file):
    result = runner.invoke(app, ["prompt", str(request_file)])
    assert result.exit_code == 0
    assert result.output.strip() == "31"


def test_prompt_breakdown_table(request_file):
    result = runner.invoke(app, ["prompt", str(request_file), "--breakdown"])
    assert result.exit_code == 0
    assert "definitions" in result.output
    assert "31" in result.output


def test_prompt_from_stdin():
    body = json.dumps({"messages": [{"role": "user", "content": "hello"}]})
    result = runner.invoke(app, ["prompt", "-"], input=body)
    assert result.exit_code == 0
    assert result.output.strip() == "8"


def test_prompt_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    result = runner.invoke(app, ["prompt", str(path)])
    assert result.exit_code == 1


def test_prompt_invalid_role(tmp_path):
    path = tmp_path / "bad_role.json"
    path.write_text(json.dumps({"messages": [{"role": "robot", "content": "hi"}]}))
    result = runner.invoke(app, ["prompt", str(path)])
    assert result.exit_code == 1


def test_prompt_with_config(request_file, tmp_path):
    config = tmp_path / "chat_tokens.yaml"
    config.write_text("overheads:\n  completion: 4\n")
    result = runner.invoke(app, ["prompt", str(request_file), "--config", str(config)])
    assert result.exit_code == 0
    assert result.output.strip() == "32"


def test_text_command():
    result = runner.invoke(app, ["text", "hello world"])
    assert result.exit_code == 0
    assert result.output.strip() == "2"


def test_prompt_unsupported_schema(tmp_path):
    path = tmp_path / "boolean_schema.json"
    path.write_text(
        json.dumps(
            {
                "messages": [{"role": "user", "content": "hello"}],
                "functions": [
                    {"name": "f", "parameters": {"type": "object", "properties": {"x": True}}}
                ],
            }
        )
    )
    result = runner.invoke(app, ["prompt", str(path)])
    assert result.exit_code == 1
    assert "Unsupported type: True" in result.output
