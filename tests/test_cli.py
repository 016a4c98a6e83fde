"""Tests for the CLI and settings."""

import json

from click.testing import CliRunner


def test_settings_defaults():
    from somasync.config import Settings

    s = Settings(_env_file=None)
    assert s.log_level == "INFO"
    assert s.default_session_type == "initial"


def test_settings_env_override(monkeypatch):
    from somasync.config import Settings

    monkeypatch.setenv("SOMASYNC_DEFAULT_CLIENT_NAME", "Walk-in")
    assert Settings(_env_file=None).default_client_name == "Walk-in"


def test_cli_parse():
    from somasync.cli import cli

    result = CliRunner().invoke(cli, ["parse", "mark: left trapezius tension", "hello there"])
    assert result.exit_code == 0
    assert "[mark] Mark: left trapezius tension" in result.output
    assert "terms: trapezius, tension" in result.output
    assert "[speech] hello there" in result.output


def test_cli_terms():
    from somasync.cli import cli

    result = CliRunner().invoke(cli, ["terms", "shoulder pain in shoulder"])
    assert result.exit_code == 0
    assert result.output.splitlines() == ["shoulder", "pain"]


def test_cli_duration():
    from somasync.cli import cli

    runner = CliRunner()
    assert runner.invoke(cli, ["duration", "3660"]).output.strip() == "1h 1m"

    bad = runner.invoke(cli, ["duration", "--", "-5"])
    assert bad.exit_code == 1


def test_cli_findings(tmp_path):
    from somasync.cli import cli

    path = tmp_path / "transcript.txt"
    path.write_text("mark: neck tension\nsmall talk\nrom: 70 degrees\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["findings", str(path), "--elapsed", "30"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert [f["text"] for f in data] == ["Mark: neck tension", "Rom: 70 degrees"]
    assert all(f["timestamp"] == 30000 for f in data)


def test_cli_note_from_findings_json(tmp_path):
    from somasync.cli import cli

    path = tmp_path / "findings.json"
    path.write_text(json.dumps([
        {"id": "1", "timestamp": 2000, "text": "Psoas tension", "created_at": "2024-01-15T10:30:00"},
        {"id": "2", "timestamp": 1000, "text": "Client reports low back pain", "created_at": "2024-01-15T10:29:00"},
    ]), encoding="utf-8")

    result = CliRunner().invoke(cli, ["note", str(path), "--session-type", "followup", "--client", "Jane"])
    assert result.exit_code == 0
    assert "Client: Jane\nSession Type: Follow-up Session" in result.output
    assert "Objective Findings:\n\n1. Psoas tension" in result.output
    assert "1. Continue current treatment approach" in result.output


def test_cli_note_from_transcript(tmp_path):
    from somasync.cli import cli

    path = tmp_path / "transcript.txt"
    path.write_text("pain: 6 out of 10 in right hip\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["note", str(path), "--transcript", "--client", "Sam"])
    assert result.exit_code == 0
    assert "1. Pain: 6 out of 10 in right hip" in result.output


def test_cli_note_invalid_json(tmp_path):
    from somasync.cli import cli

    path = tmp_path / "findings.json"
    path.write_text('[{"id": "1", "timestamp": -5, "text": "x", "created_at": "2024-01-15T10:30:00"}]',
                    encoding="utf-8")

    result = CliRunner().invoke(cli, ["note", str(path)])
    assert result.exit_code == 1


def test_settings_log_level_validated(monkeypatch):
    import pytest
    from pydantic import ValidationError

    from somasync.config import Settings

    monkeypatch.setenv("SOMASYNC_LOG_LEVEL", "debug")
    assert Settings(_env_file=None).log_level == "DEBUG"

    monkeypatch.setenv("SOMASYNC_LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
