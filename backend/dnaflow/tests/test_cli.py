import json

from typer.testing import CliRunner

from dnaflow.cli import manage
from .conftest import TestingSessionLocal, engine

runner = CliRunner()


def _use_test_database(monkeypatch):
    monkeypatch.setattr(manage, "SessionLocal", TestingSessionLocal)
    monkeypatch.setattr(manage, "engine", engine)


def test_report_command_prints_ordered_rows(monkeypatch):
    _use_test_database(monkeypatch)
    result = runner.invoke(manage.app, ["report", "1"])
    assert result.exit_code == 0
    rows = [json.loads(line) for line in result.stdout.splitlines()]
    assert [r["process_name"] for r in rows] == ["Extraction", "Amplification", "Quantification"]


def test_report_command_fails_for_empty_group(monkeypatch):
    _use_test_database(monkeypatch)
    result = runner.invoke(manage.app, ["report", "12"])
    assert result.exit_code == 1


def test_seed_is_idempotent(monkeypatch):
    _use_test_database(monkeypatch)
    result = runner.invoke(manage.app, ["seed"])
    assert result.exit_code == 0
    assert "nothing inserted" in result.stdout


def test_init_db_creates_schema(monkeypatch):
    _use_test_database(monkeypatch)
    result = runner.invoke(manage.app, ["init-db"])
    assert result.exit_code == 0
    assert "Schema ready" in result.stdout
