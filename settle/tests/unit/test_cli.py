"""Unit tests for the settle command-line interface."""

import json

import pytest
import yaml
from click.testing import CliRunner

from settle.cli_main import main
from settle.config import get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from SETTLE_* variables and any local .env file."""
    for name in ("SETTLE_LOG_LEVEL", "SETTLE_DEMO_START",
                 "SETTLE_DEMO_STOP", "SETTLE_DEMO_STEP", "SETTLE_DEMO_MAX_DELAY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def runner():
    """Create CLI runner."""
    return CliRunner()


class TestMain:
    """Test the root command group."""

    def test_help(self, runner):
        """Test that help lists both commands."""
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "demo" in result.output
        assert "classify" in result.output

    def test_version(self, runner):
        """Test the version banner."""
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert "Settle CLI v" in result.output

    def test_invalid_configuration_exits(self, runner, monkeypatch):
        """Test that a bad environment value fails with exit code 1."""
        monkeypatch.setenv("SETTLE_DEMO_STOP", "lots")

        result = runner.invoke(main, ["demo"])

        assert result.exit_code == 1
        assert "SETTLE_DEMO_STOP" in result.output


class TestDemoCommand:
    """Test the demo command."""

    def test_json_output(self, runner):
        """Test the JSON summary for requests 1..4."""
        result = runner.invoke(main, ["demo", "--stop", "4", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["total"] == 4
        assert data["fulfilled_values"] == [1, 3]
        assert data["rejected_reasons"] == ["RequestRejected: 2", "RequestRejected: 4"]

    def test_settings_fill_unset_options(self, runner, monkeypatch):
        """Test that SETTLE_DEMO_* values are used when options are omitted."""
        monkeypatch.setenv("SETTLE_DEMO_START", "5")
        monkeypatch.setenv("SETTLE_DEMO_STOP", "8")

        result = runner.invoke(main, ["demo", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["fulfilled_values"] == [5, 7]
        assert data["rejected_count"] == 2

    def test_rich_output(self, runner):
        """Test the table output."""
        result = runner.invoke(main, ["demo", "--stop", "6"])

        assert result.exit_code == 0
        assert "Fulfilled values" in result.output
        assert "Rejected reasons" in result.output
        assert "RequestRejected: 6" in result.output
        assert "All requests settled" in result.output

    def test_zero_step_fails(self, runner):
        """Test that an invalid range exits with an error."""
        result = runner.invoke(main, ["demo", "--step", "0"])

        assert result.exit_code == 1
        assert "step must be non-zero" in result.output

    def test_zero_step_fails_as_json(self, runner):
        """Test the JSON error shape."""
        result = runner.invoke(main, ["demo", "--step", "0", "--json"])

        assert result.exit_code == 1
        assert json.loads(result.output) == {"error": "step must be non-zero"}


class TestClassifyCommand:
    """Test the classify command."""

    RECORDS = [
        {"status": "fulfilled", "value": 1},
        {"status": "rejected", "reason": "a"},
        {"status": "fulfilled", "value": 3},
        {"status": "rejected", "reason": "b"},
    ]

    def test_json_file(self, runner, tmp_path):
        """Test classifying a JSON record file."""
        path = tmp_path / "results.json"
        path.write_text(json.dumps(self.RECORDS))

        result = runner.invoke(main, ["classify", str(path), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["fulfilled_values"] == [1, 3]
        assert data["rejected_reasons"] == ["a", "b"]

    def test_yaml_file(self, runner, tmp_path):
        """Test classifying a YAML record file."""
        path = tmp_path / "results.yaml"
        path.write_text(yaml.dump(self.RECORDS))

        result = runner.invoke(main, ["classify", str(path)])

        assert result.exit_code == 0
        assert "Fulfilled values" in result.output
        assert "results.yaml" in result.output

    def test_empty_yaml_file(self, runner, tmp_path):
        """Test that an empty document classifies as an empty batch."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        result = runner.invoke(main, ["classify", str(path), "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output)["total"] == 0

    def test_yaml_dates_serialize(self, runner, tmp_path):
        """Test that YAML date values survive JSON output."""
        path = tmp_path / "dated.yaml"
        path.write_text("- status: fulfilled\n  value: 2024-01-02\n")

        result = runner.invoke(main, ["classify", str(path), "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output)["fulfilled_values"] == ["2024-01-02"]

    def test_malformed_record_fails(self, runner, tmp_path):
        """Test that an unknown status exits with an error."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps([{"status": "pending"}]))

        result = runner.invoke(main, ["classify", str(path), "--json"])

        assert result.exit_code == 1
        assert "Unknown outcome status" in json.loads(result.output)["error"]

    def test_non_list_document_fails(self, runner, tmp_path):
        """Test that a document that is not a list is rejected."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"status": "fulfilled", "value": 1}))

        result = runner.invoke(main, ["classify", str(path)])

        assert result.exit_code == 1
        assert "Expected a list" in result.output

    def test_missing_file(self, runner, tmp_path):
        """Test that a missing file is a usage error."""
        result = runner.invoke(main, ["classify", str(tmp_path / "nope.json")])

        assert result.exit_code == 2

    def test_yaml_binary_and_set_serialize(self, runner, tmp_path):
        """Test that YAML binary and set values survive JSON output."""
        path = tmp_path / "tagged.yaml"
        path.write_text(
            "- status: fulfilled\n"
            "  value: !!binary aGVsbG8=\n"
            "- status: fulfilled\n"
            "  value: !!set {b: null, a: null}\n"
        )

        result = runner.invoke(main, ["classify", str(path), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["fulfilled_values"] == ["hello", ["a", "b"]]
        assert data["rejected_count"] == 0

    def test_unserializable_value_fails_cleanly(self, runner, tmp_path, monkeypatch):
        """Test that a JSON rendering failure is reported, not raised."""
        path = tmp_path / "results.json"
        path.write_text(json.dumps(self.RECORDS))

        def refuse(obj):
            raise TypeError("cannot encode")

        monkeypatch.setattr("settle.cli.utils.json_utils.json_serializer", refuse)
        monkeypatch.setattr(
            "settle.cli.utils.json_utils.SettlementSummary.to_dict",
            lambda self: {"values": [object()]},
        )

        result = runner.invoke(main, ["classify", str(path), "--json"])

        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert json.loads(result.output) == {"error": "cannot encode"}
