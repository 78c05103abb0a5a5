"""Tests for the modeltext CLI."""

import json

import pytest
from click.testing import CliRunner

import modeltext.commands.scan as scan_command
from modeltext.cli import cli
from modeltext.text.exceptions import OccurrenceValidationError, ValidationFailure
from modeltext.utils.exit_codes import ExitCodes


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def model_path(write_model, weather_document):
    return str(write_model(weather_document))


class TestHelp:
    """Help output stays ASCII for CP1252 terminals."""

    @pytest.mark.parametrize("args", [["--help"], ["scan", "--help"], ["terms", "--help"]])
    def test_help_ascii(self, runner, args):
        result = runner.invoke(cli, args)
        assert result.exit_code == 0
        try:
            result.output.encode("ascii")
        except UnicodeEncodeError as e:
            pytest.fail(f"Non-ASCII character in modeltext {' '.join(args)}: {e}")

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "modeltext" in result.output


class TestScanCommand:
    def test_json_lists_every_occurrence(self, runner, model_path):
        result = runner.invoke(cli, ["scan", model_path, "--format", "json"])
        assert result.exit_code == 0

        payload = json.loads(result.stdout)
        texts = [f["text"] for f in payload["findings"]]
        assert texts[0] == "Weather"
        assert texts[-2:] == ["example.weather", "smithy.api"]
        assert payload["summary"]["total"] == len(texts) == 14

    def test_table_output(self, runner, model_path):
        result = runner.invoke(cli, ["scan", model_path])
        assert result.exit_code == 0
        assert "TEXT OCCURRENCES" in result.output
        assert "Total: 14" in result.output

    def test_save(self, runner, model_path, tmp_path):
        out = tmp_path / "occurrences.json"
        result = runner.invoke(cli, ["scan", model_path, "--format", "json", "--save", str(out)])
        assert result.exit_code == 0
        assert json.loads(out.read_text(encoding="utf-8"))["summary"]["total"] == 14

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["scan", str(tmp_path / "absent.json")])
        assert result.exit_code != 0

    def test_invalid_model_is_a_short_error(self, runner, write_model, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        path = write_model({"shapes": {"example#Foo": {"traits": {}}}})
        result = runner.invoke(cli, ["scan", str(path)])

        assert result.exit_code == 1
        assert "Invalid model: Shape example#Foo must be an object with a 'type'" in result.output
        assert "shape: example#Foo" in result.output
        assert "traceback" not in result.output
        assert not (tmp_path / ".modeltext" / "error.log").exists()

    def test_broken_occurrence_is_logged_with_traceback(self, runner, model_path, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)

        def broken(*args):
            raise OccurrenceValidationError(ValidationFailure.MISSING_TEXT, "text must be specified")

        monkeypatch.setattr(scan_command, "scan_model", broken)
        result = runner.invoke(cli, ["scan", model_path])

        assert result.exit_code == 1
        assert "OccurrenceValidationError: MissingText: text must be specified" in result.output
        assert "Full traceback logged to" in result.output

        log = (tmp_path / ".modeltext" / "error.log").read_text(encoding="utf-8")
        assert "reason: MissingText" in log
        assert "Traceback" in log

    def test_unexpected_error_is_logged_with_traceback(self, runner, model_path, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)

        def broken(*args):
            raise RuntimeError("analyzer exploded")

        monkeypatch.setattr(scan_command, "scan_model", broken)
        result = runner.invoke(cli, ["scan", model_path])

        assert result.exit_code == 1
        assert "RuntimeError: analyzer exploded" in result.output
        assert "Full traceback logged to" in result.output
        log = (tmp_path / ".modeltext" / "error.log").read_text(encoding="utf-8")
        assert "scan failed" in log
        assert "RuntimeError: analyzer exploded" in log


class TestTermsCommand:
    def test_findings_json(self, runner, model_path):
        result = runner.invoke(cli, ["terms", model_path, "--term", "master", "--format", "json"])
        assert result.exit_code == 0

        payload = json.loads(result.stdout)
        assert [f["text"] for f in payload["findings"]] == ["Chance of rain, master value."]
        assert payload["findings"][0]["details"] == {"term": "master"}

    def test_fail_on_findings(self, runner, model_path):
        result = runner.invoke(cli, ["terms", model_path, "--term", "master", "--fail-on-findings"])
        assert result.exit_code == ExitCodes.FINDINGS_REPORTED

    def test_no_findings_succeeds(self, runner, model_path):
        result = runner.invoke(cli, ["terms", model_path, "--term", "zebra", "--fail-on-findings"])
        assert result.exit_code == ExitCodes.SUCCESS
        assert "nothing reported" in result.output

    def test_kind_filter(self, runner, model_path):
        result = runner.invoke(
            cli, ["terms", model_path, "--term", "weather", "--kind", "namespace", "--format", "json"]
        )
        payload = json.loads(result.stdout)
        assert [f["location_kind"] for f in payload["findings"]] == ["namespace"]
