"""Unit tests for the command-line interface."""

from contextlib import asynccontextmanager

import pytest
import yaml
from typer.testing import CliRunner

from station_tracker import __version__
from station_tracker import cli
from station_tracker.core.exceptions import NetworkError

runner = CliRunner()


class StubPipeline:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    async def enrich(self, starting_at=None, count=10):
        self.calls.append((starting_at, count))
        if self.error is not None:
            raise self.error
        return self.result[:count]


@pytest.fixture
def stub_pipeline(monkeypatch, sample_enriched):
    pipeline = StubPipeline(result=sample_enriched)
    configs = []

    @asynccontextmanager
    async def fake_open_pipeline(config=None):
        configs.append(config)
        yield pipeline

    monkeypatch.setattr(cli, "open_pipeline", fake_open_pipeline)
    pipeline.configs = configs
    return pipeline


class TestCli:
    """Test CLI commands with a stubbed pipeline."""

    def test_version(self):
        result = runner.invoke(cli.app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_track(self, stub_pipeline):
        result = runner.invoke(cli.app, ["track", "--count", "3"])

        assert result.exit_code == 0, result.output
        assert "Kabinda" in result.output
        assert "417 km" in result.output
        assert stub_pipeline.calls == [(None, 3)]

    def test_track_imperial(self, stub_pipeline):
        result = runner.invoke(cli.app, ["track", "--count", "1", "--imperial"])

        assert result.exit_code == 0, result.output
        assert "259 mi" in result.output

    def test_track_json(self, stub_pipeline):
        result = runner.invoke(cli.app, ["track", "-n", "2", "--json"])

        assert result.exit_code == 0, result.output
        assert '"locationName": "Kabinda"' in result.output
        assert '"locationName": "South Pacific Ocean"' in result.output

    def test_track_start_time(self, stub_pipeline):
        result = runner.invoke(cli.app, ["track", "--start", "2022-11-12T16:37:00+00:00"])

        assert result.exit_code == 0, result.output
        starting_at, count = stub_pipeline.calls[0]
        assert starting_at.hour == 16
        assert count == 10

    def test_track_bad_start(self, stub_pipeline):
        result = runner.invoke(cli.app, ["track", "--start", "yesterday"])

        assert result.exit_code == 1
        assert stub_pipeline.calls == []

    def test_track_falls_back_to_samples(self, stub_pipeline):
        stub_pipeline.error = NetworkError("HTTP 503")

        result = runner.invoke(cli.app, ["track", "-n", "1"])

        assert result.exit_code == 0, result.output
        assert "Kabinda" in result.output

    def test_config_file_applies(self, stub_pipeline, tmp_path):
        path = tmp_path / "tracker.yaml"
        path.write_text(yaml.safe_dump({"tracker": {"catalog_id": 48274, "hourly_intervals": 2}}))

        result = runner.invoke(cli.app, ["--config", str(path), "track"])

        assert result.exit_code == 0, result.output
        assert stub_pipeline.configs[0].catalog_id == 48274
        assert stub_pipeline.calls == [(None, 2)]

    def test_timeline(self, stub_pipeline):
        result = runner.invoke(cli.app, ["timeline", "-n", "2"])

        assert result.exit_code == 0, result.output
        assert "ISS over Kabinda" in result.output

    def test_config_show(self):
        result = runner.invoke(cli.app, ["config", "show"])

        assert result.exit_code == 0
        assert "catalog_id" in result.output
        assert "25544" in result.output

    def test_config_create(self, tmp_path):
        path = tmp_path / "station_tracker.yaml"

        result = runner.invoke(cli.app, ["config", "create", "--file", str(path)])

        assert result.exit_code == 0
        assert yaml.safe_load(path.read_text())["tracker"]["catalog_id"] == 25544

    def test_config_validate(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text(yaml.safe_dump({"display": {"measurement_system": "nautical"}}))

        result = runner.invoke(cli.app, ["--config", str(path), "config", "validate"])

        assert result.exit_code == 1
        assert "measurement_system" in result.output

    def test_config_unknown_action(self):
        result = runner.invoke(cli.app, ["config", "frobnicate"])

        assert result.exit_code == 1

    def test_unknown_log_level(self, stub_pipeline, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("logging:\n  level: verbose\n")

        result = runner.invoke(cli.app, ["--config", str(path), "config", "validate"])

        assert result.exit_code == 1
        assert not isinstance(result.exception, AttributeError)
        assert "Error:" in result.output
        assert "logging.level" in result.output

    @pytest.mark.parametrize("command", ["track", "timeline"])
    def test_non_numeric_setting(self, stub_pipeline, tmp_path, command):
        path = tmp_path / "bad.yaml"
        path.write_text("tracker:\n  catalog_id: iss\n")

        result = runner.invoke(cli.app, ["--config", str(path), command, "-n", "0"])

        assert result.exit_code == 1
        assert not isinstance(result.exception, ValueError)
        assert "tracker.catalog_id" in result.output
        assert stub_pipeline.calls == []
