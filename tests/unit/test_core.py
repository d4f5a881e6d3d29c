"""Unit tests for core functionality."""

import logging
from datetime import datetime, timezone

import pytest

from station_tracker.core.logger import setup_logger, get_logger
from station_tracker.core.exceptions import (
    AggregateError,
    NetworkError,
    PipelineTimeoutError,
    TrackerError,
)
from station_tracker.core.types import (
    EnrichedPosition,
    RawPosition,
    TrackerConfig,
    Units,
    UNKNOWN_PLACE,
    Visibility,
    km_to_miles,
    miles_to_km,
)


class TestLogger:
    """Test logging functionality."""

    def test_setup_logger(self):
        """Test logger setup."""
        logger = setup_logger("test_logger", level="DEBUG")

        assert logger.name == "test_logger"
        assert logger.level == logging.DEBUG

    def test_get_logger_nests_under_package(self):
        """Module loggers propagate to the package logger."""
        package_logger = setup_logger()
        child = get_logger("sources.wheretheiss")

        assert child.name == "station_tracker.sources.wheretheiss"
        assert logging.getLogger("station_tracker") is package_logger

    def test_get_logger_keeps_qualified_names(self):
        assert get_logger("station_tracker.cli").name == "station_tracker.cli"

    def test_file_logging(self, tmp_path):
        """Test logging to file."""
        log_file = tmp_path / "test.log"
        logger = setup_logger("file_logger", log_file=log_file)

        logger.info("Test message")

        assert log_file.exists()
        assert "Test message" in log_file.read_text()

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="verbose"):
            setup_logger("bad_level_logger", level="verbose")

    def test_http_loggers_quieted(self):
        setup_logger(level="INFO")

        assert logging.getLogger("httpx").level == logging.WARNING


class TestExceptions:
    """Test custom exceptions."""

    def test_tracker_error(self):
        """Test TrackerError with details."""
        details = {"status_code": 503, "url": "https://example.test"}
        error = TrackerError("Test error", details=details)

        assert str(error) == "Test error"
        assert error.details == details

    @pytest.mark.parametrize("cls", [NetworkError, AggregateError, PipelineTimeoutError])
    def test_inheritance(self, cls):
        error = cls("Problem")

        assert isinstance(error, TrackerError)
        assert error.details == {}


class TestRawPosition:
    """Test RawPosition decoding and derived values."""

    def test_from_dict(self, positions_payload):
        position = RawPosition.from_dict(positions_payload[0])

        assert position.id == 25544
        assert position.name == "iss"
        assert position.latitude == pytest.approx(-6.236242)
        assert position.longitude == pytest.approx(24.344490)
        assert position.visibility is Visibility.DAYLIGHT
        assert position.units is Units.KILOMETERS
        assert position.solar_lat == pytest.approx(-17.8075)

    def test_wire_names_round_trip(self, positions_payload):
        data = RawPosition.from_dict(positions_payload[2]).to_dict()

        assert data["solar_lat"] == positions_payload[2]["solar_lat"]
        assert data["solar_lon"] == positions_payload[2]["solar_lon"]
        assert data["visibility"] == "eclipsed"

    def test_missing_field(self, positions_payload):
        payload = dict(positions_payload[0])
        del payload["altitude"]

        with pytest.raises(KeyError):
            RawPosition.from_dict(payload)

    @pytest.mark.parametrize("field,value", [("latitude", 91.0), ("longitude", -180.5)])
    def test_coordinate_range(self, positions_payload, field, value):
        payload = dict(positions_payload[0], **{field: value})

        with pytest.raises(ValueError):
            RawPosition.from_dict(payload)

    def test_unknown_visibility(self, positions_payload):
        payload = dict(positions_payload[0], visibility="twilight")

        with pytest.raises(ValueError):
            RawPosition.from_dict(payload)

    def test_date_is_utc(self, sample_raw):
        assert sample_raw[0].date == datetime(2022, 11, 12, 16, 0, tzinfo=timezone.utc)

    def test_local_time(self, sample_raw):
        assert sample_raw[1].local_time(timezone.utc).hour == 17

    def test_unit_conversion(self, sample_raw):
        position = sample_raw[0]

        assert position.altitude_km == pytest.approx(417.1784197)
        assert position.altitude_miles == pytest.approx(259.2227, abs=1e-3)
        assert position.velocity_mph == pytest.approx(position.velocity_kmh / 1.609344)

    def test_miles_payload_converted(self, positions_payload):
        payload = dict(positions_payload[0], units="miles", altitude=250.0)
        position = RawPosition.from_dict(payload)

        assert position.altitude_miles == pytest.approx(250.0)
        assert position.altitude_km == pytest.approx(402.336)

    def test_altitude_round_trip(self):
        assert miles_to_km(km_to_miles(417.178)) == pytest.approx(417.178, abs=1e-6)


class TestEnrichedPosition:
    """Test EnrichedPosition delegation and serialization."""

    def test_delegates_to_position(self, sample_raw):
        enriched = EnrichedPosition(sample_raw[0], "Kabinda")

        assert enriched.id == sample_raw[0].id
        assert enriched.coordinate == sample_raw[0].coordinate
        assert enriched.altitude_km == sample_raw[0].altitude_km
        assert enriched.date == sample_raw[0].date

    def test_default_name(self, sample_raw):
        assert EnrichedPosition(sample_raw[0]).location_name == UNKNOWN_PLACE

    def test_immutable(self, sample_enriched):
        with pytest.raises(AttributeError):
            sample_enriched[0].location_name = "Elsewhere"

    def test_dict_round_trip(self, sample_enriched):
        item = sample_enriched[2]

        assert EnrichedPosition.from_dict(item.to_dict()) == item


class TestSamples:
    """Test the bundled sample dataset."""

    def test_sample_names(self, sample_enriched):
        assert len(sample_enriched) == 10
        assert [item.location_name for item in sample_enriched[:3]] == [
            "Kabinda",
            "South Pacific Ocean",
            "Khövsgöl",
        ]

    def test_samples_hourly(self, sample_enriched):
        timestamps = [item.timestamp for item in sample_enriched]

        assert all(b - a == 3600 for a, b in zip(timestamps, timestamps[1:]))


class TestTrackerConfig:
    """Test TrackerConfig dataclass."""

    def test_default_config(self):
        config = TrackerConfig()

        assert config.catalog_id == 25544
        assert config.hourly_intervals == 10
        assert config.base_url == "https://api.wheretheiss.at/v1"
        assert config.measurement_system == "metric"
