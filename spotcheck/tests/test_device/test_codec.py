"""Tests for configuration payload parsing and serialization."""

import json
import logging
from pathlib import Path

import pytest

from spotcheck.device.codec import (
    ConfigurationSerializationError,
    parse_configuration,
    serialize_configuration,
)
from spotcheck.models.common import ForecastType
from spotcheck.models.configuration import Configuration, ConfigurationUpdate

FIXTURE_DIR = Path(__file__).parent.parent / "fixtures"


class TestParseConfiguration:
    def test_full_response(self):
        body = (FIXTURE_DIR / "current_configuration.json").read_bytes()
        update = parse_configuration(body)
        assert update == ConfigurationUpdate(
            spot_name="Rincon",
            number_of_days="5",
            forecast_types=(ForecastType.SWELL, ForecastType.TIDES),
        )

    def test_unknown_forecast_type_logged(self, caplog):
        with caplog.at_level(logging.WARNING):
            update = parse_configuration(b'{"forecast_types": ["swell", "bogus"]}')
        assert update.forecast_types == (ForecastType.SWELL,)
        assert "bogus" in caplog.text

    def test_missing_keys_left_none(self):
        update = parse_configuration(b"{}")
        assert update == ConfigurationUpdate()
        assert update.is_empty

    def test_malformed_json(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert parse_configuration(b"not json at all") is None
        assert "deserialize" in caplog.text

    def test_non_object_top_level(self):
        assert parse_configuration(b'["swell"]') is None

    def test_wrong_types_ignored(self):
        update = parse_configuration(
            json.dumps({"spot_name": 7, "number_of_days": 5}).encode()
        )
        assert update.spot_name is None
        assert update.number_of_days is None

    def test_forecast_types_with_non_strings_ignored(self):
        update = parse_configuration(b'{"forecast_types": ["swell", 3]}')
        assert update.forecast_types == ()

    def test_forecast_types_not_a_list(self):
        update = parse_configuration(b'{"forecast_types": "swell"}')
        assert update.forecast_types == ()

    def test_duplicates_collapsed(self):
        update = parse_configuration(b'{"forecast_types": ["tides", "tides"]}')
        assert update.forecast_types == (ForecastType.TIDES,)


class TestSerializeConfiguration:
    def test_tides_only(self):
        config = Configuration("Rincon", "5", (ForecastType.TIDES,))
        data = json.loads(serialize_configuration(config))
        assert data == {
            "number_of_days": "5",
            "spot_name": "Rincon",
            "forecast_types": ["tides"],
        }

    def test_swell_before_tides(self):
        config = Configuration("Rincon", "5", (ForecastType.SWELL, ForecastType.TIDES))
        data = json.loads(serialize_configuration(config))
        assert data["forecast_types"] == ["swell", "tides"]

    def test_unencodable_value(self):
        config = Configuration("Rincon", object(), (ForecastType.SWELL,))
        with pytest.raises(ConfigurationSerializationError):
            serialize_configuration(config)
