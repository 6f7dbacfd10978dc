"""JSON encoding for the device's configuration payloads.

Parsing is lenient: anything the device sends that does not fit the expected
shape is logged and left out of the resulting update, never raised.
"""

import json
import logging

from spotcheck.models.common import ForecastType
from spotcheck.models.configuration import Configuration, ConfigurationUpdate

logger = logging.getLogger(__name__)


class ConfigurationSerializationError(Exception):
    """Raised when a configuration cannot be encoded for the device."""


def parse_configuration(body: bytes) -> ConfigurationUpdate | None:
    """Decode a current_configuration response.

    Returns None when the body is not a JSON object.
    """
    try:
        data = json.loads(body)
    except (ValueError, TypeError) as e:
        logger.warning(
            "Could not deserialize current_configuration response: %s", e
        )
        return None
    if not isinstance(data, dict):
        logger.warning(
            "current_configuration response is %s, expected an object",
            type(data).__name__,
        )
        return None

    number_of_days = data.get("number_of_days")
    if number_of_days is not None and not isinstance(number_of_days, str):
        logger.warning("Ignoring non-string number_of_days: %r", number_of_days)
        number_of_days = None

    spot_name = data.get("spot_name")
    if spot_name is not None and not isinstance(spot_name, str):
        logger.warning("Ignoring non-string spot_name: %r", spot_name)
        spot_name = None

    return ConfigurationUpdate(
        spot_name=spot_name,
        number_of_days=number_of_days,
        forecast_types=_parse_forecast_types(data.get("forecast_types")),
    )


def _parse_forecast_types(raw: object) -> tuple[ForecastType, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list) or not all(isinstance(t, str) for t in raw):
        logger.warning("Ignoring malformed forecast_types: %r", raw)
        return ()

    found = []
    for value in raw:
        try:
            forecast_type = ForecastType(value)
        except ValueError:
            logger.warning("Got an unsupported forecast type: %s", value)
            continue
        if forecast_type not in found:
            found.append(forecast_type)
    return tuple(found)


def serialize_configuration(config: Configuration) -> bytes:
    """Encode a configuration as the configure request body."""
    try:
        return json.dumps(config.to_payload(), indent=2).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise ConfigurationSerializationError(str(e)) from e
