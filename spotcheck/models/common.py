"""Common enums shared across models."""

from enum import StrEnum


class ForecastType(StrEnum):
    # Declaration order is the order types are sent to the device
    SWELL = "swell"
    TIDES = "tides"


class Channel(StrEnum):
    FETCH = "fetch"
    APPLY = "apply"


class RequestState(StrEnum):
    IDLE = "idle"
    REQUESTING = "requesting"
    CANCELLED = "cancelled"
