"""Form values and device configuration models."""

from dataclasses import dataclass

from spotcheck.models.common import ForecastType


class FormIncompleteError(ValueError):
    """Raised when form values are missing a field the device requires."""


@dataclass(frozen=True)
class FormValues:
    """Snapshot of the three editable fields as the user currently sees them."""

    spot_name: str | None = None
    number_of_days: str | None = None
    swell: bool = False
    tides: bool = False

    def forecast_types(self) -> tuple[ForecastType, ...]:
        enabled = []
        if self.swell:
            enabled.append(ForecastType.SWELL)
        if self.tides:
            enabled.append(ForecastType.TIDES)
        return tuple(enabled)


@dataclass(frozen=True)
class Configuration:
    spot_name: str
    number_of_days: str
    forecast_types: tuple[ForecastType, ...]

    @classmethod
    def from_form(cls, values: FormValues) -> "Configuration":
        """Build a submittable configuration, refusing absent or empty fields."""
        missing = []
        if not values.spot_name or not values.spot_name.strip():
            missing.append("spot_name")
        if not values.number_of_days:
            missing.append("number_of_days")
        forecast_types = values.forecast_types()
        if not forecast_types:
            missing.append("forecast_types")
        if missing:
            raise FormIncompleteError(f"Missing form values: {', '.join(missing)}")
        return cls(
            spot_name=values.spot_name,
            number_of_days=values.number_of_days,
            forecast_types=forecast_types,
        )

    def to_payload(self) -> dict:
        return {
            "number_of_days": self.number_of_days,
            "spot_name": self.spot_name,
            "forecast_types": [t.value for t in self.forecast_types],
        }


@dataclass(frozen=True)
class ConfigurationUpdate:
    """Fields recovered from the device. None leaves a field as it was."""

    spot_name: str | None = None
    number_of_days: str | None = None
    forecast_types: tuple[ForecastType, ...] = ()  # toggles to switch on

    @property
    def is_empty(self) -> bool:
        return (
            self.spot_name is None
            and self.number_of_days is None
            and not self.forecast_types
        )

    def apply_to(self, values: FormValues) -> FormValues:
        """Return the form values with this update layered on top."""
        return FormValues(
            spot_name=self.spot_name if self.spot_name is not None else values.spot_name,
            number_of_days=(
                self.number_of_days
                if self.number_of_days is not None
                else values.number_of_days
            ),
            swell=values.swell or ForecastType.SWELL in self.forecast_types,
            tides=values.tides or ForecastType.TIDES in self.forecast_types,
        )
