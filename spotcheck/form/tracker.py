"""Validity bookkeeping for the configure form."""

import logging
from collections.abc import Callable

from spotcheck.models.configuration import FormValues

logger = logging.getLogger(__name__)


class FormValidityTracker:
    """Tracks per-field validity and derives whether the form can be submitted.

    Each setter takes the field's raw value, updates one flag and then calls
    ``on_change`` with the recomputed ``submit_enabled``.
    """

    def __init__(self, on_change: Callable[[bool], None] | None = None):
        self.on_change = on_change
        self.name_valid = False
        self.days_valid = False
        self.forecast_valid = False

    @property
    def submit_enabled(self) -> bool:
        return self.name_valid and self.days_valid and self.forecast_valid

    def set_spot_name(self, text: str | None) -> None:
        self.name_valid = bool(text and text.strip())
        self._changed()

    def set_number_of_days(self, text: str | None) -> None:
        self.days_valid = bool(text)
        self._changed()

    def set_forecast_toggles(self, swell: bool, tides: bool) -> None:
        self.forecast_valid = swell or tides
        self._changed()

    def revalidate(self, values: FormValues) -> None:
        """Recompute every flag from a snapshot, notifying once."""
        self.name_valid = bool(values.spot_name and values.spot_name.strip())
        self.days_valid = bool(values.number_of_days)
        self.forecast_valid = values.swell or values.tides
        self._changed()

    def _changed(self) -> None:
        logger.debug(
            "Form validity name=%s days=%s forecast=%s -> submit=%s",
            self.name_valid, self.days_valid, self.forecast_valid,
            self.submit_enabled,
        )
        if self.on_change is not None:
            self.on_change(self.submit_enabled)
