"""The UI collaborator the configure screen renders into."""

import logging
from dataclasses import replace
from typing import Protocol

from spotcheck.models.configuration import ConfigurationUpdate, FormValues

logger = logging.getLogger(__name__)


class UiSurface(Protocol):
    def set_submit_enabled(self, enabled: bool) -> None: ...

    def set_busy(self, busy: bool) -> None: ...

    def show_error(self, title: str, message: str) -> None: ...

    def show_success(self, title: str, message: str) -> None: ...

    def get_field_values(self) -> FormValues: ...

    def set_field_values(self, update: ConfigurationUpdate) -> None: ...


class ConsoleSurface:
    """Text rendition of the configure screen for the command line.

    Field values live in memory; alerts are printed and kept in ``alerts``
    so callers can tell how an exchange ended.
    """

    def __init__(self, values: FormValues | None = None):
        self.values = values or FormValues()
        self.submit_enabled = False
        self.busy = False
        self.alerts: list[tuple[str, str]] = []

    def set_submit_enabled(self, enabled: bool) -> None:
        self.submit_enabled = enabled

    def set_busy(self, busy: bool) -> None:
        if busy != self.busy:
            logger.debug("Busy: %s", busy)
        self.busy = busy

    def show_error(self, title: str, message: str) -> None:
        self.alerts.append((title, message))
        print(f"❌ {title}: {message}")

    def show_success(self, title: str, message: str) -> None:
        self.alerts.append((title, message))
        print(f"✅ {title}: {message}")

    def get_field_values(self) -> FormValues:
        return self.values

    def set_field_values(self, update: ConfigurationUpdate) -> None:
        self.values = update.apply_to(self.values)

    def edit(
        self,
        spot_name: str | None = None,
        number_of_days: str | None = None,
        swell: bool | None = None,
        tides: bool | None = None,
    ) -> None:
        """Overwrite the given fields as if the user had typed or toggled them."""
        changes = {}
        if spot_name is not None:
            changes["spot_name"] = spot_name
        if number_of_days is not None:
            changes["number_of_days"] = number_of_days
        if swell is not None:
            changes["swell"] = swell
        if tides is not None:
            changes["tides"] = tides
        self.values = replace(self.values, **changes)
