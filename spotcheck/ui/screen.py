"""Event wiring for the configure screen."""

import asyncio
import logging

from spotcheck.form.tracker import FormValidityTracker
from spotcheck.sync.config_sync import DeviceConfigSync
from spotcheck.ui.surface import UiSurface

logger = logging.getLogger(__name__)


class ConfigureScreen:
    """Binds user edits to the validity tracker and the save action to the sync.

    Handlers read the current field values back from the surface, the way a
    widget callback reads its own control.
    """

    def __init__(
        self,
        ui: UiSurface,
        sync: DeviceConfigSync,
        tracker: FormValidityTracker,
    ):
        self.ui = ui
        self.sync = sync
        self.tracker = tracker
        self.tracker.on_change = self._validity_changed

    def activate(self) -> asyncio.Task:
        """Show the initial validity, then load the device's configuration."""
        self.ui.set_submit_enabled(self.tracker.submit_enabled)
        return self.sync.fetch_config()

    def deactivate(self) -> None:
        self.sync.cancel_all()

    def spot_name_changed(self) -> None:
        self.tracker.set_spot_name(self.ui.get_field_values().spot_name)

    def number_of_days_changed(self) -> None:
        self.tracker.set_number_of_days(self.ui.get_field_values().number_of_days)

    def forecast_toggled(self) -> None:
        values = self.ui.get_field_values()
        self.tracker.set_forecast_toggles(values.swell, values.tides)

    def save_clicked(self) -> asyncio.Task | None:
        if self.sync.busy or not self.tracker.submit_enabled:
            logger.info("Save ignored, submit is disabled")
            return None
        return self.sync.apply_config()

    def _validity_changed(self, submit_enabled: bool) -> None:
        # A request in flight keeps the control disabled until it completes
        if not self.sync.busy:
            self.ui.set_submit_enabled(submit_enabled)
