"""Fetch and apply the device configuration on behalf of the configure screen."""

import asyncio
import logging

from spotcheck.config.defaults import (
    APPLY_ERROR_MESSAGE,
    APPLY_SUCCESS_MESSAGE,
    ERROR_TITLE,
    FETCH_ERROR_MESSAGE,
    FORM_INCOMPLETE_MESSAGE,
    SUCCESS_TITLE,
)
from spotcheck.device.client import DeviceClient, DeviceRequestError
from spotcheck.device.codec import (
    ConfigurationSerializationError,
    parse_configuration,
    serialize_configuration,
)
from spotcheck.form.tracker import FormValidityTracker
from spotcheck.models.common import Channel
from spotcheck.models.configuration import Configuration, FormIncompleteError
from spotcheck.sync.channel import RequestChannel
from spotcheck.ui.surface import UiSurface

logger = logging.getLogger(__name__)


class DeviceConfigSync:
    """Runs the fetch and apply exchanges with the device.

    Must be driven from the event loop that owns the UI surface. While any
    channel has a request in flight the surface shows busy and the submit
    control stays disabled; when the last one finishes the control goes back
    to whatever the tracker derives.
    """

    def __init__(
        self,
        client: DeviceClient,
        ui: UiSurface,
        tracker: FormValidityTracker,
        revalidate_after_fetch: bool = True,
    ):
        self.client = client
        self.ui = ui
        self.tracker = tracker
        self.revalidate_after_fetch = revalidate_after_fetch
        self.fetch_channel = RequestChannel(Channel.FETCH)
        self.apply_channel = RequestChannel(Channel.APPLY)
        self._busy: set[Channel] = set()

    @property
    def busy(self) -> bool:
        return bool(self._busy)

    # --- Fetch ---

    def fetch_config(self) -> asyncio.Task:
        """Read the device's saved configuration into the form."""
        self.fetch_channel.cancel()
        self._begin(Channel.FETCH)
        return self.fetch_channel.submit(
            self.client.get_current_configuration,
            self._on_fetch_success,
            self._on_fetch_error,
        )

    def _on_fetch_success(self, body: bytes) -> None:
        update = parse_configuration(body)
        if update is not None:
            logger.info(
                "Loaded device configuration: spot=%r days=%r forecasts=%s",
                update.spot_name, update.number_of_days,
                [t.value for t in update.forecast_types],
            )
            self.ui.set_field_values(update)
            if self.revalidate_after_fetch:
                self.tracker.revalidate(self.ui.get_field_values())
        self._end(Channel.FETCH)

    def _on_fetch_error(self, error: DeviceRequestError) -> None:
        logger.error("Could not retrieve current configuration: %s", error)
        self._end(Channel.FETCH)
        self.ui.show_error(ERROR_TITLE, FETCH_ERROR_MESSAGE)

    # --- Apply ---

    def apply_config(self) -> asyncio.Task | None:
        """Send the form's values to the device.

        Returns None when nothing was sent because the form could not be
        turned into a request body.
        """
        self.apply_channel.cancel()
        self._begin(Channel.APPLY)

        try:
            config = Configuration.from_form(self.ui.get_field_values())
            body = serialize_configuration(config)
        except FormIncompleteError as e:
            logger.warning("Not applying configuration: %s", e)
            self._end(Channel.APPLY)
            self.ui.show_error(ERROR_TITLE, FORM_INCOMPLETE_MESSAGE)
            return None
        except ConfigurationSerializationError as e:
            logger.warning("Could not serialize configuration: %s", e)
            self._end(Channel.APPLY)
            return None

        async def send() -> bytes:
            return await self.client.configure(body)

        return self.apply_channel.submit(
            send, self._on_apply_success, self._on_apply_error
        )

    def _on_apply_success(self, _body: bytes) -> None:
        logger.info("Applied new configuration to device")
        self._end(Channel.APPLY)
        self.ui.show_success(SUCCESS_TITLE, APPLY_SUCCESS_MESSAGE)

    def _on_apply_error(self, error: DeviceRequestError) -> None:
        logger.error("Could not apply configuration: %s", error)
        self._end(Channel.APPLY)
        self.ui.show_error(ERROR_TITLE, APPLY_ERROR_MESSAGE)

    def cancel_all(self) -> None:
        """Drop both channels' requests and release the busy state."""
        for channel in (self.fetch_channel, self.apply_channel):
            if channel.cancel():
                self._end(channel.channel)

    # --- Busy bookkeeping ---

    def _begin(self, channel: Channel) -> None:
        self._busy.add(channel)
        self.ui.set_busy(True)
        self.ui.set_submit_enabled(False)

    def _end(self, channel: Channel) -> None:
        self._busy.discard(channel)
        if self._busy:
            return
        self.ui.set_busy(False)
        self.ui.set_submit_enabled(self.tracker.submit_enabled)
