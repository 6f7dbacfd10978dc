"""One-request-at-a-time channels for device calls."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from spotcheck.device.client import DeviceRequestError
from spotcheck.models.common import Channel, RequestState

logger = logging.getLogger(__name__)


@dataclass
class PendingRequest:
    ticket: int
    state: RequestState = RequestState.REQUESTING
    task: asyncio.Task | None = None


class RequestChannel:
    """Holds at most one in-flight request; submitting cancels the previous one.

    Completion callbacks run on the event loop that submitted the request and
    only for the request that is still current. A superseded request's
    result is dropped even if it arrives before its cancellation lands.
    """

    def __init__(self, channel: Channel):
        self.channel = channel
        self._ticket = 0
        self._pending: PendingRequest | None = None

    @property
    def state(self) -> RequestState:
        if self._pending is None:
            return RequestState.IDLE
        return self._pending.state

    @property
    def in_flight(self) -> bool:
        return self._pending is not None

    @property
    def pending(self) -> PendingRequest | None:
        return self._pending

    def submit(
        self,
        request: Callable[[], Awaitable[Any]],
        on_success: Callable[[Any], None],
        on_error: Callable[[DeviceRequestError], None],
    ) -> asyncio.Task:
        """Start ``request`` on the running loop, cancelling any current one."""
        self.cancel()
        self._ticket += 1
        pending = PendingRequest(ticket=self._ticket)
        self._pending = pending
        pending.task = asyncio.get_running_loop().create_task(
            self._run(pending, request, on_success, on_error)
        )
        logger.debug("%s request #%d started", self.channel, pending.ticket)
        return pending.task

    def cancel(self) -> bool:
        """Cancel the in-flight request, if any. Returns True if one was cancelled."""
        pending = self._pending
        if pending is None:
            return False
        pending.state = RequestState.CANCELLED
        if pending.task is not None:
            pending.task.cancel()
        self._pending = None
        logger.info("Cancelled in-flight %s request #%d", self.channel, pending.ticket)
        return True

    async def _run(
        self,
        pending: PendingRequest,
        request: Callable[[], Awaitable[Any]],
        on_success: Callable[[Any], None],
        on_error: Callable[[DeviceRequestError], None],
    ) -> None:
        try:
            result = await request()
        except DeviceRequestError as e:
            if self._finish(pending):
                on_error(e)
            return

        if self._finish(pending):
            on_success(result)

    def _finish(self, pending: PendingRequest) -> bool:
        """Retire ``pending``; False when it was superseded and must be ignored."""
        if pending is not self._pending or pending.state is RequestState.CANCELLED:
            logger.debug(
                "Dropping stale %s completion #%d", self.channel, pending.ticket
            )
            return False
        pending.state = RequestState.IDLE
        self._pending = None
        return True
