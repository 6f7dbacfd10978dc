"""Async HTTP client for the Spot Check device's configuration endpoints."""

import logging

import httpx

from spotcheck.config.defaults import (
    CONFIGURE_PATH,
    CURRENT_CONFIGURATION_PATH,
    DEFAULT_DEVICE_HOST,
    DEFAULT_DEVICE_PORT,
    JSON_CONTENT_TYPE,
)

logger = logging.getLogger(__name__)

DEFAULT_PORTS = {"http": 80}


class DeviceRequestError(Exception):
    """Raised when the device cannot be reached or answers with an error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class DeviceClient:
    """Plain-HTTP transport to the device on the local network.

    Each call runs on the caller's event loop, so cancelling the awaiting
    task cancels the in-flight request.
    """

    def __init__(
        self,
        host: str = DEFAULT_DEVICE_HOST,
        port: int = DEFAULT_DEVICE_PORT,
        scheme: str = "http",
        timeout: float = 10.0,
    ):
        self.host = host
        self.port = port
        self.scheme = scheme
        self.timeout = timeout

    @property
    def base_url(self) -> str:
        if DEFAULT_PORTS.get(self.scheme) == self.port:
            return f"{self.scheme}://{self.host}"
        return f"{self.scheme}://{self.host}:{self.port}"

    async def request(
        self,
        path: str,
        method: str,
        body: bytes | None = None,
        content_type: str = JSON_CONTENT_TYPE,
    ) -> bytes:
        """Send one request and return the raw response body."""
        url = f"{self.base_url}/{path}"
        headers = {"Content-Type": content_type}
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.request(method, url, headers=headers, content=body)
        except httpx.RequestError as e:
            logger.error("Device request failed: %s %s -> %s", method, url, e)
            raise DeviceRequestError(f"Request failed: {e}") from e

        if resp.status_code >= 400:
            logger.error("Device returned %d: %s %s", resp.status_code, method, url)
            raise DeviceRequestError(
                f"HTTP {resp.status_code}: {resp.text}", resp.status_code
            )
        return resp.content

    async def get_current_configuration(self) -> bytes:
        return await self.request(CURRENT_CONFIGURATION_PATH, "GET")

    async def configure(self, body: bytes) -> bytes:
        return await self.request(CONFIGURE_PATH, "POST", body=body)
