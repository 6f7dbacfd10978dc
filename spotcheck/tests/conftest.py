"""Shared test fixtures."""

import asyncio
from pathlib import Path

import pytest
import yaml

from spotcheck.device.client import DeviceClient
from spotcheck.form.tracker import FormValidityTracker
from spotcheck.models.configuration import ConfigurationUpdate
from spotcheck.ui.surface import ConsoleSurface

DEVICE_HOST = "test-device.example.com"


class RecordingSurface(ConsoleSurface):
    """Console surface that also keeps the history of control updates."""

    def __init__(self, values=None):
        super().__init__(values)
        self.submit_history: list[bool] = []
        self.busy_history: list[bool] = []
        self.updates: list[ConfigurationUpdate] = []

    def set_submit_enabled(self, enabled: bool) -> None:
        super().set_submit_enabled(enabled)
        self.submit_history.append(enabled)

    def set_busy(self, busy: bool) -> None:
        super().set_busy(busy)
        self.busy_history.append(busy)

    def set_field_values(self, update: ConfigurationUpdate) -> None:
        super().set_field_values(update)
        self.updates.append(update)


class GatedDeviceClient:
    """Device client whose responses are released by the test."""

    def __init__(self):
        self.fetches: list[asyncio.Future] = []
        self.configures: list[tuple[bytes, asyncio.Future]] = []

    async def get_current_configuration(self) -> bytes:
        fut = asyncio.get_running_loop().create_future()
        self.fetches.append(fut)
        return await fut

    async def configure(self, body: bytes) -> bytes:
        fut = asyncio.get_running_loop().create_future()
        self.configures.append((body, fut))
        return await fut


@pytest.fixture
def device_url() -> str:
    return f"http://{DEVICE_HOST}"


@pytest.fixture
def client() -> DeviceClient:
    return DeviceClient(host=DEVICE_HOST, timeout=1.0)


@pytest.fixture
def gated_client() -> GatedDeviceClient:
    return GatedDeviceClient()


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def make_surface():
    """Build a recording surface with the form already filled in."""
    return RecordingSurface


@pytest.fixture
def tracker() -> FormValidityTracker:
    return FormValidityTracker()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "device": {"host": DEVICE_HOST, "timeout_seconds": 2.5},
        "form": {"revalidate_after_fetch": False},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
