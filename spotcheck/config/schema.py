"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field

from spotcheck.config.defaults import DEFAULT_DEVICE_HOST, DEFAULT_DEVICE_PORT


class DeviceScheme(StrEnum):
    HTTP = "http"


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class DeviceConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = Field(default=DEFAULT_DEVICE_HOST, min_length=1)
    port: int = Field(default=DEFAULT_DEVICE_PORT, ge=1, le=65535)
    scheme: DeviceScheme = DeviceScheme.HTTP
    timeout_seconds: float = Field(default=10.0, gt=0.0)


class FormConfig(BaseModel):
    model_config = {"extra": "forbid"}

    # Re-run field validation after a fetch fills the form in
    revalidate_after_fetch: bool = True


class OpsConfig(BaseModel):
    model_config = {"extra": "forbid"}

    log_level: LogLevel = LogLevel.INFO


class SpotCheckConfig(BaseModel):
    model_config = {"extra": "forbid"}

    device: DeviceConfig = DeviceConfig()
    form: FormConfig = FormConfig()
    ops: OpsConfig = OpsConfig()
