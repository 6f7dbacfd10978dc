"""CLI entry point for the Spot Check configurator."""

import argparse
import asyncio
import json
import logging

from spotcheck.config.defaults import SUCCESS_TITLE
from spotcheck.config.loader import load_config, with_device_host
from spotcheck.config.schema import SpotCheckConfig
from spotcheck.device.client import DeviceClient
from spotcheck.form.tracker import FormValidityTracker
from spotcheck.sync.config_sync import DeviceConfigSync
from spotcheck.ui.screen import ConfigureScreen
from spotcheck.ui.surface import ConsoleSurface


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="spotcheck",
        description="Configure a Spot Check device on the local network",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument("--host", default=None, help="Device hostname override")

    sub = parser.add_subparsers(dest="command")

    # show
    sub.add_parser("show", help="Print the configuration saved on the device")

    # apply
    apply_p = sub.add_parser("apply", help="Send a new configuration to the device")
    apply_p.add_argument("--name", help="Spot name")
    apply_p.add_argument("--days", help="Number of forecast days")
    apply_p.add_argument(
        "--swell", action=argparse.BooleanOptionalAction, default=None,
        help="Show swell forecasts",
    )
    apply_p.add_argument(
        "--tides", action=argparse.BooleanOptionalAction, default=None,
        help="Show tide forecasts",
    )

    # config show
    config_p = sub.add_parser("config", help="Local config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    config = with_device_host(load_config(args.config), args.host)

    logging.basicConfig(
        level=config.ops.log_level.value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "show":
        return asyncio.run(_cmd_show(config))
    elif args.command == "apply":
        return asyncio.run(_cmd_apply(config, args))
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def build_screen(config: SpotCheckConfig, surface: ConsoleSurface) -> ConfigureScreen:
    client = DeviceClient(
        host=config.device.host,
        port=config.device.port,
        scheme=config.device.scheme.value,
        timeout=config.device.timeout_seconds,
    )
    tracker = FormValidityTracker()
    sync = DeviceConfigSync(
        client, surface, tracker,
        revalidate_after_fetch=config.form.revalidate_after_fetch,
    )
    return ConfigureScreen(surface, sync, tracker)


async def _cmd_show(config: SpotCheckConfig) -> int:
    surface = ConsoleSurface()
    screen = build_screen(config, surface)
    await screen.activate()
    if surface.alerts:
        return 1

    values = surface.get_field_values()
    print(json.dumps({
        "spot_name": values.spot_name,
        "number_of_days": values.number_of_days,
        "forecast_types": [t.value for t in values.forecast_types()],
    }, indent=2))
    return 0


async def _cmd_apply(config: SpotCheckConfig, args) -> int:
    surface = ConsoleSurface()
    screen = build_screen(config, surface)

    # Start from what the device already has, like opening the screen
    await screen.activate()

    surface.edit(
        spot_name=args.name,
        number_of_days=args.days,
        swell=args.swell,
        tides=args.tides,
    )
    screen.spot_name_changed()
    screen.number_of_days_changed()
    screen.forecast_toggled()

    task = screen.save_clicked()
    if task is None:
        print(
            "Error: spot name, number of days and at least one forecast type "
            "are required"
        )
        return 1
    await task

    title, _ = surface.alerts[-1]
    return 0 if title == SUCCESS_TITLE else 1


def _cmd_config(config: SpotCheckConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    else:
        print("Use: config show")
        return 1
