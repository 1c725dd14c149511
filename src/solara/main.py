"""
Solara - command-line entry point

Prints the current tracking update (sun position, commanded tilt and
efficiency) for the configured devices.
"""

import argparse
import logging
import os
import sys
from datetime import datetime
from typing import List, Optional

import pytz

from solara.models.solar import TrackingSnapshot
from solara.utils.config_utils import ConfigManager
from solara.utils.tracking import TrackingPlanner

logger = logging.getLogger(__name__)


def configure_logging():
    """Configure root logging from the LOG_LEVEL environment variable"""
    logging.basicConfig(
        level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="solara", description="Solar tracking update for configured devices"
    )
    parser.add_argument("--config", help="Path to solara_config.json")
    parser.add_argument("--device", help="Only report this device ID")
    parser.add_argument(
        "--time",
        help="ISO 8601 instant (naive values are UTC); defaults to now",
    )
    parser.add_argument(
        "--timezone", default="UTC", help="Timezone used to display the instant"
    )
    return parser.parse_args(argv)


def format_snapshot(name: str, snapshot: TrackingSnapshot, tz) -> str:
    local_time = snapshot.time.astimezone(tz)
    lines = [
        f"{name} @ {local_time.strftime('%Y-%m-%d %H:%M:%S %Z')}",
        f"  Sun elevation:  {snapshot.position.elevation:7.2f}°",
        f"  Sun azimuth:    {snapshot.position.azimuth:7.2f}° ({snapshot.sun_direction})",
        f"  Optimal tilt:   {snapshot.optimal_tilt:7.2f}°",
        f"  Efficiency:     {snapshot.efficiency * 100:6.1f}%",
    ]
    if not snapshot.sun_is_up:
        lines.append("  Sun is below the horizon")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Main application function"""
    ConfigManager.load_environment()
    configure_logging()
    args = parse_args(argv)

    config = ConfigManager.load_config(args.config)
    config = ConfigManager.override_refraction_config(config)
    logger.debug(f"Configuration: {ConfigManager.get_config_summary(config)}")

    instant = datetime.fromisoformat(args.time) if args.time else datetime.now(pytz.utc)
    tz = pytz.timezone(args.timezone)
    planner = TrackingPlanner(config)

    try:
        devices = [planner.device(args.device)] if args.device else config.devices
    except KeyError:
        logger.error(f"Device {args.device} not found in configuration")
        return 2

    if not devices:
        logger.warning("No devices configured")
        return 1

    for device in devices:
        print(format_snapshot(device.name, planner.snapshot(device, instant), tz))

    return 0


if __name__ == "__main__":
    sys.exit(main())
