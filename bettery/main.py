"""Command-line entry point running the watch face in the terminal."""

from __future__ import annotations

import argparse
import time
from pathlib import Path

from .estimate_data import BatteryChargeState
from .watchface import WatchfaceBase
from .window import WatchWindow


def _percent(text: str) -> int:
    value = int(text)
    if not 0 <= value <= 100:
        raise argparse.ArgumentTypeError("charge must be between 0 and 100")
    return value


def _non_negative(text: str) -> float:
    value = float(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bettery", description="Show time, date, Bluetooth and battery estimate."
    )
    parser.add_argument(
        "--storage",
        type=Path,
        default=Path.home() / ".bettery.json",
        help="file holding the persisted settings and battery history",
    )
    parser.add_argument(
        "--bluetooth",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="whether Bluetooth is connected",
    )
    parser.add_argument("--charge", type=_percent, default=100, help="charge percent")
    parser.add_argument("--charging", action="store_true", help="battery is charging")
    parser.add_argument("--plugged", action="store_true", help="charger is plugged in")
    parser.add_argument("--12h", dest="is_24h", action="store_false", help="12-hour clock")
    parser.add_argument(
        "--ticks",
        type=int,
        default=None,
        help="number of refreshes after the first screen (default: run until interrupted)",
    )
    parser.add_argument(
        "--interval",
        type=_non_negative,
        default=60.0,
        help="seconds between refreshes",
    )
    return parser


def main(argv=None) -> int:
    """Run the watch face, printing the screen on every refresh."""
    args = _build_parser().parse_args(argv)
    state = BatteryChargeState(args.charge, args.charging, args.plugged)

    base = WatchfaceBase(args.storage, None, lambda: args.bluetooth, lambda: state)
    window = WatchWindow(base, is_24h=args.is_24h)
    base.on_change = window.update_time

    base.start()
    try:
        window.show()
        print(window.render(), flush=True)
        count = 0
        try:
            while args.ticks is None or count < args.ticks:
                time.sleep(args.interval)
                window.update_time()
                print(window.render(), flush=True)
                count += 1
        except KeyboardInterrupt:
            pass
        window.hide()
    finally:
        base.stop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())