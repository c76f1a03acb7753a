from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from ..core.config import SandboxConfig
from ..core.errors import ConfigError, TickOverrunError
from ..core.io import load_config
from ..core.sim import OVERRUN_POLICIES
from .headless import format_rows, parse_tap, run_headless

_LOG = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="impulse-sandbox",
        description="A sprite falling under gravity, kicked toward wherever you tap.",
    )
    parser.add_argument("--config", type=Path, help="JSON file with interval, gravity and initial state")
    parser.add_argument("--headless", action="store_true", help="run without a window and print the trajectory")
    parser.add_argument("--ticks", type=int, default=30, help="number of ticks for a headless run")
    parser.add_argument(
        "--tap",
        action="append",
        default=[],
        metavar="TICK:X,Y",
        help="headless tap at point X,Y applied just before tick TICK (repeatable)",
    )
    parser.add_argument("--realtime", action="store_true", help="pace headless ticks at the configured interval")
    parser.add_argument("--overrun-policy", choices=OVERRUN_POLICIES, default="log")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
    )
    return parser


def _run_window(config: SandboxConfig) -> int:
    from PySide6 import QtWidgets

    from .window import MainWindow

    app = QtWidgets.QApplication(sys.argv)
    window = MainWindow(config)
    window.show()
    return app.exec()


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.ticks < 0:
        parser.error("--ticks must be non-negative")
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s:%(name)s:%(message)s",
    )
    try:
        config = load_config(args.config) if args.config is not None else SandboxConfig()
        if not args.headless:
            return _run_window(config)
        taps = [parse_tap(text) for text in args.tap]
        result = run_headless(
            config,
            args.ticks,
            taps,
            realtime=args.realtime,
            overrun_policy=args.overrun_policy,
        )
    except (ConfigError, TickOverrunError, OSError) as exc:
        _LOG.error("%s", exc)
        return 1
    for row in format_rows(result.snapshots):
        print(row)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
