#===============================================================================
#  AutoStartHelper  |  Boot-time application launcher
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Waits for the attached Android device to finish booting, then (after a
#  fixed delay) launches the package configured in persist.autostart.package.
#  Falls back to the default package when the property is unset.
#
#  Usage
#  -----
#    python main.py                      -> wait for boot, then launch
#    python main.py --now                -> act as if boot just completed
#    python main.py --serial emulator-5554 --delay-ms 5000
#    python main.py --package com.acme.kiosk   -> ignore persist.autostart.package
#
#  Config and .autostart/logs live in the current directory (or next to --config).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from PySide6.QtCore import QCoreApplication, QTimer

from autostart.adb import AdbClient, AdbError, resolve_adb_path
from autostart.boot_watch import BootWatcher
from autostart.config import load_config
from autostart.constants import (
    ACTION_BOOT_COMPLETED,
    APP_TITLE,
    CONFIG_FILE_NAME,
    PROPERTY_AUTOSTART_PACKAGE,
)
from autostart.launcher import AdbLauncher
from autostart.log_setup import setup_logging
from autostart.models import BootEvent
from autostart.receiver import BootReceiver
from autostart.scheduler import QtScheduler, Scheduler
from autostart.settings import AdbPropertySettings, ChainedSettings, DictSettings


class QuitAfterScheduler:
    """Runs each deferred callback, then quits the event loop."""

    def __init__(self, inner: Scheduler, quit_fn: Callable[[], None]):
        self.inner = inner
        self.quit_fn = quit_fn

    def post_delayed(self, callback: Callable[[], object], delay_ms: int) -> None:
        def run():
            try:
                callback()
            finally:
                self.quit_fn()

        self.inner.post_delayed(run, delay_ms)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="autostart", description=f"{APP_TITLE}: launch an app after device boot.")
    p.add_argument("--config", type=Path, default=None, help=f"path to {CONFIG_FILE_NAME}")
    p.add_argument("--serial", default=None, help="adb device serial")
    p.add_argument("--adb", dest="adb_path", default=None, help="adb executable")
    p.add_argument("--package", default=None, help=f"launch this package instead of {PROPERTY_AUTOSTART_PACKAGE}")
    p.add_argument("--delay-ms", type=int, default=None, help="delay before launching")
    p.add_argument("--now", action="store_true", help="skip boot polling and launch after the delay")
    return p.parse_args(argv)


def resolve_paths(args: argparse.Namespace) -> Tuple[Path, Path]:
    """Return (base_dir, config_path).

    base_dir holds .autostart/logs: the --config file's folder when given,
    otherwise the current working directory.
    """
    if args.config:
        config_path = Path(args.config).resolve()
        return config_path.parent, config_path
    base_dir = Path.cwd()
    return base_dir, base_dir / CONFIG_FILE_NAME


def merge_args(config: Dict[str, Any], args: argparse.Namespace) -> Dict[str, Any]:
    merged = dict(config)
    if args.serial:
        merged["serial"] = args.serial
    if args.adb_path:
        merged["adb_path"] = args.adb_path
    if args.package:
        merged["package_override"] = args.package
    if args.delay_ms is not None:
        merged["delay_ms"] = args.delay_ms
    return merged


def build_receiver(config: Dict[str, Any], client: AdbClient, scheduler: Scheduler) -> BootReceiver:
    # local override first, then the device property
    settings = ChainedSettings([
        DictSettings({PROPERTY_AUTOSTART_PACKAGE: config.get("package_override") or ""}),
        AdbPropertySettings(client),
    ])
    return BootReceiver(
        settings=settings,
        launcher=AdbLauncher(client),
        scheduler=scheduler,
        delay_ms=int(config["delay_ms"]),
        default_package=config["default_package"],
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    base_dir, config_path = resolve_paths(args)

    config = merge_args(load_config(config_path), args)
    log = setup_logging(base_dir, config.get("log_level", "INFO"))

    try:
        adb_path = resolve_adb_path(config.get("adb_path", ""))
    except AdbError as e:
        log.error("%s", e)
        return 1

    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    app.setApplicationName(APP_TITLE)

    client = AdbClient(adb_path, serial=config.get("serial") or None)
    receiver = build_receiver(config, client, QuitAfterScheduler(QtScheduler(app), app.quit))

    if args.now:
        QTimer.singleShot(0, lambda: receiver.on_receive(BootEvent(ACTION_BOOT_COMPLETED)))
    else:
        watcher = BootWatcher(client, int(config["poll_interval_ms"]), parent=app)
        watcher.boot_completed.connect(receiver.on_receive)
        QTimer.singleShot(0, watcher.start)

    log.info("%s started (config: %s)", APP_TITLE, config_path)
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
