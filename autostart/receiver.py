#===============================================================================
#  AutoStartHelper | receiver.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Boot receiver: on BOOT_COMPLETED / LOCKED_BOOT_COMPLETED waits a fixed delay,
#  then launches the package named by persist.autostart.package (or the default).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import time
from typing import Callable

from .constants import (
    AUTOSTART_LAUNCH_FLAGS,
    DEFAULT_PACKAGE,
    EXTRA_AUTOSTART,
    EXTRA_BOOT_TIMESTAMP,
    LAUNCH_DELAY_MS,
    LOGGER_NAME,
    PROPERTY_AUTOSTART_PACKAGE,
)
from .launcher import Launcher
from .models import BootEvent, LaunchDescriptor, LaunchRequest, LaunchResult, LaunchStatus
from .scheduler import Scheduler
from .settings import SettingsReader

log = logging.getLogger(LOGGER_NAME)


class BootReceiver:
    """Launches the configured app once per boot event.

    Stateless across events; one attempt per event, no retry.
    """

    def __init__(
        self,
        settings: SettingsReader,
        launcher: Launcher,
        scheduler: Scheduler,
        delay_ms: int = LAUNCH_DELAY_MS,
        default_package: str = DEFAULT_PACKAGE,
        clock: Callable[[], float] = time.time,
    ):
        self.settings = settings
        self.launcher = launcher
        self.scheduler = scheduler
        self.delay_ms = delay_ms
        self.default_package = default_package
        self.clock = clock

    def on_receive(self, event: BootEvent) -> None:
        if not event.is_boot_completed:
            return

        log.info("Boot completed, preparing to launch auto-start app")
        self.scheduler.post_delayed(self.launch_app, self.delay_ms)

    def resolve_package(self) -> str:
        value = (self.settings.get(PROPERTY_AUTOSTART_PACKAGE, "") or "").strip()
        return value or self.default_package

    def build_request(self, descriptor: LaunchDescriptor) -> LaunchRequest:
        return LaunchRequest(
            descriptor=descriptor,
            flags=AUTOSTART_LAUNCH_FLAGS,
            extras={
                EXTRA_AUTOSTART: True,
                EXTRA_BOOT_TIMESTAMP: int(self.clock() * 1000),
            },
        )

    def attempt_launch(self) -> LaunchResult:
        package = self.default_package
        try:
            package = self.resolve_package()
            log.info("Attempting to launch package: %s", package)

            descriptor = self.launcher.resolve_entry_point(package)
            if descriptor is None:
                return LaunchResult(LaunchStatus.NOT_FOUND, package)

            self.launcher.dispatch(self.build_request(descriptor))
            return LaunchResult(LaunchStatus.LAUNCHED, package)
        except Exception as e:
            return LaunchResult(LaunchStatus.ERROR, package, error=e)

    def launch_app(self) -> LaunchResult:
        """Deferred action. Never raises."""
        result = self.attempt_launch()

        if result.status is LaunchStatus.LAUNCHED:
            log.info("Successfully launched: %s", result.package)
        elif result.status is LaunchStatus.NOT_FOUND:
            log.error(
                "Could not find launch intent for package: %s "
                "(make sure the package is installed and has a main activity)",
                result.package,
            )
        else:
            log.error("Error launching auto-start app %s", result.package, exc_info=result.error)
        return result
