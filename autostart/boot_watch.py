#===============================================================================
#  AutoStartHelper | boot_watch.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Polls the device's sys.boot_completed property and emits one BOOT_COMPLETED
#  event when it flips to 1.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QTimer, Signal

from .adb import AdbClient, AdbError
from .constants import (
    ACTION_BOOT_COMPLETED,
    BOOT_POLL_INTERVAL_MS,
    LOGGER_NAME,
    PROPERTY_BOOT_COMPLETED,
)
from .models import BootEvent

log = logging.getLogger(f"{LOGGER_NAME}.watch")


class BootWatcher(QObject):
    boot_completed = Signal(object)  # BootEvent

    def __init__(self, client: AdbClient, poll_interval_ms: int = BOOT_POLL_INTERVAL_MS, parent=None):
        super().__init__(parent)
        self.client = client
        self.fired = False

        self._poll_timer = QTimer(self)
        self._poll_timer.setInterval(poll_interval_ms)
        self._poll_timer.timeout.connect(self.poll)

    def start(self) -> None:
        log.info("Waiting for %s=1", PROPERTY_BOOT_COMPLETED)
        self._poll_timer.start()
        self.poll()

    def stop(self) -> None:
        self._poll_timer.stop()

    def is_running(self) -> bool:
        return self._poll_timer.isActive()

    def poll(self) -> None:
        if self.fired:
            return
        try:
            value = self.client.getprop(PROPERTY_BOOT_COMPLETED)
        except AdbError as e:
            # device not attached yet / still booting adbd
            log.debug("Boot poll failed: %s", e)
            return
        if value != "1":
            return

        self.fired = True
        self.stop()
        self.boot_completed.emit(BootEvent(ACTION_BOOT_COMPLETED))
