#===============================================================================
#  AutoStartHelper | scheduler.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Deferred single-shot callbacks on the Qt main event loop.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Callable, List, Optional, Protocol

from PySide6.QtCore import QCoreApplication, QObject, QTimer


class Scheduler(Protocol):
    def post_delayed(self, callback: Callable[[], object], delay_ms: int) -> None: ...


class QtScheduler:
    """Posts one-shot callbacks onto the main Qt event loop.

    Timers are parented to the application object, so they live on the main
    thread and die with it. Nothing cancels a pending callback.
    """

    def __init__(self, parent: Optional[QObject] = None):
        self.parent = parent or QCoreApplication.instance()
        if self.parent is None:
            raise RuntimeError("QtScheduler needs a QCoreApplication instance.")
        self._timers: List[QTimer] = []

    def post_delayed(self, callback: Callable[[], object], delay_ms: int) -> None:
        timer = QTimer(self.parent)
        timer.setSingleShot(True)
        timer.setInterval(max(0, int(delay_ms)))
        timer.timeout.connect(lambda: self._fire(timer, callback))
        self._timers.append(timer)
        timer.start()

    def pending(self) -> int:
        return len(self._timers)

    def _fire(self, timer: QTimer, callback: Callable[[], object]) -> None:
        if timer in self._timers:
            self._timers.remove(timer)
        timer.deleteLater()
        callback()
