#===============================================================================
#  AutoStartHelper | adb.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Thin subprocess bridge to the Android Debug Bridge (adb) used to read device
#  properties, resolve launcher activities and start them.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import List, Optional

from .constants import LOGGER_NAME

log = logging.getLogger(f"{LOGGER_NAME}.adb")


class AdbError(RuntimeError):
    """Raised when an adb command cannot be run or exits non-zero."""


def resolve_adb_path(configured: str = "") -> str:
    """Return the adb executable to use.

    Resolution order:
      1) configured path if set
      2) 'adb' on PATH
    """
    if configured:
        return configured
    found = shutil.which("adb")
    if found:
        return found
    raise AdbError("adb not found. Install platform-tools or set adb_path in autostart_config.json.")


class AdbClient:
    def __init__(self, adb_path: str = "adb", serial: Optional[str] = None, timeout: float = 20):
        self.adb_path = adb_path
        self.serial = serial
        self.timeout = timeout

    def base_cmd(self) -> List[str]:
        cmd = [self.adb_path]
        if self.serial:
            cmd += ["-s", self.serial]
        return cmd

    def shell(self, *args: str) -> str:
        """Run `adb shell <args>` and return stdout."""
        cmd = self.base_cmd() + ["shell", *args]
        log.debug("$ %s", " ".join(cmd))
        try:
            p = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise AdbError(f"Command timed out after {self.timeout}s: {' '.join(cmd)}") from e
        except OSError as e:
            raise AdbError(f"Could not run {self.adb_path}: {e}") from e

        if p.returncode != 0:
            detail = (p.stderr or p.stdout or "").strip()
            raise AdbError(f"Command failed (rc={p.returncode}): {detail}")
        return p.stdout or ""

    def getprop(self, key: str) -> str:
        return self.shell("getprop", key).strip()
