#===============================================================================
#  AutoStartHelper | config.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Loading of the tool configuration (autostart_config.json).
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from .constants import BOOT_POLL_INTERVAL_MS, DEFAULT_PACKAGE, LAUNCH_DELAY_MS, LOGGER_NAME

log = logging.getLogger(f"{LOGGER_NAME}.config")


def default_config() -> Dict[str, Any]:
    return {
        "adb_path": "",                              # empty -> adb on PATH
        "serial": "",                                # empty -> only attached device
        "delay_ms": LAUNCH_DELAY_MS,
        "package_override": "",                      # non-empty -> wins over persist.autostart.package
        "default_package": DEFAULT_PACKAGE,          # used when the property is unset
        "poll_interval_ms": BOOT_POLL_INTERVAL_MS,
        "log_level": "INFO",
    }


def load_config(config_path: Path) -> Dict[str, Any]:
    """Load config from disk (or defaults)."""
    d = default_config()
    if not config_path.exists():
        return d
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        log.warning("Ignoring unreadable config %s: %s", config_path, e)
        return d
    if not isinstance(data, dict):
        log.warning("Ignoring config %s: expected a JSON object", config_path)
        return d
    for k in d:
        if k not in data:
            data[k] = d[k]
    return data
