#===============================================================================
#  AutoStartHelper | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Central place for boot actions, intent flags, property keys and file naming conventions.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

APP_TITLE = "AutoStartHelper"
LOGGER_NAME = "AutoStartHelper"
CONFIG_FILE_NAME = "autostart_config.json"
LOGS_DIR_NAME = ".autostart/logs"
LOG_FILE_NAME = "autostart.log"

# Default package to auto-start; a placeholder that real deployments override
DEFAULT_PACKAGE = "com.example.yourapp"
PROPERTY_AUTOSTART_PACKAGE = "persist.autostart.package"
PROPERTY_BOOT_COMPLETED = "sys.boot_completed"

LAUNCH_DELAY_MS = 3000
BOOT_POLL_INTERVAL_MS = 2000

# --- Broadcast actions ---
ACTION_BOOT_COMPLETED = "android.intent.action.BOOT_COMPLETED"
ACTION_LOCKED_BOOT_COMPLETED = "android.intent.action.LOCKED_BOOT_COMPLETED"
BOOT_ACTIONS = frozenset({ACTION_BOOT_COMPLETED, ACTION_LOCKED_BOOT_COMPLETED})

ACTION_MAIN = "android.intent.action.MAIN"
CATEGORY_LAUNCHER = "android.intent.category.LAUNCHER"

# --- Intent flags (android.content.Intent) ---
FLAG_ACTIVITY_NEW_TASK = 0x10000000
FLAG_ACTIVITY_CLEAR_TOP = 0x04000000
FLAG_ACTIVITY_SINGLE_TOP = 0x20000000
AUTOSTART_LAUNCH_FLAGS = FLAG_ACTIVITY_NEW_TASK | FLAG_ACTIVITY_CLEAR_TOP | FLAG_ACTIVITY_SINGLE_TOP

# --- Extras attached to every auto-start launch ---
EXTRA_AUTOSTART = "autostart"
EXTRA_BOOT_TIMESTAMP = "boot_timestamp"
