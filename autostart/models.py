#===============================================================================
#  AutoStartHelper | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Shared data models used across the boot launcher.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from .constants import BOOT_ACTIONS


@dataclass(frozen=True)
class BootEvent:
    """A startup notification. Only the action is consumed."""
    action: str

    @property
    def is_boot_completed(self) -> bool:
        return self.action in BOOT_ACTIONS


@dataclass(frozen=True)
class LaunchDescriptor:
    """Resolved launch entry point for an installed package."""
    package: str
    component: str      # "com.pkg/.MainActivity"


@dataclass(frozen=True)
class LaunchRequest:
    descriptor: LaunchDescriptor
    flags: int = 0
    extras: Dict[str, Any] = field(default_factory=dict)

    def has_flag(self, flag: int) -> bool:
        return (self.flags & flag) == flag


class LaunchStatus(Enum):
    LAUNCHED = "launched"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass(frozen=True)
class LaunchResult:
    """Outcome of one launch attempt; logged by the receiver, never raised."""
    status: LaunchStatus
    package: str
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.status is LaunchStatus.LAUNCHED
