#===============================================================================
#  AutoStartHelper | settings.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Read-only setting stores consulted for the auto-start package override.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Dict, Optional, Protocol, Sequence

from .adb import AdbClient


class SettingsReader(Protocol):
    def get(self, key: str, default: str = "") -> str: ...


class DictSettings:
    """In-memory settings (static overrides, tests)."""

    def __init__(self, values: Optional[Dict[str, str]] = None):
        self.values = dict(values or {})

    def get(self, key: str, default: str = "") -> str:
        value = self.values.get(key)
        return default if value is None else value


class AdbPropertySettings:
    """System properties of the attached device (`getprop`)."""

    def __init__(self, client: AdbClient):
        self.client = client

    def get(self, key: str, default: str = "") -> str:
        value = self.client.getprop(key)
        return value or default


class ChainedSettings:
    """First non-blank value wins, in reader order."""

    def __init__(self, readers: Sequence[SettingsReader]):
        self.readers = list(readers)

    def get(self, key: str, default: str = "") -> str:
        for reader in self.readers:
            value = (reader.get(key, "") or "").strip()
            if value:
                return value
        return default
