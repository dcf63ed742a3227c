#===============================================================================
#  AutoStartHelper | launcher.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Role/Team   : SAP COE / SAP SRE (GRM-Testing-Automation & Governance)
#  Created     : 2026-02-10
#  Last Update : 2026-02-11
#
#  Summary
#  -------
#  Resolves a package's launcher activity and starts it on the device through adb.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Any, List, Optional, Protocol

from .adb import AdbClient, AdbError
from .constants import ACTION_MAIN, CATEGORY_LAUNCHER
from .models import LaunchDescriptor, LaunchRequest


class Launcher(Protocol):
    def resolve_entry_point(self, package: str) -> Optional[LaunchDescriptor]: ...

    def dispatch(self, request: LaunchRequest) -> None: ...


def parse_resolved_component(package: str, output: str) -> Optional[str]:
    """Pick the `pkg/activity` line out of `cmd package resolve-activity --brief`.

    The brief form prints a priority line followed by the component, or
    "No activity found" when the package has no launcher activity.
    """
    prefix = f"{package}/"
    for line in reversed((output or "").splitlines()):
        line = line.strip()
        if line.startswith(prefix) and len(line) > len(prefix):
            return line
    return None


def extra_args(key: str, value: Any) -> List[str]:
    """Map one extra to its typed `am start` argument."""
    if isinstance(value, bool):
        return ["--ez", key, "true" if value else "false"]
    if isinstance(value, int):
        return ["--el", key, str(value)]
    return ["--es", key, str(value)]


def build_start_args(request: LaunchRequest) -> List[str]:
    args = [
        "am", "start",
        "-n", request.descriptor.component,
        "-a", ACTION_MAIN,
        "-c", CATEGORY_LAUNCHER,
        "-f", hex(request.flags),
    ]
    for key, value in request.extras.items():
        args += extra_args(key, value)
    return args


class AdbLauncher:
    def __init__(self, client: AdbClient):
        self.client = client

    def resolve_entry_point(self, package: str) -> Optional[LaunchDescriptor]:
        out = self.client.shell(
            "cmd", "package", "resolve-activity", "--brief", "-c", CATEGORY_LAUNCHER, package
        )
        component = parse_resolved_component(package, out)
        if not component:
            return None
        return LaunchDescriptor(package=package, component=component)

    def dispatch(self, request: LaunchRequest) -> None:
        out = self.client.shell(*build_start_args(request))
        # `am start` reports some failures on stdout with rc=0
        for line in out.splitlines():
            if line.strip().startswith("Error"):
                raise AdbError(line.strip())
