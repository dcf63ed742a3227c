# tests/conftest.py
from __future__ import annotations

import os
from typing import Callable, Dict, List, Optional, Tuple

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from autostart.adb import AdbError
from autostart.models import LaunchDescriptor, LaunchRequest


# -------------------------
# Fakes for the injected collaborators
# -------------------------

class FakeScheduler:
    """Records deferred callbacks instead of running them."""
    def __init__(self):
        self.posted: List[Tuple[Callable[[], object], int]] = []

    def post_delayed(self, callback, delay_ms: int) -> None:
        self.posted.append((callback, delay_ms))

    def run_all(self):
        results = [cb() for cb, _ in self.posted]
        self.posted.clear()
        return results


class FakeLauncher:
    def __init__(self, installed: Optional[Dict[str, str]] = None):
        self.installed = dict(installed or {})   # package -> component
        self.resolved: List[str] = []
        self.dispatched: List[LaunchRequest] = []
        self.resolve_error: Optional[Exception] = None
        self.dispatch_error: Optional[Exception] = None

    def resolve_entry_point(self, package: str) -> Optional[LaunchDescriptor]:
        self.resolved.append(package)
        if self.resolve_error:
            raise self.resolve_error
        component = self.installed.get(package)
        return LaunchDescriptor(package, component) if component else None

    def dispatch(self, request: LaunchRequest) -> None:
        if self.dispatch_error:
            raise self.dispatch_error
        self.dispatched.append(request)


class FakeAdbClient:
    """Scripted `adb shell` responses keyed by the joined argument string."""
    def __init__(self, responses: Optional[Dict[str, object]] = None):
        self.responses = dict(responses or {})
        self.calls: List[Tuple[str, ...]] = []

    def shell(self, *args: str) -> str:
        self.calls.append(args)
        out = self.responses.get(" ".join(args), "")
        if isinstance(out, Exception):
            raise out
        if isinstance(out, list):
            out = out.pop(0) if out else ""
            if isinstance(out, Exception):
                raise out
        return out

    def getprop(self, key: str) -> str:
        return self.shell("getprop", key).strip()


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def launcher():
    return FakeLauncher({"com.acme.kiosk": "com.acme.kiosk/.MainActivity"})


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtCore import QCoreApplication
    return QCoreApplication.instance() or QCoreApplication([])


@pytest.fixture
def adb_down():
    return AdbError("error: no devices/emulators found")


@pytest.fixture
def make_adb_client():
    """Factory for scripted adb clients: make_adb_client({"getprop x": "1"})."""
    return FakeAdbClient
