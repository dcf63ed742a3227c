from __future__ import annotations

from autostart.constants import PROPERTY_AUTOSTART_PACKAGE
from autostart.settings import AdbPropertySettings, ChainedSettings, DictSettings


def test_dict_settings_default():
    s = DictSettings({"a": "1"})
    assert s.get("a") == "1"
    assert s.get("missing", "fallback") == "fallback"


def test_adb_property_settings_reads_getprop(make_adb_client):
    client = make_adb_client({f"getprop {PROPERTY_AUTOSTART_PACKAGE}": "com.acme.kiosk\r\n"})
    s = AdbPropertySettings(client)
    assert s.get(PROPERTY_AUTOSTART_PACKAGE) == "com.acme.kiosk"
    assert s.get("persist.unset", "dflt") == "dflt"


def test_chained_settings_first_non_empty_wins():
    s = ChainedSettings([DictSettings({"k": ""}), DictSettings({"k": "second"}), DictSettings({"k": "third"})])
    assert s.get("k") == "second"
    assert s.get("other", "none") == "none"


def test_chained_settings_skips_blank_values():
    s = ChainedSettings([DictSettings({"k": "   "}), DictSettings({"k": " com.acme.kiosk\n"})])
    assert s.get("k") == "com.acme.kiosk"
    assert ChainedSettings([DictSettings({"k": " \t"})]).get("k", "dflt") == "dflt"
