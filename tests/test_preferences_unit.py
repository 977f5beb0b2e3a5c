import asyncio
import json

import pytest

from tab_palette.context import Context
from tab_palette.defaults import DEFAULT_PREFERENCES
from tab_palette.preferences import JsonPreferenceStore, Preferences
from tab_palette.scheme import Scheme


def test_defaults_are_valid() -> None:
    assert Preferences().valid()
    assert Preferences.from_dict(DEFAULT_PREFERENCES) == Preferences()


def test_from_dict_maps_storage_keys() -> None:
    preferences = Preferences.from_dict(
        {"tabSelected": 0.3, "minContrast_dark": 7, "allowDarkLight": False, "unknown": 1}
    )
    assert preferences.tab_selected == 0.3
    assert preferences.min_contrast_dark == 7
    assert preferences.allow_dark_light is False
    assert preferences.to_dict()["tabSelected"] == 0.3


def test_invalid_values_are_detected() -> None:
    assert not Preferences(tabbar=2).valid()
    assert not Preferences(toolbar="0.1").valid()
    assert not Preferences(min_contrast_light=0.5).valid()
    assert not Preferences(min_contrast_dark=float("nan")).valid()
    assert not Preferences(allow_dark_light="yes").valid()
    assert not Preferences(home_background_dark="blue-ish").valid()
    assert not Preferences(custom_rule={"example.com": "not-a-color"}).valid()
    assert Preferences(custom_rule={"example.com": "#ff0000", "Add-on ID: x": "ADDON"}).valid()


def test_custom_rules_only_apply_when_custom_is_on() -> None:
    rules = {"example.com": "#ff0000"}
    assert Context(Scheme.LIGHT, Preferences(custom_rule=rules)).custom_rules == rules
    assert Context(Scheme.LIGHT, Preferences(custom=False, custom_rule=rules)).custom_rules == {}


def test_store_load_missing_file_gives_defaults(tmp_path) -> None:
    store = JsonPreferenceStore(str(tmp_path / "prefs.json"))
    preferences = asyncio.run(store.load())
    assert preferences == Preferences()
    assert store.valid()


def test_store_normalize_fills_missing_keys(tmp_path) -> None:
    path = tmp_path / "prefs.json"
    path.write_text(json.dumps({"toolbar": 0.2}))
    store = JsonPreferenceStore(str(path))

    preferences = asyncio.run(store.normalize())

    assert preferences.toolbar == 0.2
    written = json.loads(path.read_text())
    assert written["toolbar"] == 0.2
    assert set(written) == set(DEFAULT_PREFERENCES)


def test_store_normalize_resets_invalid_bundle(tmp_path) -> None:
    path = tmp_path / "prefs.json"
    path.write_text(json.dumps({"toolbar": 0.2, "popup": 9}))
    store = JsonPreferenceStore(str(path))

    asyncio.run(store.load())
    assert not store.valid()

    preferences = asyncio.run(store.normalize())
    assert preferences == Preferences()
    assert store.valid()


def test_store_flags_unreadable_file(tmp_path) -> None:
    path = tmp_path / "prefs.json"
    path.write_text("{not json")
    store = JsonPreferenceStore(str(path))

    asyncio.run(store.load())
    assert not store.valid()

    asyncio.run(store.normalize())
    assert store.valid()
    assert json.loads(path.read_text()) == Preferences().to_dict()


def test_malformed_rule_channels_are_invalid() -> None:
    assert not Preferences(custom_rule={"example.com": "rgb(1..2, 0, 0)"}).valid()
    assert not Preferences(home_background_light={"r": None, "g": 0, "b": 0}).valid()


def test_store_normalize_resets_malformed_rule(tmp_path) -> None:
    path = tmp_path / "prefs.json"
    path.write_text(json.dumps({"customRule": {"example.com": "rgb(1..2, 0, 0)"}}))
    store = JsonPreferenceStore(str(path))

    assert asyncio.run(store.normalize()) == Preferences()
    assert store.valid()


def test_custom_rules_are_read_only() -> None:
    rules = {"example.com": "#ff0000"}
    preferences = Preferences(custom_rule=rules)
    rules["example.org"] = "#00ff00"
    assert dict(preferences.custom_rule) == {"example.com": "#ff0000"}

    context = Context(Scheme.LIGHT, preferences)
    with pytest.raises(TypeError):
        context.custom_rules["example.net"] = "#0000ff"
    assert preferences.to_dict()["customRule"] == {"example.com": "#ff0000"}
