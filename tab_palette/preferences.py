"""Preference bundle and its JSON-backed store.

The preference file uses the same camelCase keys as the browser extension's
storage, e.g. ``tabSelected`` or ``minContrast_dark``. ``Preferences`` exposes
them as snake_case attributes.
"""

import json
import logging
import math
import os
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from types import MappingProxyType

from .color import InvalidColorError, parse_color
from .defaults import DEFAULT_PREFERENCES
from .tokens import parse_color_source

logger = logging.getLogger(__name__)

# attribute name -> storage key
STORAGE_KEYS = {
    "tabbar": "tabbar",
    "tab_selected": "tabSelected",
    "toolbar": "toolbar",
    "toolbar_border": "toolbarBorder",
    "toolbar_field": "toolbarField",
    "toolbar_field_border": "toolbarFieldBorder",
    "toolbar_field_on_focus": "toolbarFieldOnFocus",
    "sidebar": "sidebar",
    "sidebar_border": "sidebarBorder",
    "popup": "popup",
    "popup_border": "popupBorder",
    "min_contrast_light": "minContrast_light",
    "min_contrast_dark": "minContrast_dark",
    "allow_dark_light": "allowDarkLight",
    "dynamic": "dynamic",
    "no_theme_color": "noThemeColour",
    "custom": "custom",
    "home_background_light": "homeBackground_light",
    "home_background_dark": "homeBackground_dark",
    "fallback_color_light": "fallbackColour_light",
    "fallback_color_dark": "fallbackColour_dark",
    "custom_rule": "customRule",
}

COEFFICIENTS = (
    "tabbar",
    "tab_selected",
    "toolbar",
    "toolbar_border",
    "toolbar_field",
    "toolbar_field_border",
    "toolbar_field_on_focus",
    "sidebar",
    "sidebar_border",
    "popup",
    "popup_border",
)

COLORS = (
    "home_background_light",
    "home_background_dark",
    "fallback_color_light",
    "fallback_color_dark",
)


def _default(attr):
    return DEFAULT_PREFERENCES[STORAGE_KEYS[attr]]


def _is_number(value):
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


@dataclass(frozen=True)
class Preferences:
    tabbar: float = _default("tabbar")
    tab_selected: float = _default("tab_selected")
    toolbar: float = _default("toolbar")
    toolbar_border: float = _default("toolbar_border")
    toolbar_field: float = _default("toolbar_field")
    toolbar_field_border: float = _default("toolbar_field_border")
    toolbar_field_on_focus: float = _default("toolbar_field_on_focus")
    sidebar: float = _default("sidebar")
    sidebar_border: float = _default("sidebar_border")
    popup: float = _default("popup")
    popup_border: float = _default("popup_border")
    min_contrast_light: float = _default("min_contrast_light")
    min_contrast_dark: float = _default("min_contrast_dark")
    allow_dark_light: bool = _default("allow_dark_light")
    dynamic: bool = _default("dynamic")
    no_theme_color: bool = _default("no_theme_color")
    custom: bool = _default("custom")
    home_background_light: str = _default("home_background_light")
    home_background_dark: str = _default("home_background_dark")
    fallback_color_light: str = _default("fallback_color_light")
    fallback_color_dark: str = _default("fallback_color_dark")
    custom_rule: Mapping = field(default_factory=dict)

    def __post_init__(self):
        # read-only copy, shared by every Context built from this bundle
        if isinstance(self.custom_rule, dict):
            object.__setattr__(self, "custom_rule", MappingProxyType(dict(self.custom_rule)))

    @classmethod
    def from_dict(cls, data):
        """Build from a storage dict, ignoring unknown keys. Missing keys take defaults."""
        kwargs = {}
        for attr, key in STORAGE_KEYS.items():
            if key in data:
                kwargs[attr] = data[key]
        return cls(**kwargs)

    def to_dict(self):
        data = {STORAGE_KEYS[f.name]: getattr(self, f.name) for f in fields(self)}
        data["customRule"] = dict(self.custom_rule)
        return data

    def valid(self):
        """Check every value against its expected type and range."""
        for attr in COEFFICIENTS:
            value = getattr(self, attr)
            if not _is_number(value) or not -1 <= value <= 1:
                return False
        for attr in ("min_contrast_light", "min_contrast_dark"):
            value = getattr(self, attr)
            if not _is_number(value) or not 1 <= value <= 21:
                return False
        for attr in ("allow_dark_light", "dynamic", "no_theme_color", "custom"):
            if not isinstance(getattr(self, attr), bool):
                return False
        for attr in COLORS:
            try:
                parse_color(getattr(self, attr))
            except InvalidColorError:
                return False
        if not isinstance(self.custom_rule, Mapping):
            return False
        for site, rule in self.custom_rule.items():
            if not isinstance(site, str):
                return False
            try:
                parse_color_source(rule)
            except InvalidColorError:
                return False
        return True


class JsonPreferenceStore:
    """Preferences persisted in a JSON file.

    ``load`` reads whatever is on disk, ``normalize`` fills in missing keys
    and resets the whole bundle to defaults when the stored one is invalid.
    """

    def __init__(self, path):
        self.path = path
        self.preferences = Preferences()
        self._unreadable = False

    def _read(self):
        if not os.path.exists(self.path):
            return {}
        with open(self.path) as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                logger.warning("Unreadable preference file %s: %s", self.path, e)
                return None
        if not isinstance(data, dict):
            logger.warning("Preference file %s does not hold an object", self.path)
            return None
        return data

    def _write(self):
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(self.preferences.to_dict(), f, indent=2)

    async def load(self):
        data = self._read()
        self._unreadable = data is None
        self.preferences = Preferences.from_dict(data or {})
        return self.preferences

    async def normalize(self):
        data = self._read()
        preferences = Preferences.from_dict(data or {})
        if data is None or not preferences.valid():
            logger.warning("Invalid preferences in %s, resetting to defaults", self.path)
            preferences = Preferences()
        self.preferences = preferences
        self._unreadable = False
        self._write()
        return self.preferences

    def valid(self):
        return not self._unreadable and self.preferences.valid()
