import sys
from pathlib import Path

import pytest

# Ensure the project root is on sys.path so `tab_palette` is importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from tab_palette.collaborators import CollaboratorUnavailable
from tab_palette.context import Context
from tab_palette.preferences import Preferences
from tab_palette.scheme import Scheme


class MemoryPreferenceStore:
    def __init__(self, preferences=None):
        self.preferences = preferences or Preferences()
        self.loads = 0
        self.normalizes = 0

    async def load(self):
        self.loads += 1
        return self.preferences

    async def normalize(self):
        self.normalizes += 1
        if not self.preferences.valid():
            self.preferences = Preferences()
        return self.preferences

    def valid(self):
        return self.preferences.valid()


class FakeSchemeSignal:
    def __init__(self, override="auto", dark=False):
        self.override = override
        self.dark = dark

    async def get_override(self):
        return self.override

    async def prefers_dark(self):
        return self.dark


class FakePageSource:
    """Answers every color request with ``response``; None simulates a blocked script."""

    def __init__(self, response=None, unavailable=False):
        self.response = response
        self.unavailable = unavailable
        self.requests = []

    async def request_color(self, tab, message):
        self.requests.append((tab, message))
        if self.unavailable:
            raise CollaboratorUnavailable("blocked")
        return self.response


class FakeAddonSource:
    def __init__(self, addons=None):
        self.addons = addons or []

    async def list_addons(self):
        return list(self.addons)


class FakeTabSource:
    def __init__(self, tabs=None):
        self.tabs = tabs or []

    async def active_tabs(self):
        return list(self.tabs)


class RecordingThemeSink:
    def __init__(self):
        self.applied = []

    async def apply(self, window_id, theme):
        self.applied.append((window_id, theme))


@pytest.fixture
def light_context():
    return Context(Scheme.LIGHT, Preferences(allow_dark_light=False))


@pytest.fixture
def dark_context():
    return Context(Scheme.DARK, Preferences(allow_dark_light=False))


@pytest.fixture
def page_source():
    return FakePageSource()


@pytest.fixture
def addon_source():
    return FakeAddonSource()


@pytest.fixture
def theme_sink():
    return RecordingThemeSink()
