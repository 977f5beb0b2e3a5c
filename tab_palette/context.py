from collections import namedtuple

from .color import parse_color
from .defaults import DEFAULT_PREFERENCES
from .preferences import Preferences
from .scheme import Scheme


class Context(namedtuple("Context", ["scheme", "preferences"])):
    """Snapshot of the resolved scheme and preferences for one recomputation.

    Values the user can customise only take effect while ``preferences.custom``
    is set; otherwise the built-in defaults apply.
    """

    __slots__ = ()

    @property
    def reversed_scheme(self):
        return self.scheme.reversed

    @property
    def allow_opposite(self):
        return self.preferences.allow_dark_light

    def home_color(self, scheme):
        if self.preferences.custom:
            return parse_color(getattr(self.preferences, f"home_background_{scheme.value}"))
        return parse_color(DEFAULT_PREFERENCES[f"homeBackground_{scheme.value}"])

    def fallback_color(self, scheme):
        if self.preferences.custom:
            return parse_color(getattr(self.preferences, f"fallback_color_{scheme.value}"))
        return parse_color(DEFAULT_PREFERENCES[f"fallbackColour_{scheme.value}"])

    @property
    def custom_rules(self):
        return self.preferences.custom_rule if self.preferences.custom else {}


def make_context(scheme=Scheme.LIGHT, preferences=None):
    return Context(Scheme(scheme), preferences or Preferences())
