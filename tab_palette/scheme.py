from enum import Enum


class Scheme(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    @property
    def reversed(self):
        return Scheme.DARK if self is Scheme.LIGHT else Scheme.LIGHT

    @property
    def is_dark(self):
        return self is Scheme.DARK


def resolve_scheme(override=None, os_prefers_dark=False):
    """Pick the preferred scheme.

    An explicit "light" or "dark" override wins; "auto" (or anything else)
    defers to the operating system's dark-mode signal.
    """
    if override in (Scheme.LIGHT, Scheme.DARK):
        return Scheme(override)
    if isinstance(override, str) and override.lower() in ("light", "dark"):
        return Scheme(override.lower())
    return Scheme.DARK if os_prefers_dark else Scheme.LIGHT
