from collections import namedtuple

from ..color import dim_color, parse_color
from ..scheme import Scheme

NamedPalette = namedtuple("NamedPalette", ["scheme", "colors", "properties"])

# Light frames get darker surfaces, so light coefficients are scaled up to
# give a visible step on near-white bases.
LIGHT_SCALE = 1.5

# Both flags hand rendering of native widgets back to the browser
THEME_PROPERTIES = {
    "color_scheme": "system",
    "content_color_scheme": "system",
}

STATIC_COLORS = {
    Scheme.LIGHT: {
        "toolbar_top_separator": "rgba(0, 0, 0, 0)",
        "toolbar_field_border": "rgba(0, 0, 0, 0)",
        "toolbar_field_border_focus": "rgb(130, 180, 245)",
        "tab_background_text": "rgb(30, 30, 30)",
        "tab_loading": "rgba(0, 0, 0, 0)",
        "tab_line": "rgba(0, 0, 0, 0)",
        "ntp_text": "rgb(0, 0, 0)",
        "toolbar_text": "rgb(0, 0, 0)",
        "toolbar_field_text": "rgb(0, 0, 0)",
        "popup_text": "rgb(0, 0, 0)",
        "sidebar_text": "rgb(0, 0, 0)",
        "button_background_hover": "rgba(0, 0, 0, 0.10)",
        "button_background_active": "rgba(0, 0, 0, 0.15)",
        "icons": "rgb(30, 30, 30)",
    },
    Scheme.DARK: {
        "toolbar_top_separator": "rgba(0, 0, 0, 0)",
        "toolbar_field_border_focus": "rgb(70, 118, 160)",
        "tab_background_text": "rgb(225, 225, 225)",
        "tab_loading": "rgba(0, 0, 0, 0)",
        "tab_line": "rgba(0, 0, 0, 0)",
        "ntp_text": "rgb(255, 255, 255)",
        "toolbar_text": "rgb(255, 255, 255)",
        "toolbar_field_text": "rgb(255, 255, 255)",
        "popup_text": "rgb(225, 225, 225)",
        "sidebar_text": "rgb(225, 225, 225)",
        "button_background_hover": "rgba(255, 255, 255, 0.10)",
        "button_background_active": "rgba(255, 255, 255, 0.15)",
        "icons": "rgb(225, 225, 225)",
    },
}

# surface -> coefficient attributes summed into its dim amount
DYNAMIC_SURFACES = {
    "frame": ("tabbar",),
    "frame_inactive": ("tabbar",),
    "tab_selected": ("tab_selected",),
    "ntp_background": (),
    "toolbar": ("toolbar",),
    "toolbar_bottom_separator": ("toolbar_border", "toolbar"),
    "toolbar_field": ("toolbar_field",),
    "toolbar_field_border": ("toolbar_field_border",),
    "toolbar_field_focus": ("toolbar_field_on_focus",),
    "sidebar": ("sidebar",),
    "sidebar_border": ("sidebar", "sidebar_border"),
    "popup": ("popup",),
    "popup_border": ("popup", "popup_border"),
}


def surface_dim(coefficient, scheme):
    """Signed dim amount for a surface coefficient in ``scheme``."""
    if scheme is Scheme.LIGHT:
        return -coefficient * LIGHT_SCALE
    return coefficient


def generate_palette(color, scheme, preferences):
    """Derive every chrome surface color from one (already corrected) base color.

    Args:
        color: Base Color of the frame
        scheme: Scheme the base color was corrected for
        preferences: Anything exposing the per-surface dimming coefficients

    Returns:
        NamedPalette with colors keyed by theme property name
    """
    scheme = Scheme(scheme)
    static = STATIC_COLORS[scheme]
    colors = {}

    for surface, coefficients in DYNAMIC_SURFACES.items():
        if surface in static:
            continue
        amount = sum(getattr(preferences, name) for name in coefficients)
        colors[surface] = dim_color(color, surface_dim(amount, scheme))

    for surface, value in static.items():
        colors[surface] = parse_color(value)

    return NamedPalette(scheme=scheme, colors=colors, properties=dict(THEME_PROPERTIES))
