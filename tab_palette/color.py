import math
import re
from collections import namedtuple

Color = namedtuple("Color", ["hex", "rgb", "alpha", "luminance"])


class InvalidColorError(ValueError):
    """Raised when a value cannot be interpreted as a color."""


def rgb_to_hex(r, g, b):
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgba(hex_color):
    hex_color = hex_color.lstrip("#")
    if len(hex_color) in (3, 4):
        hex_color = "".join(ch * 2 for ch in hex_color)
    if len(hex_color) not in (6, 8):
        raise InvalidColorError(f"Invalid hex color: #{hex_color}")
    try:
        channels = [int(hex_color[i : i + 2], 16) for i in range(0, len(hex_color), 2)]
    except ValueError:
        raise InvalidColorError(f"Invalid hex color: #{hex_color}") from None
    alpha = channels[3] / 255 if len(channels) == 4 else 1.0
    return channels[0], channels[1], channels[2], alpha


def relative_luminance(r, g, b):
    """Calculate relative luminance per WCAG 2.0"""

    def channel(c):
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def contrast_ratio(lum1, lum2):
    """Calculate contrast ratio between two luminances"""
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def color_contrast(color1, color2):
    return contrast_ratio(color1.luminance, color2.luminance)


def create_color(r, g, b, alpha=1.0):
    """Create a Color namedtuple with all representations"""
    r, g, b = (max(0, min(255, int(round(c)))) for c in (r, g, b))
    alpha = max(0.0, min(1.0, float(alpha)))
    return Color(
        hex=rgb_to_hex(r, g, b),
        rgb=(r, g, b),
        alpha=alpha,
        luminance=relative_luminance(r, g, b),
    )


WHITE = create_color(255, 255, 255)
BLACK = create_color(0, 0, 0)
TRANSPARENT = create_color(0, 0, 0, 0)


def dim_color(color, dim):
    """Linearly lighten (dim > 0) or darken (dim < 0) a color.

    A dim of 1 gives white, -1 gives black. Alpha is kept as is.
    """
    dim = max(-1.0, min(1.0, dim))
    if dim > 0:
        channels = [c + (255 - c) * dim for c in color.rgb]
    else:
        channels = [c * (1 + dim) for c in color.rgb]
    return create_color(*channels, alpha=color.alpha)


_CSS_RGB = re.compile(
    r"^rgba?\(\s*([\d.]+)\s*[,\s]\s*([\d.]+)\s*[,\s]\s*([\d.]+)\s*(?:[,/]\s*([\d.]+%?)\s*)?\)$",
    re.IGNORECASE,
)


def _from_channels(value, r, g, b, alpha=1.0):
    try:
        channels = [float(c) for c in (r, g, b, alpha)]
    except (TypeError, ValueError, OverflowError):
        raise InvalidColorError(f"Invalid color channels: {value!r}") from None
    if not all(math.isfinite(c) for c in channels):
        raise InvalidColorError(f"Invalid color channels: {value!r}")
    return create_color(*channels)


def parse_color(value):
    """Interpret a Color, hex string, CSS rgb()/rgba() string or [r, g, b(, a)] sequence."""
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.startswith("#"):
            return create_color(*hex_to_rgba(text))
        match = _CSS_RGB.match(text)
        if match:
            r, g, b, a = match.groups()
            if a is None:
                a = 1.0
            elif a.endswith("%"):
                try:
                    a = float(a[:-1]) / 100
                except ValueError:
                    raise InvalidColorError(f"Invalid alpha: {value!r}") from None
            return _from_channels(value, r, g, b, a)
        raise InvalidColorError(f"Unrecognised color string: {value!r}")
    if isinstance(value, dict) and {"r", "g", "b"} <= value.keys():
        return _from_channels(value, value["r"], value["g"], value["b"], value.get("a", 1.0))
    if isinstance(value, (list, tuple)) and len(value) in (3, 4):
        return _from_channels(value, *value)
    raise InvalidColorError(f"Cannot interpret {value!r} as a color")


def to_css(color):
    r, g, b = color.rgb
    if color.alpha >= 1:
        return f"rgb({r}, {g}, {b})"
    return f"rgba({r}, {g}, {b}, {color.alpha:g})"
