"""Symbolic color sources.

A token stands for a curated light/dark color pair. Token colors already
satisfy the chrome's contrast needs in their scheme, so they are never
contrast-corrected.
"""

from enum import Enum

from .color import Color, InvalidColorError, create_color, parse_color
from .scheme import Scheme


class ColorToken(Enum):
    HOME = "HOME"
    FALLBACK = "FALLBACK"
    PLAINTEXT = "PLAINTEXT"
    SYSTEM = "SYSTEM"
    ADDON = "ADDON"
    PDFVIEWER = "PDFVIEWER"
    IMAGEVIEWER = "IMAGEVIEWER"
    DEFAULT = "DEFAULT"


# HOME and FALLBACK depend on preferences and are looked up on the context
TOKEN_COLORS = {
    ColorToken.PLAINTEXT: {Scheme.LIGHT: create_color(236, 236, 236), Scheme.DARK: create_color(50, 50, 50)},
    ColorToken.SYSTEM: {Scheme.LIGHT: create_color(255, 255, 255), Scheme.DARK: create_color(30, 30, 30)},
    ColorToken.ADDON: {Scheme.LIGHT: create_color(236, 236, 236), Scheme.DARK: create_color(50, 50, 50)},
    ColorToken.PDFVIEWER: {Scheme.LIGHT: create_color(249, 249, 250), Scheme.DARK: create_color(56, 56, 61)},
    ColorToken.IMAGEVIEWER: {Scheme.DARK: create_color(33, 33, 33)},
    ColorToken.DEFAULT: {Scheme.LIGHT: create_color(255, 255, 255), Scheme.DARK: create_color(28, 27, 34)},
}


def token_color(token, scheme, context):
    """Return the token's color for ``scheme``, or None if it has none."""
    if token is ColorToken.HOME:
        return context.home_color(scheme)
    if token is ColorToken.FALLBACK:
        return context.fallback_color(scheme)
    return TOKEN_COLORS[token].get(scheme)


def resolve_token(token, context):
    """Turn a token into a concrete (color, scheme) pair.

    Falls back to the reversed scheme when opposite schemes are allowed, and
    to the FALLBACK color otherwise.
    """
    color = token_color(token, context.scheme, context)
    if color is not None:
        return color, context.scheme
    reversed_scheme = context.reversed_scheme
    color = token_color(token, reversed_scheme, context)
    if color is not None and context.allow_opposite:
        return color, reversed_scheme
    return context.fallback_color(context.scheme), context.scheme


def parse_color_source(value):
    """Interpret a stored rule or a page response as a ColorToken or a Color."""
    if isinstance(value, (ColorToken, Color)):
        return value
    if isinstance(value, str):
        name = value.strip().upper()
        if name in ColorToken.__members__:
            return ColorToken[name]
    try:
        return parse_color(value)
    except InvalidColorError:
        raise InvalidColorError(f"Not a color or color token: {value!r}") from None
