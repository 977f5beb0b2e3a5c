"""Contrast correction for literal page colors.

The chrome draws black text and icons over light frames and white ones over
dark frames. A page color is usable in a scheme when its contrast against
that foreground clears the scheme's minimum; otherwise it is lightened
(light scheme) or darkened (dark scheme) just enough to clear it.
"""

from collections import namedtuple

from .color import BLACK, WHITE, color_contrast, dim_color
from .scheme import Scheme

Correction = namedtuple("Correction", ["color", "scheme"])

# Bisection steps when the closed-form dim falls short
MAX_REFINE_ITERATIONS = 30


def _settle(color, dim, bound, meets):
    """Dim ``color`` by ``dim``, moving toward ``bound`` until ``meets`` holds.

    Returns the boundary color when even the boundary misses the target.
    """
    candidate = dim_color(color, dim)
    if meets(candidate):
        return candidate
    boundary = dim_color(color, bound)
    if not meets(boundary):
        return boundary

    low, high = dim, bound
    for _ in range(MAX_REFINE_ITERATIONS):
        mid = (low + high) / 2
        if meets(dim_color(color, mid)):
            high = mid
        else:
            low = mid
        if abs(high - low) < 1e-4:
            break
    return dim_color(color, high)


def correct_contrast(color, scheme, min_contrast_light, min_contrast_dark, allow_opposite):
    """Return a Correction whose color meets the contrast floor of its scheme.

    Args:
        color: Literal page color
        scheme: Currently preferred Scheme
        min_contrast_light: Minimum ratio against black for a light frame
        min_contrast_dark: Minimum ratio against white for a dark frame
        allow_opposite: Whether the color may switch to the reversed scheme

    Returns:
        Correction(color, scheme)
    """
    scheme = Scheme(scheme)
    ratio_white = color_contrast(color, WHITE)
    ratio_black = color_contrast(color, BLACK)
    eligible_light = ratio_black > min_contrast_light
    eligible_dark = ratio_white > min_contrast_dark

    if eligible_light and (scheme is Scheme.LIGHT or allow_opposite):
        return Correction(color, Scheme.LIGHT)
    if eligible_dark and (scheme is Scheme.DARK or allow_opposite):
        return Correction(color, Scheme.DARK)

    if scheme is Scheme.LIGHT:
        luminance = 255 * color.luminance
        if luminance >= 255:
            dim = 1.0
        else:
            dim = (min_contrast_light / ratio_black - 1) * luminance / (255 - luminance)
        corrected = _settle(
            color,
            dim,
            1.0,
            lambda c: color_contrast(c, BLACK) >= min_contrast_light,
        )
        return Correction(corrected, Scheme.LIGHT)

    dim = ratio_white / min_contrast_dark - 1
    corrected = _settle(
        color,
        dim,
        -1.0,
        lambda c: color_contrast(c, WHITE) >= min_contrast_dark,
    )
    return Correction(corrected, Scheme.DARK)
