import itertools

import pytest

from tab_palette.color import BLACK, WHITE, color_contrast, create_color
from tab_palette.contrast import correct_contrast
from tab_palette.scheme import Scheme

SAMPLE_COLORS = [
    create_color(r, g, b)
    for r, g, b in itertools.product((0, 60, 128, 200, 255), (0, 90, 180, 255), (0, 128, 255))
]


def test_eligible_dark_color_passes_unchanged() -> None:
    color = create_color(10, 10, 10)
    result = correct_contrast(color, Scheme.DARK, 4.5, 4.5, False)
    assert result.color == color
    assert result.scheme is Scheme.DARK


def test_eligible_light_color_passes_unchanged() -> None:
    result = correct_contrast(WHITE, Scheme.LIGHT, 4.5, 4.5, False)
    assert result == (WHITE, Scheme.LIGHT)


def test_opposite_scheme_is_used_when_allowed() -> None:
    gray = create_color(128, 128, 128)  # fine for light, too bright for dark
    assert correct_contrast(gray, Scheme.DARK, 4.5, 4.5, True) == (gray, Scheme.LIGHT)

    navy = create_color(10, 20, 80)
    assert correct_contrast(navy, Scheme.LIGHT, 4.5, 4.5, True) == (navy, Scheme.DARK)


def test_dark_scheme_darkens_too_bright_color() -> None:
    gray = create_color(128, 128, 128)
    color, scheme = correct_contrast(gray, Scheme.DARK, 4.5, 4.5, False)
    assert scheme is Scheme.DARK
    assert color_contrast(color, WHITE) >= 4.5
    assert color.luminance < gray.luminance


def test_light_scheme_lightens_too_dark_color() -> None:
    navy = create_color(10, 20, 80)
    color, scheme = correct_contrast(navy, Scheme.LIGHT, 4.5, 4.5, False)
    assert scheme is Scheme.LIGHT
    assert color_contrast(color, BLACK) >= 4.5
    assert color.luminance > navy.luminance


def test_black_can_be_corrected_for_light_scheme() -> None:
    color, scheme = correct_contrast(BLACK, Scheme.LIGHT, 4.5, 4.5, False)
    assert scheme is Scheme.LIGHT
    assert color_contrast(color, BLACK) >= 4.5


@pytest.mark.parametrize("scheme", [Scheme.LIGHT, Scheme.DARK])
@pytest.mark.parametrize("allow", [True, False])
@pytest.mark.parametrize("floors", [(4.5, 4.5), (3.0, 7.0), (7.0, 3.0)])
def test_every_result_meets_its_floor(scheme, allow, floors) -> None:
    min_light, min_dark = floors
    for base in SAMPLE_COLORS:
        color, result_scheme = correct_contrast(base, scheme, min_light, min_dark, allow)
        if not allow:
            assert result_scheme is scheme
        if result_scheme is Scheme.LIGHT:
            assert color_contrast(color, BLACK) >= min_light
        else:
            assert color_contrast(color, WHITE) >= min_dark


def test_unreachable_floor_gives_boundary_color() -> None:
    navy = create_color(10, 20, 80)
    assert correct_contrast(navy, Scheme.LIGHT, 25, 4.5, False) == (WHITE, Scheme.LIGHT)
    gray = create_color(128, 128, 128)
    assert correct_contrast(gray, Scheme.DARK, 4.5, 25, False) == (BLACK, Scheme.DARK)


def test_alpha_survives_correction() -> None:
    color = create_color(128, 128, 128, alpha=0.5)
    corrected, _ = correct_contrast(color, Scheme.DARK, 4.5, 4.5, False)
    assert corrected.alpha == 0.5
