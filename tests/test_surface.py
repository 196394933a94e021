"""Tests for color helpers and the null surface."""

import pytest

from letterquest.surface import NULL_SURFACE, hex_to_rgb, ocean_color, rgb_to_hex, xterm_index


def test_hex_round_trip():
    assert hex_to_rgb('#ff6b6b') == (255, 107, 107)
    assert rgb_to_hex((255, 107, 107)) == '#ff6b6b'


@pytest.mark.parametrize("rgb,index", [
    ((0, 0, 0), 16),
    ((255, 255, 255), 231),
    ((255, 0, 0), 196),
    ((0, 0, 255), 21),
])
def test_xterm_index(rgb, index):
    assert xterm_index(rgb) == index


def test_ocean_gets_darker_with_depth():
    for frame in (0, 157, 1000):
        surface = sum(hex_to_rgb(ocean_color(0.0, frame)))
        middle = sum(hex_to_rgb(ocean_color(0.5, frame)))
        floor = sum(hex_to_rgb(ocean_color(1.0, frame)))
        assert surface > middle > floor


def test_ocean_color_clamps_depth():
    assert ocean_color(-1, 0) == ocean_color(0, 0)
    assert ocean_color(2, 0) == ocean_color(1, 0)


def test_null_surface_accepts_everything():
    NULL_SURFACE.fill_background(0)
    NULL_SURFACE.disc(0, 0, 5, '#ffffff', 0.5, filled=False)
    NULL_SURFACE.polygon([(0, 0), (1, 1)], '#ffffff')
    NULL_SURFACE.glyph(0, 0, 'A', '#ffffff', bold=True)
    NULL_SURFACE.fish(0, 0, 0.0, 45, True, 0, '#ff6b6b')
