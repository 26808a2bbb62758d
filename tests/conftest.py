"""Small hand-built conversion tables shared by the test modules.

The rows mimic the layout of the real tables (ascending value and chroma per
hue) but only sample a handful of colors, so every expected lookup can be
worked out by hand.
"""

import pytest

from MunsellSpectrum.Converter import MunsellConverter
from MunsellSpectrum.Hue import Hue
from MunsellSpectrum.MunsellColor import MunsellColor
from MunsellSpectrum.Utils.CustomTypes import RGB

GREEN = MunsellColor(Hue("G", 7.5), 5, 16)
BLUE = MunsellColor(Hue("B", 7.5), 4, 14)
GREEN_RGB = RGB(20, 150, 100)
BLUE_RGB = RGB(20, 56, 109)
# equal parts GREEN and BLUE: (20, 103, 104.5) truncated
GREEN_BLUE_MIX = MunsellColor(Hue("BG", 9.79), 5, 6)
GREEN_BLUE_RGB = RGB(20, 103, 104)


def _forward(prefix, number, value, chroma, r, g, b):
    return Hue(prefix, number), value, chroma, RGB(r, g, b)


def _reverse(r, g, b, hue_name, value, chroma):
    return r, g, b, MunsellColor(Hue.from_name(hue_name), value, chroma)


@pytest.fixture
def munsell_to_rgb_rows():
    return [
        _forward("R", 2.5, 1, 2, 45, 21, 31),
        _forward("R", 2.5, 1, 4, 60, 15, 30),
        _forward("R", 2.5, 2, 2, 70, 45, 50),
        _forward("R", 2.5, 2, 4, 90, 40, 50),
        _forward("R", 2.5, 2, 6, 110, 30, 45),
        _forward("R", 2.5, 3, 2, 95, 70, 75),
        _forward("R", 5, 1, 2, 50, 20, 28),
        _forward("R", 5, 5, 10, 200, 40, 60),
        _forward("R", 5, 5, 20, 230, 10, 40),
        _forward("R", 5, 9, 2, 240, 220, 220),
        _forward("G", 7.5, 5, 16, 20, 150, 100),
        _forward("B", 7.5, 4, 14, 20, 56, 109),
        _forward("BG", 10, 5, 6, 20, 103, 104),
        _forward("YR", 5, 6, 8, 200, 130, 80),
        # sentinel rows, dropped
        _forward("R", 2.5, 0, 2, 1, 1, 1),
        _forward("R", 2.5, 4, 0, 2, 2, 2),
        # duplicate key, the first row wins
        _forward("R", 2.5, 1, 2, 1, 2, 3),
        _forward("B", 2.5, 5, 10, 20, 79, 106),
    ]


@pytest.fixture
def rgb_to_munsell_rows():
    return [
        _reverse(0, 34, 17, "1.36G", 1.00, 3.83),
        _reverse(20, 103, 104, "9.79BG", 5, 6),
        _reverse(20, 150, 100, "7.5G", 5, 16),
        _reverse(20, 56, 109, "7.5B", 4, 14),
        _reverse(255, 0, 0, "5R", 5, 20),
        _reverse(45, 21, 31, "2.5R", 1, 2),
        # duplicate key, the first row wins
        _reverse(0, 34, 17, "5Y", 8, 2),
    ]


@pytest.fixture
def converter(munsell_to_rgb_rows, rgb_to_munsell_rows):
    return MunsellConverter(munsell_to_rgb_rows, rgb_to_munsell_rows)
