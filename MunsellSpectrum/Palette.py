from typing import Iterator, List, Sequence

from MunsellSpectrum.ColorMath.Mixing import Mix
from MunsellSpectrum.Converter import MunsellConverter
from MunsellSpectrum.MunsellColor import MunsellColor
from MunsellSpectrum.Utils.CustomTypes import RGB

PALETTE_CAPACITY: int = 10


def RGBDifference(rgb1: RGB, rgb2: RGB) -> int:
    """Sum of absolute channel differences. 0 if identical."""
    return abs(rgb1.red - rgb2.red) + abs(rgb1.green - rgb2.green) + abs(rgb1.blue - rgb2.blue)


class Palette:
    """
    A small, ordered set of distinct colors the user has picked.

    Once the palette is full, adding a color evicts the entry just before the
    last one and appends the new color at the end.
    """

    def __init__(self, converter: MunsellConverter | None = None, capacity: int = PALETTE_CAPACITY):
        """
        Args:
            converter (MunsellConverter, optional): used to project chromatic colors for get_closest_color
            capacity (int, optional): maximum number of colors. Defaults to 10.
        """
        if capacity < 1:
            raise ValueError(f"Palette capacity must be at least 1, got {capacity}")
        self.converter = converter
        self.capacity = capacity
        self._colors: List[MunsellColor] = []

    def add_color(self, color: MunsellColor) -> None:
        if color is None:
            raise ValueError("Cannot add None to a palette")
        if color in self._colors:
            return
        if len(self._colors) >= self.capacity:
            self._colors.pop(len(self._colors) - 2)
        self._colors.append(color)

    def remove_color(self, color: MunsellColor) -> None:
        if color is None:
            raise ValueError("Cannot remove None from a palette")
        if color in self._colors:
            self._colors.remove(color)

    def get_colors(self) -> List[MunsellColor]:
        return list(self._colors)

    def get_closest_color(self, color: MunsellColor, converter: MunsellConverter | None = None) -> MunsellColor | None:
        """
        The palette color nearest to the given one, by summed RGB channel difference.

        Returns:
            MunsellColor | None: the closest color (earliest on ties), None for an empty palette
        """
        converter = converter or self.converter
        target = color.to_rgb(converter)
        closest, closest_difference = None, None
        for candidate in self._colors:
            difference = RGBDifference(target, candidate.to_rgb(converter))
            if closest is None or closest_difference > difference:
                closest, closest_difference = candidate, difference
        return closest

    @staticmethod
    def mix_color(colors: Sequence[MunsellColor], weights: Sequence[float],
                  converter: MunsellConverter) -> MunsellColor | None:
        return Mix(colors, weights, converter)

    def clear(self) -> None:
        self._colors.clear()

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[MunsellColor]:
        return iter(list(self._colors))

    def __contains__(self, color) -> bool:
        return color in self._colors

    def __repr__(self) -> str:
        return f"Palette([{', '.join(str(c) for c in self._colors)}])"
