import math
from typing import TYPE_CHECKING, Dict, List, Sequence

from MunsellSpectrum.Hue import Hue, ACHROMATIC_PREFIX
from MunsellSpectrum.Utils.CustomTypes import RGB
from MunsellSpectrum.Utils.Errors import ConverterNotLoaded, OutOfRange

if TYPE_CHECKING:
    from MunsellSpectrum.Converter import MunsellConverter

MAX_VALUE: float = 10
MAX_CHROMA: float = 40


class MunsellColor:
    """
    A Munsell color: hue, value (lightness, 0-10) and chroma (saturation, 0-40).

    Colors are immutable. Construction does not enforce the value/chroma ranges
    because lookups accept out-of-range requests and snap them to the nearest
    sampled entry; use is_valid() to check the invariant. Value and chroma must
    still be finite numbers.
    """

    __slots__ = ("_hue", "_value", "_chroma")

    def __init__(self, hue: Hue, value: float, chroma: float):
        if not isinstance(hue, Hue):
            raise TypeError(f"hue must be a Hue, got {type(hue).__name__}")
        if not (math.isfinite(value) and math.isfinite(chroma)):
            raise OutOfRange(f"Value and chroma must be finite, got {value}/{chroma}")
        object.__setattr__(self, "_hue", hue)
        object.__setattr__(self, "_value", float(value))
        object.__setattr__(self, "_chroma", float(chroma))

    def __setattr__(self, name, value):
        raise AttributeError(f"'{self.__class__.__name__}' object is immutable")

    @property
    def hue(self) -> Hue:
        return self._hue

    @property
    def value(self) -> float:
        return self._value

    @property
    def chroma(self) -> float:
        return self._chroma

    @staticmethod
    def n(value: float) -> 'MunsellColor':
        """Achromatic (gray) color with the given value."""
        return MunsellColor(Hue(ACHROMATIC_PREFIX, 0), value, 0)

    def is_achromatic(self) -> bool:
        return self._hue.is_achromatic()

    def is_valid(self) -> bool:
        return self._value <= MAX_VALUE and self._chroma <= MAX_CHROMA

    def to_rgb(self, converter: 'MunsellConverter | None' = None) -> RGB:
        """
        Project the color to RGB.

        Grays follow a linear ramp over value and never touch the converter;
        everything else is looked up in the converter's Munsell -> RGB table.

        Args:
            converter (MunsellConverter, optional): required for chromatic colors

        Returns:
            RGB: the closest sampled RGB color
        """
        if self.is_achromatic():
            level = 1 - ((10 - self._value) / 10)
            level = max(min(level, 1), 0)
            channel = int(level * 255 + 0.5)
            return RGB(channel, channel, channel)
        if converter is None:
            raise ConverterNotLoaded(f"A converter is needed to project {self} to RGB")
        return converter.from_munsell(self)

    @staticmethod
    def from_rgb(rgb: RGB, converter: 'MunsellConverter | None' = None) -> 'MunsellColor':
        """
        Find the Munsell color for an RGB triplet.

        Grays map straight to N with value r / 255 * 10. This is not the inverse
        of the gray ramp used by to_rgb, and is kept that way on purpose.
        """
        if rgb is None:
            raise ValueError("rgb cannot be None")
        if rgb.is_gray():
            return MunsellColor.n(rgb.red / 255 * 10)
        if converter is None:
            raise ConverterNotLoaded(f"A converter is needed to look up {rgb}")
        return converter.from_rgb(rgb)

    def get_complement(self) -> 'MunsellColor':
        from MunsellSpectrum.ColorMath.Harmony import GetComplement
        return GetComplement(self)

    def get_analogous(self) -> Dict[int, List['MunsellColor']]:
        from MunsellSpectrum.ColorMath.Harmony import GetAnalogous
        return GetAnalogous(self)

    def get_split_complementary(self) -> Dict[int, List['MunsellColor']]:
        from MunsellSpectrum.ColorMath.Harmony import GetSplitComplementary
        return GetSplitComplementary(self)

    @staticmethod
    def mix(colors: Sequence['MunsellColor'], weights: Sequence[float],
            converter: 'MunsellConverter') -> 'MunsellColor | None':
        """Weighted RGB mix of colors, see ColorMath.Mixing.Mix."""
        from MunsellSpectrum.ColorMath.Mixing import Mix
        return Mix(colors, weights, converter)

    @staticmethod
    def color_distance(rgb1: RGB | None, rgb2: RGB | None) -> float | None:
        from MunsellSpectrum.ColorMath.Mixing import ColorDistance
        return ColorDistance(rgb1, rgb2)

    def __str__(self) -> str:
        if self.is_achromatic():
            return f"N{int(self._value)}"
        return f"{self._hue}, {int(self._value)}, {int(self._chroma)}"

    def __repr__(self) -> str:
        return f"MunsellColor({self._hue!r}, {self._value!r}, {self._chroma!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, MunsellColor):
            return NotImplemented
        return self._hue == other._hue and self._value == other._value and self._chroma == other._chroma

    def __hash__(self) -> int:
        return hash((self._hue, self._value, self._chroma))

    def __reduce__(self):
        return (MunsellColor, (self._hue, self._value, self._chroma))
