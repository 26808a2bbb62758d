import math
from typing import List

from MunsellSpectrum.Utils.Errors import InvalidHue, OutOfRange

# Chromatic sectors in wheel order, each spanning 10 units of the 0-100 hue circle.
# "N" is the achromatic marker and has no place on the wheel.
HUE_PREFIXES: List[str] = ["R", "YR", "Y", "GY", "G", "BG", "B", "PB", "P", "RP", "N"]
ACHROMATIC_PREFIX: str = "N"


class Hue:
    """
    A position on the Munsell hue wheel, stored as a sector prefix plus a
    sector-local number (e.g. 2.5PB).

    Hues are immutable and compare structurally on (prefix, number).
    """

    __slots__ = ("_prefix", "_number")

    def __init__(self, prefix: str, number: float):
        """
        Args:
            prefix (str): one of HUE_PREFIXES
            number (float): position inside the sector, 0-10

        Raises:
            InvalidHue: the prefix is unknown or the number is outside [0, 10]
        """
        if prefix not in HUE_PREFIXES:
            raise InvalidHue(f"Unknown hue prefix {prefix!r}")
        try:
            number = float(number)
        except (TypeError, ValueError) as e:
            raise InvalidHue(f"Hue number must be a real number, got {number!r}") from e
        if math.isnan(number) or number < 0 or number > 10:
            raise InvalidHue(f"Hue number must be between 0 and 10, got {number}")
        object.__setattr__(self, "_prefix", prefix)
        object.__setattr__(self, "_number", number)

    def __setattr__(self, name, value):
        raise AttributeError(f"'{self.__class__.__name__}' object is immutable")

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def number(self) -> float:
        return self._number

    @staticmethod
    def from_total_value(total: float) -> 'Hue':
        """Build a Hue from a position on the 0-100 wheel.

        The number is taken with a half-unit offset, matching how sample rows
        are centered. An exact multiple of ten belongs to the end of the
        previous sector (10.0 -> 10R, 100.0 -> 10RP) and anything past it starts
        the next one (10.3 -> 0.3YR).

        Args:
            total (float): total hue value, 0-100

        Raises:
            OutOfRange: total is outside [0, 100]
        """
        if not 0 <= total <= 100:
            raise OutOfRange(f"Total hue should be between 0 and 100, got {total}")
        number = round(math.fmod(total - 0.5, 10) + 0.5, 10)
        if number > 10:
            # just past a sector start, e.g. 10.3 -> 0.3YR
            index, number = int(total) // 10, round(number - 10, 10)
        else:
            # int() truncates toward zero, which keeps [0, 0.1) inside R
            index = int(total - 0.1) // 10
        return Hue(HUE_PREFIXES[index], number)

    @staticmethod
    def from_name(name: str) -> 'Hue':
        """Parse a hue name such as "2.5PB" or "10RP".

        Raises:
            InvalidHue: the leading number is missing or malformed, or the prefix is unknown
        """
        if name is None:
            raise InvalidHue("Hue name cannot be None")
        name = name.strip()

        i = 0
        while i < len(name) and (name[i].isdigit() or name[i] == "."):
            i += 1
        digits, prefix = name[:i], name[i:].upper()

        if digits.count(".") > 1:
            raise InvalidHue(f"Hue number in {name!r} has more than one decimal point")
        try:
            number = float(digits)
        except ValueError as e:
            raise InvalidHue(f"Hue name {name!r} does not start with a number") from e
        return Hue(prefix, number)

    def total_value(self) -> float:
        """Position on the 0-100 wheel. Achromatic hues sit at 0."""
        if self.is_achromatic():
            return 0
        return HUE_PREFIXES.index(self._prefix) * 10 + self._number

    def is_achromatic(self) -> bool:
        return self._prefix == ACHROMATIC_PREFIX

    def __str__(self) -> str:
        if self._number.is_integer():
            return f"{int(self._number)}{self._prefix}"
        number = f"{self._number:.5f}".rstrip("0").rstrip(".")
        return f"{number}{self._prefix}"

    def __repr__(self) -> str:
        return f"Hue({self._prefix!r}, {self._number!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Hue):
            return NotImplemented
        return self._prefix == other._prefix and self._number == other._number

    def __hash__(self) -> int:
        return hash((self._prefix, self._number))

    def __reduce__(self):
        return (Hue, (self._prefix, self._number))
