from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

import numpy as np
import numpy.typing as npt


@dataclass(frozen=True)
class RGB:
    """
    An 8-bit sRGB triplet.

        red (int): red channel, 0-255
        green (int): green channel, 0-255
        blue (int): blue channel, 0-255
    """
    red: int
    green: int
    blue: int

    def __post_init__(self):
        for name in ("red", "green", "blue"):
            channel = getattr(self, name)
            if isinstance(channel, bool) or not isinstance(channel, (int, np.integer)):
                raise TypeError(f"RGB {name} channel must be an integer, got {channel!r}")
            if channel < 0 or channel > 255:
                raise ValueError(f"RGB {name} channel must be between 0 and 255, got {channel}")
            # normalise numpy integers so equality and hashing stay plain-int
            object.__setattr__(self, name, int(channel))

    @staticmethod
    def from_array(array: npt.ArrayLike) -> 'RGB':
        """Build an RGB from any length-3 sequence, truncating floats toward zero."""
        r, g, b = np.trunc(np.asarray(array, dtype=float)).astype(int).tolist()
        return RGB(r, g, b)

    @staticmethod
    def from_hex(text: str) -> 'RGB':
        text = text.lstrip("#")
        if len(text) != 6:
            raise ValueError(f"Expected a 6 digit hex color, got {text!r}")
        return RGB(int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16))

    def to_array(self) -> npt.NDArray:
        return np.array([self.red, self.green, self.blue], dtype=int)

    def to_tuple(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def to_hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(self.red, self.green, self.blue)

    def is_gray(self) -> bool:
        return self.red == self.green == self.blue


class MixStatus(Enum):
    """
    Outcome of a mixing weight search.
        Solved: weights were found
        NoSolution: every combination tried was unmixable (all-zero or negative weights)
        InvalidInput: no target, or an empty palette
    """
    Solved = 0
    NoSolution = 1
    InvalidInput = 2


@dataclass
class MixingWeightsResult:
    """
    Result of GetMixingWeights.

        status (MixStatus): what happened
        weights (List[float]): best weights found, one per palette color (empty unless Solved)
        distance (float): RGB distance between the best mix and the target (None unless Solved)
    """
    status: MixStatus
    weights: List[float]
    distance: float | None = None

    @property
    def solved(self) -> bool:
        return self.status == MixStatus.Solved
