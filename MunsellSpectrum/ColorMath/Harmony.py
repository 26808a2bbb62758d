from typing import Dict, List

from MunsellSpectrum.Hue import Hue
from MunsellSpectrum.MunsellColor import MunsellColor

ANALOGOUS_DISTANCES = range(1, 6)


def GetComplement(color: MunsellColor) -> MunsellColor:
    """
    The color diametrically opposite on the hue wheel, with the same value and chroma.

    :param color: color to complement
    :return: a new color whose total hue is (total + 50) mod 100
    """
    hue = Hue.from_total_value((color.hue.total_value() + 50) % 100)
    return MunsellColor(hue, color.value, color.chroma)


def GetAnalogous(color: MunsellColor) -> Dict[int, List[MunsellColor]]:
    """
    Neighbours of a color inside its own hue sector.

    For every distance d in 1..5 the entry holds the color d hue steps below
    (when the number stays >= 0) followed by the color d steps above (when it
    stays <= 10). Sector boundaries are never crossed, so near an edge an entry
    can hold a single color.

    :param color: color to take neighbours of
    :return: distance -> [lower, upper] with missing members left out
    """
    prefix, number = color.hue.prefix, color.hue.number
    analogous: Dict[int, List[MunsellColor]] = {}
    for distance in ANALOGOUS_DISTANCES:
        pair: List[MunsellColor] = []
        if number - distance >= 0:
            pair.append(MunsellColor(Hue(prefix, number - distance), color.value, color.chroma))
        if number + distance <= 10:
            pair.append(MunsellColor(Hue(prefix, number + distance), color.value, color.chroma))
        analogous[distance] = pair
    return analogous


def GetSplitComplementary(color: MunsellColor) -> Dict[int, List[MunsellColor]]:
    """The analogous colors of the complement, keyed the same way as GetAnalogous."""
    return GetAnalogous(GetComplement(color))
