import warnings
from typing import Iterable, List, Sequence, Tuple

import numpy as np
import numpy.typing as npt
from colour import CCS_ILLUMINANTS, XYZ_to_sRGB, xyY_to_XYZ
from colour.notation.datasets.munsell import MUNSELL_COLOURS_REAL
from tqdm import tqdm

from MunsellSpectrum.Hue import Hue
from MunsellSpectrum.MunsellColor import MunsellColor
from MunsellSpectrum.Utils.CustomTypes import RGB
from MunsellSpectrum.Utils.IO import MunsellToRGBRow, RGBToMunsellRow

# The renotation data was measured under illuminant C
ILLUMINANT_C = CCS_ILLUMINANTS["CIE 1931 2 Degree Standard Observer"]["C"]


def RenotationToSRGB(xyY: npt.NDArray) -> npt.NDArray:
    """
    Convert renotation xyY samples (Y on a 0-100 scale) to 8-bit sRGB.

    Samples outside the sRGB gamut are clipped with a warning.

    :param xyY: Nx3 array of xyY samples
    :return: Nx3 integer array of sRGB channels in 0-255
    """
    xyY = np.array(xyY, dtype=float).reshape(-1, 3)
    xyY[:, 2] /= 100
    rgb = XYZ_to_sRGB(xyY_to_XYZ(xyY), illuminant=ILLUMINANT_C)

    out_of_gamut = np.any((rgb < 0) | (rgb > 1), axis=1)
    if np.any(out_of_gamut):
        warnings.warn(f"{int(np.sum(out_of_gamut))} renotation colors fall outside sRGB. Clipping.")
    return np.round(np.clip(rgb, 0, 1) * 255).astype(int)


def GenerateMunsellToRGBRows(dataset: Sequence[Tuple[Tuple[str, float, float], npt.NDArray]] = MUNSELL_COLOURS_REAL,
                             verbose: bool = False) -> List[MunsellToRGBRow]:
    """
    Build Munsell -> RGB rows from a renotation dataset.

    Rows come out sorted around the wheel (2.5R first, 10RP last), then by
    ascending value and chroma, which is the order color_grid relies on.

    Args:
        dataset: ((hue name, value, chroma), xyY) pairs. Defaults to the "real" renotation colors.
        verbose (bool, optional): show a progress bar. Defaults to False.

    Returns:
        List[MunsellToRGBRow]: (hue, value, chroma, rgb) rows
    """
    specifications = [specification for specification, _ in dataset]
    channels = RenotationToSRGB(np.array([xyY for _, xyY in dataset]))

    rows: List[MunsellToRGBRow] = []
    for (hue_name, value, chroma), rgb in tqdm(zip(specifications, channels), total=len(specifications),
                                               desc="Renotation", disable=not verbose):
        rows.append((Hue.from_name(hue_name), int(value), int(chroma), RGB(*rgb.tolist())))

    rows.sort(key=lambda row: (row[0].total_value(), row[1], row[2]))
    return rows


def DeriveRGBToMunsellRows(rows: Iterable[MunsellToRGBRow]) -> List[RGBToMunsellRow]:
    """Invert Munsell -> RGB rows into RGB -> Munsell rows."""
    return [(rgb.red, rgb.green, rgb.blue, MunsellColor(hue, value, chroma)) for hue, value, chroma, rgb in rows]
