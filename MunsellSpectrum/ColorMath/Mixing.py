import math
from itertools import islice, product
from typing import List, Sequence, Tuple

import numpy as np
import numpy.typing as npt
from tqdm import tqdm

from MunsellSpectrum.Converter import MunsellConverter
from MunsellSpectrum.MunsellColor import MunsellColor
from MunsellSpectrum.Utils.CustomTypes import RGB, MixingWeightsResult, MixStatus
from MunsellSpectrum.Utils.Errors import InvalidArguments

COARSE_WEIGHTS: Tuple[float, ...] = (0, 2, 5, 8, 14)
ZERO_REFINEMENT_WEIGHTS: Tuple[float, ...] = (0, 0.2, 0.5, 1, 2)
REFINEMENT_OFFSETS: Tuple[float, ...] = (-2, -1, 0, 1, 2)
# combinations evaluated per numpy batch
CHUNK_SIZE: int = 5 ** 7


def MixRGB(rgbs: Sequence[RGB], weights: Sequence[float]) -> RGB | None:
    """
    Weighted average of RGB colors, each channel truncated to an integer.

    Args:
        rgbs (Sequence[RGB]): colors to mix
        weights (Sequence[float]): one weight per color

    Returns:
        RGB | None: the mix, or None when a weight is negative or all weights are 0

    Raises:
        InvalidArguments: the lists are empty or differ in length
    """
    if len(rgbs) == 0 or len(rgbs) != len(weights):
        raise InvalidArguments(f"Cannot mix {len(rgbs)} colors with {len(weights)} weights")

    sums = np.zeros(3)
    total = 0.0
    for rgb, weight in zip(rgbs, weights):
        if weight < 0:
            return None
        sums += rgb.to_array() * weight
        total += weight

    if total == 0:
        return None
    return RGB.from_array(sums / total)


def Mix(colors: Sequence[MunsellColor], weights: Sequence[float], converter: MunsellConverter) -> MunsellColor | None:
    """
    Mix Munsell colors in RGB and bring the result back to Munsell.

    Returns None for the same unmixable weights as MixRGB.
    """
    mixed = MixRGB([color.to_rgb(converter) for color in colors], weights)
    if mixed is None:
        return None
    return MunsellColor.from_rgb(mixed, converter)


def ColorDistance(rgb1: RGB | None, rgb2: RGB | None) -> float | None:
    """Euclidean distance between two RGB colors, or None if either is missing."""
    if rgb1 is None or rgb2 is None:
        return None
    return math.sqrt((rgb1.red - rgb2.red) ** 2 + (rgb1.green - rgb2.green) ** 2 + (rgb1.blue - rgb2.blue) ** 2)


def _MixDistances(weights: npt.NDArray, palette: npt.NDArray, target: npt.NDArray) -> npt.NDArray:
    """
    Distances from the target for a batch of weight combinations.

    Mirrors MixRGB row by row, accumulating color by color in palette order so
    the truncated channels match exactly. Unmixable rows get an infinite distance.

    :param weights: MxN weight combinations
    :param palette: Nx3 palette RGB values
    :param target: length 3 target RGB
    """
    sums = np.zeros((weights.shape[0], 3))
    totals = np.zeros(weights.shape[0])
    for i in range(palette.shape[0]):
        sums += weights[:, i:i + 1] * palette[i]
        totals += weights[:, i]

    valid = (totals != 0) & np.all(weights >= 0, axis=1)
    mixed = np.zeros_like(sums)
    mixed[valid] = np.trunc(sums[valid] / totals[valid][:, np.newaxis])
    distances = np.sqrt(np.sum((mixed - target) ** 2, axis=1))
    distances[~valid] = np.inf
    return distances


def _GridSearch(grids: List[Sequence[float]], palette: npt.NDArray, target: npt.NDArray,
                best_weights: List[float], best_distance: float,
                desc: str, verbose: bool) -> Tuple[List[float], float]:
    """
    Try every combination of the per-color weight grids.

    Combinations are visited odometer style, the last color's weight changing
    fastest. A combination only replaces the current best if it is strictly
    closer, so the first of several equally good combinations wins.
    """
    combinations = product(*grids)
    with tqdm(total=math.prod(len(grid) for grid in grids), desc=desc, disable=not verbose) as progress:
        while True:
            chunk = np.array(list(islice(combinations, CHUNK_SIZE)), dtype=float)
            if chunk.size == 0:
                break
            distances = _MixDistances(chunk, palette, target)
            idx = int(np.argmin(distances))
            if distances[idx] < best_distance:
                best_distance = float(distances[idx])
                best_weights = chunk[idx].tolist()
            progress.update(chunk.shape[0])
    return best_weights, best_distance


def RefinementGrid(weight: float) -> Tuple[float, ...]:
    """Local grid around a coarse weight. A coarse 0 gets a grid of small weights instead."""
    if weight == 0:
        return ZERO_REFINEMENT_WEIGHTS
    return tuple(weight + offset for offset in REFINEMENT_OFFSETS)


def GetMixingWeights(colors: Sequence[MunsellColor], target: MunsellColor | None,
                     converter: MunsellConverter, verbose: bool = False) -> MixingWeightsResult:
    """
    Find weights for the palette colors whose RGB mix lands closest to the target.

    Two exhaustive grid searches run back to back. The coarse pass gives every
    color a weight from (0, 2, 5, 8, 14). The refinement pass then searches a
    five point grid around each coarse weight, starting from the coarse best so
    it can only improve on it. Each pass evaluates 5^N combinations, so callers
    must keep the palette small.

    Args:
        colors (Sequence[MunsellColor]): the palette
        target (MunsellColor): the color to approximate
        converter (MunsellConverter): converter used to project colors to RGB
        verbose (bool, optional): show search progress. Defaults to False.

    Returns:
        MixingWeightsResult: InvalidInput without a target or palette, NoSolution if
            nothing could be mixed, otherwise Solved with one weight per palette color
    """
    if target is None or len(colors) == 0:
        return MixingWeightsResult(MixStatus.InvalidInput, [])

    target_rgb = target.to_rgb(converter).to_array().astype(float)
    palette = np.array([color.to_rgb(converter).to_array() for color in colors], dtype=float)

    best_weights = [0.0] * len(colors)
    best_weights, best_distance = _GridSearch([COARSE_WEIGHTS] * len(colors), palette, target_rgb,
                                              best_weights, np.inf, "Coarse weights", verbose)
    if math.isinf(best_distance):
        return MixingWeightsResult(MixStatus.NoSolution, [])

    refinement = [RefinementGrid(weight) for weight in best_weights]
    best_weights, best_distance = _GridSearch(refinement, palette, target_rgb,
                                              best_weights, best_distance, "Refined weights", verbose)

    if verbose:
        print(f"Best mix is {best_distance:.2f} away from {target} with weights {best_weights}")
    return MixingWeightsResult(MixStatus.Solved, best_weights, best_distance)
