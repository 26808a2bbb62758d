import os
from typing import Any, Callable, Dict, Generic, Iterable, Iterator, List, Mapping, Sequence, Tuple, TypeVar

from tqdm import tqdm

from MunsellSpectrum.Hue import Hue
from MunsellSpectrum.MunsellColor import MunsellColor
from MunsellSpectrum.Utils.CustomTypes import RGB
from MunsellSpectrum.Utils.Errors import EmptyTable, UnknownHue
from MunsellSpectrum.Utils.IO import (
    MunsellToRGBRow, RGBToMunsellRow, LoadMunsellToRGBRows, LoadRGBToMunsellRows
)

V = TypeVar("V")


def ClosestIntKey(target: float, keys: Sequence[int] | Mapping[int, Any]) -> int:
    """
    Pick the key for an integer table level.

    The truncated target wins outright when present (so 4.7 resolves to 4 if 4
    is sampled). Otherwise the key with the smallest absolute difference to the
    untruncated target is used; on ties the key seen first is kept.
    """
    exact = int(target)
    if exact in keys:
        return exact

    closest = None
    for key in keys:
        if closest is None or abs(target - closest) > abs(target - key):
            closest = key
    return closest


def ClosestHue(target: Hue, hues: Sequence[Hue] | Mapping[Hue, Any]) -> Hue:
    """
    Pick the table hue for a requested hue.

    Exact matches win; otherwise only hues sharing the target's prefix are
    considered and the one with the nearest number is used, ties keeping the
    earliest.

    Raises:
        UnknownHue: no table hue shares the target's prefix
    """
    if target in hues:
        return target

    closest = None
    for hue in hues:
        if hue.prefix != target.prefix:
            continue
        if closest is None or abs(target.number - closest.number) > abs(target.number - hue.number):
            closest = hue

    if closest is None:
        raise UnknownHue(f"No hue with prefix {target.prefix!r} in the table (asked for {target})")
    return closest


class NearestKeyTable(Generic[V]):
    """
    A three level lookup table that snaps each level to the nearest sampled key.

    Entries live in a single dict keyed by (k1, k2, k3). An insertion-ordered
    index k1 -> k2 -> [k3, ...] sits beside it for the nearest-key fallback, so
    tie-breaks are fully determined by the order rows were given in.
    """

    def __init__(self, rows: Iterable[Tuple[Any, Any, Any, V]],
                 first_level: Callable[[Any, Mapping], Any] = ClosestIntKey,
                 desc: str | None = None, verbose: bool = False):
        """
        Args:
            rows (Iterable): (k1, k2, k3, value) tuples. The first row for a key wins.
            first_level (Callable): nearest-key selector for the first level
            desc (str, optional): progress bar label
            verbose (bool, optional): show a progress bar while building. Defaults to False.
        """
        self._first_level = first_level
        self._entries: Dict[Tuple[Any, Any, Any], V] = {}
        self._index: Dict[Any, Dict[Any, List[Any]]] = {}
        self.duplicates = 0

        for k1, k2, k3, value in tqdm(rows, desc=desc, disable=not verbose):
            key = (k1, k2, k3)
            if key in self._entries:
                self.duplicates += 1
                continue
            self._entries[key] = value
            self._index.setdefault(k1, {}).setdefault(k2, []).append(k3)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Tuple[Any, Any, Any]) -> bool:
        return key in self._entries

    def first_keys(self) -> List[Any]:
        return list(self._index)

    def resolve_first(self, k1) -> Any:
        assert self._entries, "Lookup against an empty table"
        return self._first_level(k1, self._index)

    def level(self, k1) -> Iterator[Tuple[Any, List[Any]]]:
        """Yield (k2, [k3, ...]) for an existing first level key, in insertion order."""
        for k2, k3s in self._index[k1].items():
            yield k2, list(k3s)

    def lookup(self, k1, k2, k3) -> V:
        first = self.resolve_first(k1)
        second = ClosestIntKey(k2, self._index[first])
        third = ClosestIntKey(k3, self._index[first][second])
        return self._entries[(first, second, third)]


class MunsellConverter:
    """
    Bidirectional Munsell <-> RGB converter backed by two sampled tables.

    Munsell -> RGB is keyed hue -> value -> chroma, RGB -> Munsell is keyed
    red -> green -> blue. Each level falls back to the nearest sampled key, so
    any request resolves to some tabulated entry; nothing is interpolated.
    A converter never changes after construction.
    """

    def __init__(self, munsell_to_rgb_rows: Iterable[MunsellToRGBRow],
                 rgb_to_munsell_rows: Iterable[RGBToMunsellRow],
                 verbose: bool = False):
        """
        Args:
            munsell_to_rgb_rows (Iterable[MunsellToRGBRow]): (hue, value, chroma, rgb) rows.
                Rows with a value or chroma of 0 are sentinel rows and are dropped.
            rgb_to_munsell_rows (Iterable[RGBToMunsellRow]): (red, green, blue, color) rows
            verbose (bool, optional): report progress while building. Defaults to False.

        Raises:
            EmptyTable: either table has no usable rows
        """
        self.verbose = verbose
        self.rejected = 0

        self._munsell_to_rgb: NearestKeyTable[RGB] = NearestKeyTable(
            self._drop_sentinels(munsell_to_rgb_rows), first_level=ClosestHue,
            desc="Munsell -> RGB", verbose=verbose)
        self._rgb_to_munsell: NearestKeyTable[MunsellColor] = NearestKeyTable(
            rgb_to_munsell_rows, desc="RGB -> Munsell", verbose=verbose)

        if len(self._munsell_to_rgb) == 0:
            raise EmptyTable("Munsell -> RGB table has no usable rows")
        if len(self._rgb_to_munsell) == 0:
            raise EmptyTable("RGB -> Munsell table has no usable rows")

        if verbose:
            print(f"Loaded {len(self._munsell_to_rgb)} Munsell -> RGB entries "
                  f"({self.rejected} sentinel rows, {self._munsell_to_rgb.duplicates} duplicates skipped)")
            print(f"Loaded {len(self._rgb_to_munsell)} RGB -> Munsell entries "
                  f"({self._rgb_to_munsell.duplicates} duplicates skipped)")

    def _drop_sentinels(self, rows: Iterable[MunsellToRGBRow]) -> Iterator[MunsellToRGBRow]:
        for hue, value, chroma, rgb in rows:
            if value == 0 or chroma == 0:
                self.rejected += 1
                continue
            yield hue, value, chroma, rgb

    @classmethod
    def from_csv(cls, munsell_to_rgb_path: str, rgb_to_munsell_path: str, verbose: bool = False) -> 'MunsellConverter':
        """Build a converter from the two CSV tables, see Utils.IO for the layouts."""
        return cls(LoadMunsellToRGBRows(munsell_to_rgb_path),
                   LoadRGBToMunsellRows(rgb_to_munsell_path), verbose=verbose)

    @classmethod
    def from_renotation(cls, verbose: bool = False) -> 'MunsellConverter':
        """Build a converter from the Munsell renotation data shipped with colour-science."""
        from MunsellSpectrum.Utils.Renotation import GenerateMunsellToRGBRows, DeriveRGBToMunsellRows

        forward = GenerateMunsellToRGBRows(verbose=verbose)
        return cls(forward, DeriveRGBToMunsellRows(forward), verbose=verbose)

    def from_munsell(self, color: MunsellColor) -> RGB:
        """
        Closest tabulated RGB for a Munsell color.

        Raises:
            UnknownHue: the table has no hue with the color's prefix
        """
        return self._munsell_to_rgb.lookup(color.hue, color.value, color.chroma)

    def from_rgb(self, rgb: RGB) -> MunsellColor:
        """Closest tabulated Munsell color for an RGB triplet."""
        return self._rgb_to_munsell.lookup(rgb.red, rgb.green, rgb.blue)

    def list_hues(self) -> List[Hue]:
        """Every hue in the Munsell -> RGB table, in table order."""
        return self._munsell_to_rgb.first_keys()

    def color_grid(self, hue: Hue) -> List[List[MunsellColor]]:
        """
        The value/chroma slice of a hue, laid out for display.

        Rows go from the highest value at the top to the lowest at the bottom.
        Every row starts with a gray, then lists the hue's chromas for that
        value in table order (ascending when the source table is sorted).
        """
        table_hue = self._munsell_to_rgb.resolve_first(hue)
        grid: List[List[MunsellColor]] = []
        for count, (value, chromas) in enumerate(self._munsell_to_rgb.level(table_hue)):
            row = [MunsellColor.n(count + 1)]
            row += [MunsellColor(table_hue, value, chroma) for chroma in chromas]
            # table order is ascending value, the grid wants it descending
            grid.insert(0, row)
        return grid

    def highest_chroma(self, hue: Hue) -> MunsellColor:
        """The most saturated sampled color of a hue. Ties go to the last one seen."""
        table_hue = self._munsell_to_rgb.resolve_first(hue)
        highest = None
        for value, chromas in self._munsell_to_rgb.level(table_hue):
            for chroma in chromas:
                if highest is None or chroma >= highest.chroma:
                    highest = MunsellColor(table_hue, value, chroma)
        return highest

    def __repr__(self) -> str:
        return (f"MunsellConverter({len(self._munsell_to_rgb)} Munsell -> RGB entries, "
                f"{len(self._rgb_to_munsell)} RGB -> Munsell entries)")


class ConverterFactory:
    """
    Lazily builds converters and keeps one per table source for the process.

    Table paths come from the arguments, then from the MUNSELL_TO_RGB_CSV and
    RGB_TO_MUNSELL_CSV environment variables. With neither, the converter is
    built from the colour-science renotation data.
    """
    _cache: Dict[Tuple[str | None, str | None], MunsellConverter] = {}

    @staticmethod
    def get_object(munsell_to_rgb_path: str | None = None, rgb_to_munsell_path: str | None = None,
                   verbose: bool = False) -> MunsellConverter:
        munsell_to_rgb_path = munsell_to_rgb_path or os.environ.get("MUNSELL_TO_RGB_CSV")
        rgb_to_munsell_path = rgb_to_munsell_path or os.environ.get("RGB_TO_MUNSELL_CSV")
        if (munsell_to_rgb_path is None) != (rgb_to_munsell_path is None):
            raise ValueError("Both table paths must be given, or neither")

        key = (munsell_to_rgb_path, rgb_to_munsell_path)
        if key not in ConverterFactory._cache:
            if munsell_to_rgb_path is None:
                ConverterFactory._cache[key] = MunsellConverter.from_renotation(verbose=verbose)
            else:
                ConverterFactory._cache[key] = MunsellConverter.from_csv(
                    munsell_to_rgb_path, rgb_to_munsell_path, verbose=verbose)
        return ConverterFactory._cache[key]

    @staticmethod
    def clear() -> None:
        ConverterFactory._cache.clear()
