import os
import warnings
from typing import Iterable, List, Sequence, Tuple

import pandas as pd

from MunsellSpectrum.Hue import Hue
from MunsellSpectrum.MunsellColor import MunsellColor
from MunsellSpectrum.Utils.CustomTypes import RGB

# (hue, value, chroma, rgb)
MunsellToRGBRow = Tuple[Hue, int, int, RGB]
# (red, green, blue, color)
RGBToMunsellRow = Tuple[int, int, int, MunsellColor]

MUNSELL_TO_RGB_COLUMNS = 9
RGB_TO_MUNSELL_COLUMNS = 6


def ParseMunsellToRGBRow(fields: Sequence[str]) -> MunsellToRGBRow:
    """
    Parse one Munsell -> RGB record.

    Layout: (ignored, ignored, hue prefix, hue number, value, chroma, red, green, blue).
    Sentinel rows (value or chroma of 0) parse fine; the converter drops them.

    Raises:
        ValueError: a field is missing or malformed (InvalidHue is a ValueError too)
    """
    if len(fields) < MUNSELL_TO_RGB_COLUMNS:
        raise ValueError(f"Expected {MUNSELL_TO_RGB_COLUMNS} fields, got {len(fields)}")
    hue = Hue(str(fields[2]).strip(), float(fields[3]))
    value = int(fields[4])
    chroma = int(fields[5])
    rgb = RGB(int(fields[6]), int(fields[7]), int(fields[8]))
    return hue, value, chroma, rgb


def ParseRGBToMunsellRow(fields: Sequence[str]) -> RGBToMunsellRow:
    """
    Parse one RGB -> Munsell record.

    Layout: (red, green, blue, hue name, value, chroma).

    Raises:
        ValueError: a field is missing or malformed
    """
    if len(fields) < RGB_TO_MUNSELL_COLUMNS:
        raise ValueError(f"Expected {RGB_TO_MUNSELL_COLUMNS} fields, got {len(fields)}")
    rgb = RGB(int(fields[0]), int(fields[1]), int(fields[2]))
    color = MunsellColor(Hue.from_name(str(fields[3])), float(fields[4]), float(fields[5]))
    return rgb.red, rgb.green, rgb.blue, color


def _ParseRecords(records: Iterable[Sequence[str]], parse, source: str) -> List:
    rows = []
    for line, fields in enumerate(records, start=2):  # line 1 is the header
        try:
            rows.append(parse(fields))
        except ValueError as e:
            warnings.warn(f"Skipping malformed row {line} of {source}: {e}")
    return rows


def _ReadRecords(path: str) -> List[List[str]]:
    if not os.path.exists(path):
        raise FileNotFoundError(f"Color table not found: {path}")
    # everything as text, blanks stay empty strings so the row parsers report them
    try:
        df = pd.read_csv(path, header=0, dtype=str, keep_default_na=False,
                         skipinitialspace=True, on_bad_lines="warn")
    except pd.errors.EmptyDataError:
        warnings.warn(f"Color table {path} is empty")
        return []
    return df.values.tolist()


def ParseMunsellToRGBRecords(records: Iterable[Sequence[str]], source: str = "<memory>") -> List[MunsellToRGBRow]:
    """Parse already-split Munsell -> RGB records, skipping malformed ones with a warning."""
    return _ParseRecords(records, ParseMunsellToRGBRow, source)


def ParseRGBToMunsellRecords(records: Iterable[Sequence[str]], source: str = "<memory>") -> List[RGBToMunsellRow]:
    """Parse already-split RGB -> Munsell records, skipping malformed ones with a warning."""
    return _ParseRecords(records, ParseRGBToMunsellRow, source)


def LoadMunsellToRGBRows(path: str) -> List[MunsellToRGBRow]:
    """
    Load the Munsell -> RGB table from a CSV file with a header row.

    Args:
        path (str): path to the CSV file

    Returns:
        List[MunsellToRGBRow]: parsed rows in file order
    """
    return ParseMunsellToRGBRecords(_ReadRecords(path), source=path)


def LoadRGBToMunsellRows(path: str) -> List[RGBToMunsellRow]:
    """
    Load the RGB -> Munsell table from a CSV file with a header row.

    Args:
        path (str): path to the CSV file

    Returns:
        List[RGBToMunsellRow]: parsed rows in file order
    """
    return ParseRGBToMunsellRecords(_ReadRecords(path), source=path)


def SaveMunsellToRGBRows(rows: Iterable[MunsellToRGBRow], path: str) -> None:
    """Write rows in the layout LoadMunsellToRGBRows reads back."""
    records = [[i, f"{hue} {int(value)}/{int(chroma)}", hue.prefix, hue.number, int(value), int(chroma),
                rgb.red, rgb.green, rgb.blue]
               for i, (hue, value, chroma, rgb) in enumerate(rows)]
    df = pd.DataFrame(records, columns=["index", "name", "h_prefix", "h_number", "value", "chroma",
                                        "red", "green", "blue"])
    df.to_csv(path, index=False)


def SaveRGBToMunsellRows(rows: Iterable[RGBToMunsellRow], path: str) -> None:
    """Write rows in the layout LoadRGBToMunsellRows reads back."""
    records = [[r, g, b, str(color.hue), color.value, color.chroma] for r, g, b, color in rows]
    df = pd.DataFrame(records, columns=["red", "green", "blue", "hue", "value", "chroma"])
    df.to_csv(path, index=False)
