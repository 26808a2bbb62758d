import argparse

from MunsellSpectrum.Hue import Hue
from MunsellSpectrum.MunsellColor import MunsellColor


def ParseMunsellColor(text: str) -> MunsellColor:
    """argparse type for colors written as "<hue> <value>/<chroma>", e.g. "2.5PB 5/10" or "N 4"."""
    text = text.strip()
    try:
        if text.upper().startswith("N"):
            return MunsellColor.n(float(text[1:].strip().lstrip("/") or 0))
        hue_name, rest = text.split(maxsplit=1)
        value, chroma = rest.split("/")
        return MunsellColor(Hue.from_name(hue_name), float(value), float(chroma))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Expected a color like '2.5PB 5/10', got {text!r}") from e


def AddTableArgs(parser):
    # Conversion tables; both default to the renotation data when omitted
    parser.add_argument('--munsell_to_rgb', type=str, required=False, default=None,
                        help='CSV with the Munsell -> RGB table')
    parser.add_argument('--rgb_to_munsell', type=str, required=False, default=None,
                        help='CSV with the RGB -> Munsell table')
    parser.add_argument("--verbose", action="store_true", help="Verbose output")


def AddMixingArgs(parser):
    parser.add_argument('--palette', nargs='+', type=ParseMunsellColor, required=True,
                        help='Palette colors, e.g. "7.5G 5/16" "7.5B 4/14"')
    parser.add_argument('--target', type=ParseMunsellColor, required=True, help='Color to mix towards')
    parser.add_argument('--max_palette_size', type=int, default=8,
                        help='Refuse palettes larger than this; the search is 5^N per pass')


def AddImageArgs(parser):
    parser.add_argument('--input', type=str, required=True, help='Image to posterize')
    parser.add_argument('--output', type=str, required=True, help='Where to write the posterized image')
    parser.add_argument('--palette', nargs='+', type=ParseMunsellColor, required=True,
                        help='Palette colors to posterize with')
