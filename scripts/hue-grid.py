import argparse

from MunsellSpectrum.Converter import ConverterFactory
from MunsellSpectrum.Hue import Hue
from MunsellSpectrum.Utils.ParserOptions import AddTableArgs

parser = argparse.ArgumentParser(description='Print the value/chroma grid of a hue, or list every hue in the table')
AddTableArgs(parser)
parser.add_argument('--hue', type=Hue.from_name, required=False, default=None,
                    help='Hue to print, e.g. 5R. Lists the available hues when omitted')
args = parser.parse_args()

converter = ConverterFactory.get_object(args.munsell_to_rgb, args.rgb_to_munsell, verbose=args.verbose)

if args.hue is None:
    for hue in converter.list_hues():
        print(f"{str(hue):>6}  most saturated: {converter.highest_chroma(hue)}")
else:
    for row in converter.color_grid(args.hue):
        print("  ".join(f"{str(color):<14}{color.to_rgb(converter).to_hex()}" for color in row))
