import argparse

from MunsellSpectrum.Converter import ConverterFactory
from MunsellSpectrum.Palette import Palette
from MunsellSpectrum.Utils.ImageUtils import PosterizeImage
from MunsellSpectrum.Utils.ParserOptions import AddTableArgs, AddImageArgs

parser = argparse.ArgumentParser(description='Repaint an image using only the colors of a palette')
AddTableArgs(parser)
AddImageArgs(parser)
args = parser.parse_args()

converter = ConverterFactory.get_object(args.munsell_to_rgb, args.rgb_to_munsell, verbose=args.verbose)
palette = Palette(converter)
for color in args.palette:
    palette.add_color(color)

PosterizeImage(args.input, palette, converter, verbose=args.verbose).save(args.output)
print(f"Saved posterized image to {args.output}")
