import argparse

from MunsellSpectrum.Converter import ConverterFactory
from MunsellSpectrum.ColorMath.Mixing import GetMixingWeights, Mix
from MunsellSpectrum.Utils.CustomTypes import MixStatus
from MunsellSpectrum.Utils.ParserOptions import AddTableArgs, AddMixingArgs

parser = argparse.ArgumentParser(description='Find how much of each palette color to mix to reach a target color')
AddTableArgs(parser)
AddMixingArgs(parser)
args = parser.parse_args()

if len(args.palette) > args.max_palette_size:
    parser.error(f"Palette has {len(args.palette)} colors, the limit is {args.max_palette_size}")

converter = ConverterFactory.get_object(args.munsell_to_rgb, args.rgb_to_munsell, verbose=args.verbose)
result = GetMixingWeights(args.palette, args.target, converter, verbose=args.verbose)

if result.status != MixStatus.Solved:
    print(f"Could not mix {args.target} from the palette ({result.status.name})")
else:
    for color, weight in zip(args.palette, result.weights):
        print(f"{str(color):>16}  x {weight:g}")
    print(f"Mix: {Mix(args.palette, result.weights, converter)} (RGB distance {result.distance:.2f} from {args.target})")
