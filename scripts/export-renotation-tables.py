import argparse
import os

from MunsellSpectrum.Utils.IO import SaveMunsellToRGBRows, SaveRGBToMunsellRows
from MunsellSpectrum.Utils.Renotation import GenerateMunsellToRGBRows, DeriveRGBToMunsellRows

parser = argparse.ArgumentParser(description='Write Munsell <-> RGB CSV tables built from the renotation data')
parser.add_argument('--output_dir', type=str, default='./tables', help='Directory to write the two CSV files to')
parser.add_argument("--verbose", action="store_true", help="Verbose output")
args = parser.parse_args()

os.makedirs(args.output_dir, exist_ok=True)
rows = GenerateMunsellToRGBRows(verbose=args.verbose)
SaveMunsellToRGBRows(rows, os.path.join(args.output_dir, 'Munsell2RGB.csv'))
SaveRGBToMunsellRows(DeriveRGBToMunsellRows(rows), os.path.join(args.output_dir, 'RGB2Munsell.csv'))
print(f"Wrote {len(rows)} rows to {args.output_dir}")
