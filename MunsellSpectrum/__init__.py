# MunsellSpectrum - Munsell <-> RGB conversion, color harmonies and mixing weights
from .Hue import Hue, HUE_PREFIXES
from .MunsellColor import MunsellColor
from .Converter import MunsellConverter, ConverterFactory, NearestKeyTable
from .Palette import Palette
from .ColorMath.Harmony import GetComplement, GetAnalogous, GetSplitComplementary
from .ColorMath.Mixing import Mix, MixRGB, ColorDistance, GetMixingWeights
from .Utils.CustomTypes import RGB, MixStatus, MixingWeightsResult
from .Utils.Errors import *
