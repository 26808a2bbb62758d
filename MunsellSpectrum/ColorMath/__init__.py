from .Harmony import GetComplement, GetAnalogous, GetSplitComplementary
from .Mixing import Mix, MixRGB, ColorDistance, GetMixingWeights
