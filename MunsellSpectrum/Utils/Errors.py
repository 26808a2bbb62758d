class MunsellError(Exception):
    """Base class for every error raised by MunsellSpectrum."""


class InvalidHue(MunsellError, ValueError):
    """Unknown hue prefix, or a hue number outside [0, 10]."""


class OutOfRange(MunsellError, ValueError):
    """A total hue value outside [0, 100], or a non-finite value or chroma."""


class InvalidArguments(MunsellError, ValueError):
    """Empty or mismatched color/weight lists handed to the mixing routines."""


class UnknownHue(MunsellError, LookupError):
    """No hue in the lookup table shares the requested prefix."""


class EmptyTable(MunsellError, ValueError):
    """A lookup table ended up with no usable rows."""


class ConverterNotLoaded(MunsellError, RuntimeError):
    """A chromatic color was projected without a converter to project it through."""
