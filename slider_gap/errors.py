class SliderGapError(ValueError):
    """Base class for every failure raised while locating a slider gap."""
    pass


class InvalidBufferFormat(SliderGapError):
    """The pixel data is not a row-major RGBA buffer of the declared size."""
    pass


class NoCandidatesFound(SliderGapError):
    """No column carries a full-line or notch-line signature."""
    pass


class NoQualifyingPair(SliderGapError):
    """Candidate columns exist but no two of them are a block width apart."""
    pass


class DebugRenderError(SliderGapError):
    """The debug overlay could not be drawn."""
    pass
