class MaiError(Exception):
    """Base class for Mai errors."""


class GenerationError(MaiError):
    """The remote generator could not produce a usable H/P/F response."""
