"""Exception hierarchy shared by the whole package."""


class ColorError(Exception):
    """Base class for every error raised by prismatica."""


class InvalidArgument(ColorError, ValueError):
    """A caller passed a value outside an operation's domain (bad steps, sizes, seeds...)."""


class GradientError(InvalidArgument):
    """A gradient could not be built or rasterized from the given stops."""
