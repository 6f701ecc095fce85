"""Exception hierarchy.

Every error raised by the pipeline derives from :class:`IdenticonError`,
which is itself a ``ValueError`` so callers catching ``ValueError`` keep
working.
"""


class IdenticonError(ValueError):
    """Base class for identicon pipeline errors."""


class PreconditionError(IdenticonError):
    """A stage received an ``Image`` missing a field it depends on.

    Indicates stages were composed in the wrong order rather than bad user
    input.
    """


class RenderError(PreconditionError):
    """The rasterizer was invoked without ``color`` or ``pixel_map``."""


class InputEncodingError(IdenticonError):
    """The input string cannot be encoded with the requested encoding."""
