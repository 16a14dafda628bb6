class FormatError(ValueError):
    """Raised when a code example's source text can't be split as expected."""


class UnknownTypeError(ValueError):
    """Raised when a function's return type has no documentation page."""
