class AxomaticError(Exception):
    """Base class for errors raised by axomatic."""


class MissingArgumentError(AxomaticError, TypeError):
    """A required axis was not supplied."""


class InvalidArgumentError(AxomaticError, ValueError):
    """An argument has a value the helpers cannot work with."""
