from typing import Any


class DateScalarError(Exception):
    """A value cannot be converted by the Date scalar."""

    def __init__(self, message: str, value: Any):
        """Initialize a new instance of DateScalarError."""
        super().__init__(message)
        self.value = value


class InvalidTypeError(DateScalarError, TypeError):
    """The value has the wrong type, e.g. it is neither a string nor a date."""


class InvalidValueError(DateScalarError, ValueError):
    """The value has the right type but does not name a real calendar date."""
