"""Exception hierarchy for boxingpython.base module."""


class BoxingPythonError(Exception):
    """Base exception for all boxingpython errors."""

    pass


class InputValidationError(BoxingPythonError):
    """Raised when an uploaded video payload is missing or unusable."""

    pass
