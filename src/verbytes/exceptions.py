"""Error types raised by verbytes."""


class AssertionFailure(AssertionError):
    """Raised when an asserted condition does not hold.

    Subclasses ``AssertionError`` so test runners report it as a test
    failure rather than an error.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidUsage(ValueError):
    """Raised when an assertion is called with structurally invalid arguments."""
