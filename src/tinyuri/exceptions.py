"""src/tinyuri/exceptions.py

TinyURI Exceptions hierarchy.
"""


class TinyURIError(Exception):
    """Base exception for all TinyURI errors."""


class InvalidInputError(TinyURIError, ValueError):
    """
    A required argument was missing (``None``) or had an unusable type.
    """

    def __init__(self, message: str = "Required argument is missing"):
        super().__init__(message)


class EncodingError(TinyURIError):
    """
    The configured character encoding is not supported, or the value
    cannot be represented in it.
    """

    def __init__(self, message: str = "Unsupported character encoding"):
        super().__init__(message)


class MalformedURIError(TinyURIError, ValueError):
    """The string could not be parsed as a URI."""

    def __init__(self, message: str = "Malformed URI"):
        super().__init__(message)
