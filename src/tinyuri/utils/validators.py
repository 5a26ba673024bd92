"""utils/validators.py

Argument validation utilities for TinyURI.
"""

from typing import Optional, TypeVar

from tinyuri.exceptions import InvalidInputError

_T = TypeVar("_T")


def require(value: Optional[_T], name: str) -> _T:
    """Return ``value`` or raise InvalidInputError if it is ``None``."""
    if value is None:
        raise InvalidInputError(f"{name} must not be None")
    return value


def require_int(value: object, name: str) -> int:
    """Integer check that rejects ``bool``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(
            f"{name} must be an int, got {type(value).__name__}"
        )
    return value
