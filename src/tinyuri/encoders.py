"""src/tinyuri/encoders.py

Entity encoders for TinyURI.

An entity encoder turns a single scalar into the text that is stored in the
builder. :class:`PercentEncoder` applies form-style percent-encoding and
:class:`RawEncoder` passes values through untouched. :class:`URLEncoder`
layers sequence and mapping support on top of either one.
"""

import logging
import urllib.parse
from typing import Any, Dict, Iterable, List, Mapping, Protocol

from tinyuri.exceptions import EncodingError
from tinyuri.utils.validators import require

__all__ = ["EntityEncoder", "PercentEncoder", "RawEncoder", "URLEncoder"]

logger = logging.getLogger(__name__)

# Characters left alone besides ASCII letters, digits and "_.-~".
_SAFE = "*"


class EntityEncoder(Protocol):
    """Encodes one scalar value into URI text."""

    def encode(self, value: Any) -> str:
        """Return the encoded text form of ``value``."""


class PercentEncoder:
    """
    Percent-encoder for URI components.

    Spaces become ``+`` and every byte outside the unreserved set is written
    as ``%XX`` after encoding the text with ``charset``.
    """

    __slots__ = ("charset",)

    def __init__(self, charset: str = "utf-8"):
        self.charset = require(charset, "charset")

    def encode(self, value: Any) -> str:
        """
        Percent-encode ``str(value)``.

        Raises:
            InvalidInputError: If ``value`` is None.
            EncodingError: If the charset is unknown or cannot represent
                the value.
        """
        text = str(require(value, "value"))
        try:
            return urllib.parse.quote_plus(text, safe=_SAFE, encoding=self.charset)
        except LookupError as e:
            logger.debug("Unknown charset %r", self.charset)
            raise EncodingError(f"Unsupported charset: {self.charset}") from e
        except UnicodeEncodeError as e:
            raise EncodingError(
                f"Cannot encode {text!r} with charset {self.charset}"
            ) from e


class RawEncoder:
    """Encoder that stores values as-is."""

    __slots__ = ()

    def encode(self, value: Any) -> str:
        """Return ``str(value)`` unchanged."""
        return str(require(value, "value"))


class URLEncoder:
    """Applies an :class:`EntityEncoder` to scalars, sequences and mappings."""

    __slots__ = ("entity_encoder",)

    def __init__(self, entity_encoder: EntityEncoder):
        self.entity_encoder = require(entity_encoder, "entity_encoder")

    def encode(self, value: Any) -> str:
        return self.entity_encoder.encode(value)

    def encode_all(self, values: Iterable[Any]) -> List[str]:
        """Encode each item, preserving order."""
        return [self.encode(value) for value in require(values, "values")]

    def encode_mapping(self, mapping: Mapping[str, Any]) -> Dict[str, str]:
        """
        Encode keys and values independently.

        When two keys encode to the same text the later one wins.
        """
        return {
            self.encode(key): self.encode(value)
            for key, value in require(mapping, "mapping").items()
        }
