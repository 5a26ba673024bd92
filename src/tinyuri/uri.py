"""src/tinyuri/uri.py

URI value type and parser for TinyURI.
"""

import logging
import re
import urllib.parse
from typing import Any

from tinyuri.exceptions import MalformedURIError
from tinyuri.utils.validators import require

__all__ = ["URI", "parse_uri"]

logger = logging.getLogger(__name__)

# Unreserved, reserved (gen-delims and sub-delims) and the escape character.
_URI_CHARS_RE = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]*")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")


class URI:
    """
    Parsed URI.

    Components are kept exactly as they appear in the source string; nothing
    is percent-decoded or case-normalized. Absent string components are
    ``""`` and an absent port is ``-1``.
    """

    __slots__ = (
        "_uri",
        "parsed",
        "scheme",
        "host",
        "port",
        "path",
        "query",
        "fragment",
    )

    def __init__(self, uri: str):
        uri = require(uri, "uri")
        _check_syntax(uri)
        self._uri = uri

        try:
            self.parsed = urllib.parse.urlsplit(uri)
            port = self.parsed.port
        except ValueError as e:
            logger.debug("urlsplit rejected %r: %s", uri, e)
            raise MalformedURIError(f"Malformed URI {uri!r}: {e}") from e

        self.scheme = self.parsed.scheme
        self.host = _host_of(self.parsed.netloc)
        self.port = -1 if port is None else port
        self.path = self.parsed.path
        self.query = self.parsed.query
        self.fragment = self.parsed.fragment

        if "#" in self.fragment:
            raise MalformedURIError(f"Malformed URI {uri!r}: '#' in fragment")

    def __str__(self) -> str:
        return self._uri

    def __repr__(self) -> str:
        return f"URI({str(self)!r})"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, URI):
            return str(self) == str(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))


def parse_uri(uri: str) -> URI:
    """
    Parse ``uri`` into a :class:`URI`.

    Raises:
        InvalidInputError: If ``uri`` is None.
        MalformedURIError: If ``uri`` is not a syntactically valid URI.
    """
    return URI(uri)


def _check_syntax(uri: str) -> None:
    if not _URI_CHARS_RE.fullmatch(uri):
        raise MalformedURIError(f"Illegal character in URI {uri!r}")

    if _BAD_ESCAPE_RE.search(uri):
        raise MalformedURIError(f"Malformed escape pair in URI {uri!r}")

    head = re.split(r"[/?#]", uri, maxsplit=1)[0]
    if ":" in head and not _SCHEME_RE.fullmatch(head.partition(":")[0]):
        raise MalformedURIError(f"Illegal scheme name in URI {uri!r}")


def _host_of(netloc: str) -> str:
    hostinfo = netloc.rpartition("@")[2]
    if hostinfo.startswith("["):
        return hostinfo[: hostinfo.find("]") + 1]
    return hostinfo.partition(":")[0]
