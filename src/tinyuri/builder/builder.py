"""src/tinyuri/builder/builder.py

Chainable URI builder.

The builder accumulates scheme, host, port, path segments, query parameters
and a fragment. Every mutator encodes its own input when it is called, so
the stored state is always in its final form and :meth:`URIBuilder.build`
only has to assemble it.
"""

# pylint: disable=too-many-instance-attributes,too-many-public-methods

import collections.abc
import logging
import re
from typing import Any, Dict, List, Mapping, Tuple, Union, cast

from tinyuri.encoders import PercentEncoder, RawEncoder, URLEncoder
from tinyuri.uri import URI, parse_uri
from tinyuri.utils.validators import require, require_int

__all__ = ["URIBuilder"]

logger = logging.getLogger(__name__)

_CONSECUTIVE_SLASHES_RE = re.compile(r"/{2,}")
_EMPTY = object()


def _segments(paths: Tuple[Any, ...]) -> List[Any]:
    """Accept either one iterable of segments or the segments themselves."""
    if len(paths) == 1:
        only = require(paths[0], "paths")
        if isinstance(only, collections.abc.Iterable) and not isinstance(
            only, (str, bytes)
        ):
            return list(only)
    return list(paths)


def _split_query(query: str) -> Dict[str, str]:
    params: Dict[str, str] = {}
    for term in query.split("&"):
        kv = term.split("=")
        # "key=" and "a=b=c" are ambiguous and dropped
        if len(kv) == 2 and kv[1]:
            params[kv[0]] = kv[1]
    return params


class URIBuilder:
    """
    Mutable, chainable URI builder.

    Example::

        from tinyuri import URIBuilder

        uri = (
            URIBuilder()
            .set_scheme("https")
            .set_host("example.com")
            .set_paths("api", "v1")
            .add_query_parameter("q", "hello world")
            .build()
        )
        str(uri)  # 'https://example.com/api/v1?q=hello+world'

    Attributes are exposed read-only; use the ``set_*``/``append_*``/``add_*``
    methods to change them. Each of those has a ``*_raw_*`` twin that
    stores its input without percent-encoding.
    """

    __slots__ = (
        "_scheme",
        "_host",
        "_port",
        "_paths",
        "_query_parameters",
        "_fragment",
        "_force_remove_trailing_slash",
        "_url_encoder",
        "_raw_url_encoder",
    )

    def __init__(
        self,
        uri: Union[str, URI, object] = _EMPTY,
        *,
        charset: str = "utf-8",
        force_remove_trailing_slash: bool = False,
    ) -> None:
        """
        Initialize a builder, optionally seeded from an existing URI.

        The seed is decomposed as-is; it is not percent-encoded.

        Args:
            uri: Seed URI string or :class:`URI`. Omit for an empty builder.
            charset: Target charset for percent-encoding.
            force_remove_trailing_slash: Initial value of the flag set by
                :meth:`force_remove_trailing_slash`.

        Raises:
            InvalidInputError: If ``uri`` is passed as None.
            MalformedURIError: If ``uri`` is a malformed string.
        """
        if uri is _EMPTY:
            uri = ""
        require(uri, "uri")
        seed = uri if isinstance(uri, URI) else parse_uri(cast(str, uri))

        self._scheme = seed.scheme
        self._host = seed.host
        self._port = seed.port
        self._fragment = seed.fragment
        self._paths: List[str] = seed.path.split("/") if seed.path else []
        self._query_parameters: Dict[str, str] = (
            _split_query(seed.query) if seed.query else {}
        )
        self._force_remove_trailing_slash = bool(force_remove_trailing_slash)

        self._url_encoder = URLEncoder(PercentEncoder(charset))
        self._raw_url_encoder = URLEncoder(RawEncoder())

    @property
    def scheme(self) -> str:
        return self._scheme

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        """Port number, ``-1`` when unspecified."""
        return self._port

    @property
    def paths(self) -> List[str]:
        return list(self._paths)

    @property
    def query_parameters(self) -> Dict[str, str]:
        """Query parameters in ascending key order."""
        return dict(sorted(self._query_parameters.items()))

    @property
    def fragment(self) -> str:
        return self._fragment

    @property
    def forces_trailing_slash_removal(self) -> bool:
        return self._force_remove_trailing_slash

    def set_scheme(self, scheme: str) -> "URIBuilder":
        """Set the scheme. It is not encoded."""
        self._scheme = require(scheme, "scheme")
        return self

    def set_host(self, host: str) -> "URIBuilder":
        """
        Set the host, percent-encoded.

        A trailing ``/`` is kept outside the encoding and makes
        :meth:`build` end the path with a slash.
        """
        return self._set_host(self._url_encoder, host)

    def set_raw_host(self, host: str) -> "URIBuilder":
        """Set the host without encoding."""
        return self._set_host(self._raw_url_encoder, host)

    def _set_host(self, url_encoder: URLEncoder, host: str) -> "URIBuilder":
        require(host, "host")
        is_trailing_slash = host.endswith("/")
        if is_trailing_slash:
            host = host[:-1]

        self._host = url_encoder.encode(host)
        if is_trailing_slash:
            self._host += "/"
        return self

    def set_port(self, port: int) -> "URIBuilder":
        """Set the port. A negative value means unspecified."""
        self._port = require_int(port, "port")
        return self

    def set_paths(self, *paths: Any) -> "URIBuilder":
        """
        Replace the path segments, percent-encoding each one.

        Accepts a single iterable (``set_paths(["a", "b"])``) or the segments
        as arguments (``set_paths("a", "b")``). Non-string segments are
        converted with ``str()``.
        """
        return self._set_paths(self._url_encoder, _segments(paths))

    def set_raw_paths(self, *paths: Any) -> "URIBuilder":
        """Replace the path segments without encoding."""
        return self._set_paths(self._raw_url_encoder, _segments(paths))

    def set_paths_by_string(self, paths: str) -> "URIBuilder":
        """Replace the path segments with ``paths`` split on ``/``."""
        return self._set_paths(self._url_encoder, require(paths, "paths").split("/"))

    def set_raw_paths_by_string(self, paths: str) -> "URIBuilder":
        """Same as :meth:`set_paths_by_string` without encoding."""
        return self._set_paths(
            self._raw_url_encoder, require(paths, "paths").split("/")
        )

    def _set_paths(self, url_encoder: URLEncoder, paths: List[Any]) -> "URIBuilder":
        encoded = url_encoder.encode_all(paths)
        self._paths.clear()
        self._paths.extend(encoded)
        return self

    def append_paths(self, *paths: Any) -> "URIBuilder":
        """Append path segments, percent-encoding each one."""
        return self._append_paths(self._url_encoder, _segments(paths))

    def append_raw_paths(self, *paths: Any) -> "URIBuilder":
        """Append path segments without encoding."""
        return self._append_paths(self._raw_url_encoder, _segments(paths))

    def append_paths_by_string(self, paths: str) -> "URIBuilder":
        """Append ``paths`` split on ``/``."""
        return self._append_paths(
            self._url_encoder, require(paths, "paths").split("/")
        )

    def append_raw_paths_by_string(self, paths: str) -> "URIBuilder":
        """Same as :meth:`append_paths_by_string` without encoding."""
        return self._append_paths(
            self._raw_url_encoder, require(paths, "paths").split("/")
        )

    def _append_paths(
        self, url_encoder: URLEncoder, paths: List[Any]
    ) -> "URIBuilder":
        self._paths.extend(url_encoder.encode_all(paths))
        return self

    def set_query_parameters(self, query_parameters: Mapping[str, Any]) -> "URIBuilder":
        """Replace all query parameters, percent-encoding keys and values."""
        return self._set_query_parameters(self._url_encoder, query_parameters)

    def set_raw_query_parameters(
        self, query_parameters: Mapping[str, Any]
    ) -> "URIBuilder":
        """Replace all query parameters without encoding."""
        return self._set_query_parameters(self._raw_url_encoder, query_parameters)

    def _set_query_parameters(
        self, url_encoder: URLEncoder, query_parameters: Mapping[str, Any]
    ) -> "URIBuilder":
        encoded = url_encoder.encode_mapping(query_parameters)
        self._query_parameters.clear()
        self._query_parameters.update(encoded)
        return self

    def set_query_parameter(self, key: str, value: Any) -> "URIBuilder":
        """
        Replace *all* query parameters with the single pair ``key=value``.

        Use :meth:`add_query_parameter` to keep the existing ones.
        """
        return self._set_query_parameter(self._url_encoder, key, value)

    def set_raw_query_parameter(self, key: str, value: Any) -> "URIBuilder":
        """Same as :meth:`set_query_parameter` without encoding."""
        return self._set_query_parameter(self._raw_url_encoder, key, value)

    def _set_query_parameter(
        self, url_encoder: URLEncoder, key: str, value: Any
    ) -> "URIBuilder":
        encoded_key = url_encoder.encode(key)
        encoded_value = url_encoder.encode(value)
        self._query_parameters.clear()
        self._query_parameters[encoded_key] = encoded_value
        return self

    def add_query_parameters(self, query_parameters: Mapping[str, Any]) -> "URIBuilder":
        """Merge query parameters, percent-encoding keys and values."""
        return self._add_query_parameters(self._url_encoder, query_parameters)

    def add_raw_query_parameters(
        self, query_parameters: Mapping[str, Any]
    ) -> "URIBuilder":
        """Merge query parameters without encoding."""
        return self._add_query_parameters(self._raw_url_encoder, query_parameters)

    def _add_query_parameters(
        self, url_encoder: URLEncoder, query_parameters: Mapping[str, Any]
    ) -> "URIBuilder":
        self._query_parameters.update(url_encoder.encode_mapping(query_parameters))
        return self

    def add_query_parameter(self, key: str, value: Any) -> "URIBuilder":
        """Add or overwrite one query parameter, percent-encoded."""
        return self._add_query_parameter(self._url_encoder, key, value)

    def add_raw_query_parameter(self, key: str, value: Any) -> "URIBuilder":
        """Add or overwrite one query parameter without encoding."""
        return self._add_query_parameter(self._raw_url_encoder, key, value)

    def _add_query_parameter(
        self, url_encoder: URLEncoder, key: str, value: Any
    ) -> "URIBuilder":
        encoded_key = url_encoder.encode(key)
        self._query_parameters[encoded_key] = url_encoder.encode(value)
        return self

    def set_fragment(self, fragment: str) -> "URIBuilder":
        """Set the fragment, percent-encoded."""
        self._fragment = self._url_encoder.encode(require(fragment, "fragment"))
        return self

    def set_raw_fragment(self, fragment: str) -> "URIBuilder":
        """Set the fragment without encoding."""
        self._fragment = self._raw_url_encoder.encode(require(fragment, "fragment"))
        return self

    def force_remove_trailing_slash(self, should_remove: bool = True) -> "URIBuilder":
        """
        Control the trailing slash implied by a host ending in ``/``.

        Pass True to leave it out of the built URI.
        """
        self._force_remove_trailing_slash = bool(should_remove)
        return self

    def copy(self) -> "URIBuilder":
        """Return an independent builder with the same state."""
        other = URIBuilder(
            force_remove_trailing_slash=self._force_remove_trailing_slash
        )
        other._scheme = self._scheme
        other._host = self._host
        other._port = self._port
        other._paths = list(self._paths)
        other._query_parameters = dict(self._query_parameters)
        other._fragment = self._fragment
        other._url_encoder = self._url_encoder
        return other

    def build(self) -> URI:
        """
        Assemble the accumulated state into a :class:`URI`.

        Raises:
            MalformedURIError: If the assembled string is not a valid URI,
                typically because raw input carried illegal characters.
        """
        buf: List[str] = []

        should_append_trailing_slash = False
        host = self._host
        if host:
            if host.endswith("/"):
                should_append_trailing_slash = not self._force_remove_trailing_slash
                host = host[:-1]
            buf.append(host)

        if self._port >= 0:
            buf.append(f":{self._port}")

        for path in self._paths:
            if path:
                buf.append(f"/{path}")

        if should_append_trailing_slash:
            buf.append("/")

        if self._query_parameters:
            buf.append("?")
            buf.append(
                "&".join(
                    f"{key}={value}"
                    for key, value in sorted(self._query_parameters.items())
                )
            )

        if self._fragment:
            buf.append(f"#{self._fragment}")

        uri_string = _CONSECUTIVE_SLASHES_RE.sub("/", "".join(buf))

        if self._scheme:
            # one of the two slashes is already there
            glue = ":/" if uri_string.startswith("/") else "://"
            uri_string = f"{self._scheme}{glue}{uri_string}"

        logger.debug("Built URI %r", uri_string)
        return parse_uri(uri_string)

    def build_string(self) -> str:
        """Shortcut for ``str(builder.build())``."""
        return str(self.build())

    def __str__(self) -> str:
        return self.build_string()

    def __repr__(self) -> str:
        return (
            f"URIBuilder(scheme={self._scheme!r}, host={self._host!r}, "
            f"port={self._port!r}, paths={self._paths!r}, "
            f"query_parameters={self.query_parameters!r}, "
            f"fragment={self._fragment!r})"
        )
