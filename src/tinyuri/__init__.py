"""src/tinyuri/__init__.py

TinyURI - Minimal, chainable URI builder for Python.

TinyURI assembles scheme, host, port, path segments, query parameters and a
fragment into a well-formed, percent-encoded URI. It is built entirely on
Python's standard library.

Key Features:
    - Fluent, chainable mutators
    - Percent-encoding at write time, with raw twins for every component
    - Deterministic output (query parameters sorted by key)
    - Consecutive slashes collapsed, trailing slash driven by the host
    - Full type hints (PEP 561)

Example:
    Building from scratch::

        from tinyuri import URIBuilder

        uri = (
            URIBuilder()
            .set_scheme("https")
            .set_host("example.com")
            .set_port(8080)
            .set_paths("foo", "bar")
            .add_query_parameter("hoge", "fuga")
            .set_fragment("frag")
            .build()
        )
        print(uri)  # https://example.com:8080/foo/bar?hoge=fuga#frag

    Starting from a seed URI::

        from tinyuri import URIBuilder

        url = URIBuilder("https://example.com/api").append_paths("users", 1)
        print(url.build_string())  # https://example.com/api/users/1

    Reusing a base URI::

        from tinyuri import URIBuilderProvider

        api = URIBuilderProvider("https://example.com/api")
        print(api.get_builder().append_paths("items").build())
"""

import logging

from tinyuri.builder import URIBuilder, URIBuilderProvider
from tinyuri.encoders import EntityEncoder, PercentEncoder, RawEncoder, URLEncoder
from tinyuri.exceptions import (
    EncodingError,
    InvalidInputError,
    MalformedURIError,
    TinyURIError,
)
from tinyuri.uri import URI, parse_uri
from tinyuri.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "URI",
    "parse_uri",
    "URIBuilder",
    "URIBuilderProvider",
    "EntityEncoder",
    "PercentEncoder",
    "RawEncoder",
    "URLEncoder",
    "TinyURIError",
    "InvalidInputError",
    "EncodingError",
    "MalformedURIError",
    "__version__",
]
