"""src/tinyuri/builder/provider.py

Factory of builders that share a base URI.
"""

from typing import Any, Union

from tinyuri.builder.builder import URIBuilder
from tinyuri.uri import URI, parse_uri
from tinyuri.utils.validators import require

__all__ = ["URIBuilderProvider"]


class URIBuilderProvider:
    """
    Hands out fresh :class:`URIBuilder` instances seeded from one base URI.

    Builders never share state, so a provider can be kept around (for
    example as an API client attribute) and used for every request::

        api = URIBuilderProvider("https://api.example.com/v1")
        api.get_builder().append_paths("users", 42).build()
    """

    __slots__ = ("base_uri",)

    def __init__(self, base_uri: Union[str, URI]):
        """
        Args:
            base_uri: Base URI string or :class:`URI`.

        Raises:
            InvalidInputError: If ``base_uri`` is None.
            MalformedURIError: If ``base_uri`` is a malformed string.
        """
        require(base_uri, "base_uri")
        if not isinstance(base_uri, URI):
            base_uri = parse_uri(base_uri)
        self.base_uri = base_uri

    def get_builder(self, **options: Any) -> URIBuilder:
        """
        Return a new builder seeded from the base URI.

        Keyword options are passed to :class:`URIBuilder`.
        """
        return URIBuilder(self.base_uri, **options)
