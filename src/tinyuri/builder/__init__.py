"""src/tinyuri/builder/__init__.py"""

from .builder import URIBuilder
from .provider import URIBuilderProvider

__all__ = ["URIBuilder", "URIBuilderProvider"]
