"""tests/unit/test_provider.py"""

import pytest

from tinyuri.builder.builder import URIBuilder
from tinyuri.builder.provider import URIBuilderProvider
from tinyuri.exceptions import InvalidInputError, MalformedURIError
from tinyuri.uri import parse_uri


class TestURIBuilderProvider:
    """Tests for URIBuilderProvider."""

    @pytest.mark.parametrize(
        "base",
        ["https://java.example.com/api", parse_uri("https://java.example.com/api")],
    )
    def test_get_builder(self, base):
        """Test builders are seeded from the base URI."""
        builder = URIBuilderProvider(base).get_builder()
        assert isinstance(builder, URIBuilder)
        assert builder.append_paths("users", 1).build_string() == (
            "https://java.example.com/api/users/1"
        )

    def test_builders_are_independent(self):
        """Test each call returns a fresh builder."""
        provider = URIBuilderProvider("https://java.example.com/api?v=1")
        first = provider.get_builder().append_paths("a").add_query_parameter("x", "y")
        second = provider.get_builder()
        assert first is not second
        assert first.build_string() == "https://java.example.com/api/a?v=1&x=y"
        assert second.build_string() == "https://java.example.com/api?v=1"

    def test_options_forwarded(self):
        """Test keyword options reach the builder."""
        provider = URIBuilderProvider("https://java.example.com")
        builder = provider.get_builder(
            charset="latin-1", force_remove_trailing_slash=True
        )
        assert builder.forces_trailing_slash_removal is True
        assert builder.set_host("h.com/").set_paths("é").build_string() == (
            "https://h.com/%E9"
        )

    def test_base_uri_attribute(self):
        """Test the base is kept as a parsed URI."""
        provider = URIBuilderProvider("https://java.example.com")
        assert str(provider.base_uri) == "https://java.example.com"

    def test_none_rejected(self):
        """Test None raises InvalidInputError."""
        with pytest.raises(InvalidInputError):
            URIBuilderProvider(None)

    def test_malformed_base_rejected(self):
        """Test a malformed base fails at construction."""
        with pytest.raises(MalformedURIError):
            URIBuilderProvider("https://java example.com")
