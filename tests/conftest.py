import pytest

from tinyuri import URIBuilder


@pytest.fixture
def builder():
    """Fixture providing an https builder for java.example.com:8080."""
    return URIBuilder().set_scheme("https").set_host("java.example.com").set_port(8080)


@pytest.fixture
def http_builder():
    """Fixture providing an http builder for java.example.com without port."""
    return URIBuilder().set_scheme("http").set_host("java.example.com")
