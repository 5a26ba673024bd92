"""tests/unit/test_version.py"""

import tinyuri
from tinyuri.version import __version__


def test_version_is_exported():
    """The package re-exports the version string."""
    assert tinyuri.__version__ == __version__
    assert __version__.count(".") == 2
