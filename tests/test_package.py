"""Tests for the package surface: versions and documented examples."""

import doctest

import petrix
import petrix.core
import petrix.utils
import petrix.utils.display
from petrix.core import empty_place, identity


class TestVersion:
    def test_every_package_has_a_version(self):
        assert petrix.__version__ == '0.1.0'
        assert petrix.core.__version__ == petrix.__version__
        assert petrix.utils.__version__ == petrix.__version__


class TestDocumentedExamples:
    def test_package_docstring(self):
        result = doctest.testmod(petrix)
        assert result.attempted > 0
        assert result.failed == 0

    def test_display_docstrings(self):
        result = doctest.testmod(
            petrix.utils.display,
            extraglobs={'identity': identity, 'empty_place': empty_place},
        )
        assert result.attempted > 0
        assert result.failed == 0
