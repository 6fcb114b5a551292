"""Tests for the top-level package surface."""

from importlib.metadata import PackageNotFoundError, version

import dazzle_variants


class TestPackage:
    def test_version_matches_distribution(self):
        try:
            expected = version("dazzle-variants")
        except PackageNotFoundError:
            expected = "0.0.0"
        assert dazzle_variants.__version__ == expected

    def test_exports_resolve(self):
        for name in dazzle_variants.__all__:
            assert hasattr(dazzle_variants, name)
