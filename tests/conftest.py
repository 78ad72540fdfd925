"""Shared fixtures for termbanner test suite."""

import io

import pytest


@pytest.fixture
def out():
    """In-memory output stream for a Banner."""
    return io.StringIO()


@pytest.fixture
def make_banner(out):
    """Build a Banner writing to the `out` stream."""
    from termbanner.banner import Banner

    def _make(**kw):
        return Banner(stream=out, **kw)
    return _make
