"""Shared test configuration and fixtures."""

import io

import pytest


@pytest.fixture
def output() -> io.StringIO:
    """Text stream standing in for stdout."""
    return io.StringIO()
