"""Shared fixtures for pgcodec tests."""

import pytest

import pgcodec


@pytest.fixture(scope="session")
def codec():
    """Load the codec once for all tests."""
    return pgcodec.load()
