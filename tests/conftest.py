"""
Shared pytest fixtures for drfparse unit tests.
"""

import pytest

from drfparse import reset_config


@pytest.fixture(autouse=True)
def _clean_config():
    """Drop runtime configuration overrides around every test."""
    reset_config()
    yield
    reset_config()
