"""
Shared fixtures for command gate tests.
"""

from unittest.mock import Mock

import pytest

from bot.context import Context


@pytest.fixture
def client():
    """Client stand-in with a mock logger."""
    client = Mock()
    client.logger = Mock()
    return client


@pytest.fixture
def make_ctx(client):
    """Build a Context bound to the mock client."""
    def factory(is_dm=False, guild=None):
        return Context(client=client, is_dm=is_dm, guild=guild)
    return factory
