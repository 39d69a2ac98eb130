"""
Pytest configuration and fixtures for the chat relay.
"""

from unittest.mock import AsyncMock

import pytest

from crud.user import UserRepository
from sockets.handlers import SessionHandler
from tests.mocks import FakeSocketIOServer


@pytest.fixture
def users():
    return UserRepository()


@pytest.fixture
def mock_sio():
    """AsyncServer mock: emit, enter_room and leave_room are awaitable."""
    return AsyncMock()


@pytest.fixture
def handler(mock_sio, users):
    return SessionHandler(mock_sio, users)


@pytest.fixture
def fake_sio():
    return FakeSocketIOServer()


@pytest.fixture
def chat(fake_sio, users):
    """Handler wired to the in-memory server."""
    return SessionHandler(fake_sio, users)
