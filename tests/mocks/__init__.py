from tests.mocks.socketio_mocks import FakeSocketIOServer

__all__ = ["FakeSocketIOServer"]
