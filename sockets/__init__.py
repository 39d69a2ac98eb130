# Socket.IO handlers
from sockets.handlers import SessionHandler, register_socketio_handlers

__all__ = ["SessionHandler", "register_socketio_handlers"]
