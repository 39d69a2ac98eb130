import logging

import socketio
from pydantic import ValidationError

from crud.user import UserRepository
from schemas.user import JoinRequest
from utils.exceptions import InvalidChatMessage, InvalidJoinPayload

logger = logging.getLogger(__name__)

CHAT_MESSAGE = "chat message"


class SessionHandler:
    """Обработчики событий одного соединения: join, chat message, disconnect."""

    def __init__(self, sio: socketio.AsyncServer, users: UserRepository):
        self.sio = sio
        self.users = users

    async def connect(self, sid, environ=None, auth=None):
        logger.info(f"a user connected (SID={sid})")
        return True

    async def join(self, sid, data):
        """Регистрация в комнате, приветствие и уведомление остальных."""
        try:
            request = self.parse_join(data)
        except InvalidJoinPayload as e:
            logger.warning(f"Rejected join from {sid}: {e}")
            await self.sio.emit("error", {"message": str(e)}, to=sid)
            return

        # повторный join переносит соединение в новую комнату
        previous = self.users.get_user(sid)
        if previous and previous.room != request.room:
            await self.sio.leave_room(sid, previous.room)

        user = self.users.add_user(sid, request.name, request.room)
        logger.info(f"{user.name} is connected inside room: {user.room}")

        await self.sio.emit(
            CHAT_MESSAGE,
            f"{user.name}, welcome to the room {user.room}.",
            to=sid
        )
        await self.sio.emit(
            CHAT_MESSAGE,
            f"{user.name}, has joined.",
            room=user.room,
            skip_sid=sid
        )
        await self.sio.enter_room(sid, user.room)

    async def chat_message(self, sid, message):
        """Сообщение уходит всем подключённым клиентам, а не только в комнату."""
        if not isinstance(message, str):
            error = InvalidChatMessage("chat message must be a string")
            logger.warning(f"Rejected message from {sid}: {error}")
            await self.sio.emit("error", {"message": str(error)}, to=sid)
            return

        logger.info(message)
        await self.sio.emit(CHAT_MESSAGE, message)

    async def disconnect(self, sid, reason=None):
        user = self.users.get_user(sid)
        if not user:
            return

        logger.info(f"user disconnected the {user.room} room.")
        await self.sio.emit(
            CHAT_MESSAGE,
            f"{user.name} is now offline. Bye !",
            room=user.room,
            skip_sid=sid
        )
        self.users.remove_user(sid)

    @staticmethod
    def parse_join(data) -> JoinRequest:
        if not isinstance(data, dict):
            raise InvalidJoinPayload("join payload must be an object with name and room")
        try:
            return JoinRequest.model_validate(data, strict=True)
        except ValidationError as e:
            fields = ", ".join(
                str(err["loc"][0]) for err in e.errors() if err.get("loc")
            )
            raise InvalidJoinPayload(f"invalid join payload: {fields}") from e


def register_socketio_handlers(sio: socketio.AsyncServer, users: UserRepository) -> SessionHandler:
    """Регистрация всех обработчиков Socket.IO событий."""
    handler = SessionHandler(sio, users)

    sio.on("connect", handler.connect)
    sio.on("disconnect", handler.disconnect)
    sio.on("join", handler.join)
    sio.on(CHAT_MESSAGE, handler.chat_message)

    logger.info("Socket.IO handlers registered")
    return handler
