class ChatError(Exception):
    """Базовая ошибка чата."""


class UserNotFound(ChatError):
    """Соединение не зарегистрировано в реестре."""

    def __init__(self, sid: str):
        self.sid = sid
        super().__init__(f"User with sid {sid} not found")


class InvalidJoinPayload(ChatError):
    """Некорректные данные события join."""


class InvalidChatMessage(ChatError):
    """Сообщение чата должно быть строкой."""
