# Utility functions
from utils.exceptions import ChatError, UserNotFound, InvalidJoinPayload, InvalidChatMessage

__all__ = [
    "ChatError",
    "UserNotFound",
    "InvalidJoinPayload",
    "InvalidChatMessage",
]
