# Pydantic schemas
from schemas.user import User, JoinRequest, OnlineUsers

__all__ = [
    "User",
    "JoinRequest",
    "OnlineUsers",
]
