from pydantic import BaseModel


class User(BaseModel):
    id: str     # sid соединения Socket.IO
    name: str
    room: str


class JoinRequest(BaseModel):
    name: str
    room: str


class OnlineUsers(BaseModel):
    count: int
    users: list[User]
