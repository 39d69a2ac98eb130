from typing import Dict, List, Optional

from schemas.user import User
from utils.exceptions import UserNotFound


class UserRepository:
    """In-memory реестр: sid соединения -> пользователь и комната."""

    def __init__(self):
        self.users: Dict[str, User] = {}

    def add_user(self, sid: str, name: str, room: str) -> User:
        # повторный join с тем же sid перезаписывает запись
        user = User(id=sid, name=name, room=room)
        self.users[sid] = user
        return user

    def remove_user(self, sid: str) -> Optional[User]:
        return self.users.pop(sid, None)

    def get_user(self, sid: str) -> Optional[User]:
        return self.users.get(sid)

    def require_user(self, sid: str) -> User:
        user = self.users.get(sid)
        if user is None:
            raise UserNotFound(sid)
        return user

    def get_users_in_room(self, room: str) -> List[User]:
        return [user for user in self.users.values() if user.room == room]

    def get_users(self) -> List[User]:
        return list(self.users.values())

    def __len__(self):
        return len(self.users)

    def __contains__(self, sid):
        return sid in self.users
