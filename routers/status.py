from typing import Optional

from fastapi import APIRouter, Depends

from crud.user import UserRepository
from schemas.user import OnlineUsers
from utils.dependencies import get_user_repo

router = APIRouter()


@router.get("/online", response_model=OnlineUsers)
async def get_online_users(
    room: Optional[str] = None,
    users: UserRepository = Depends(get_user_repo)
):
    """Получить список онлайн пользователей (опционально по комнате)"""
    if room is None:
        online_users = users.get_users()
    else:
        online_users = users.get_users_in_room(room)

    return {
        "count": len(online_users),
        "users": online_users
    }
