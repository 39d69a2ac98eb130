from fastapi import Request

from crud.user import UserRepository


def get_user_repo(request: Request) -> UserRepository:
    """Реестр подключённых пользователей, созданный при старте приложения."""
    return request.app.state.users
