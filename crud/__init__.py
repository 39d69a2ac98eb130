from crud.user import UserRepository

__all__ = ["UserRepository"]
