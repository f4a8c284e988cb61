from .schemas import User
from .users_db import UserDirectory

__all__ = ["User", "UserDirectory"]
