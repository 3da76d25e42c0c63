from .user import User
from .micropost import Micropost
from .user_follow import UserFollow
from .favorite import Favorite

__all__ = [
    "User",
    "Micropost",
    "UserFollow",
    "Favorite",
]
