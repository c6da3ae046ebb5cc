"""业务服务层"""
from .auth_service import AuthService
from .user_service import UserService
from .bookmark_service import BookmarkService

__all__ = ["AuthService", "UserService", "BookmarkService"]
