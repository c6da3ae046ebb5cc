"""持久化适配层"""
from .user_repo import UserRepository
from .bookmark_repo import BookmarkRepository

__all__ = ["UserRepository", "BookmarkRepository"]
