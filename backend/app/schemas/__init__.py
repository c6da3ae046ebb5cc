"""Pydantic Schemas"""
from .auth import AuthRequest, Token, TokenClaims
from .user import UserResponse, UserUpdate
from .bookmark import BookmarkCreate, BookmarkUpdate, BookmarkResponse

__all__ = [
    "AuthRequest", "Token", "TokenClaims",
    "UserResponse", "UserUpdate",
    "BookmarkCreate", "BookmarkUpdate", "BookmarkResponse",
]
