"""API 路由"""
from fastapi import APIRouter
from .v1 import auth, bookmarks, users

api_router = APIRouter()

# 注册路由
api_router.include_router(auth.router, prefix="/auth", tags=["认证"])
api_router.include_router(users.router, prefix="/users", tags=["用户"])
api_router.include_router(bookmarks.router, prefix="/bookmarks", tags=["书签"])
