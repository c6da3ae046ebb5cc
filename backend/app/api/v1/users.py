"""用户路由"""
from fastapi import APIRouter, Depends

from ...schemas import UserResponse, UserUpdate
from ...services import UserService
from ..deps import get_current_user_id, get_user_service

router = APIRouter()


@router.get("/me", response_model=UserResponse)
async def get_me(
    user_id: int = Depends(get_current_user_id),
    users: UserService = Depends(get_user_service)
):
    """获取当前用户信息"""
    return await users.get_self(user_id)


@router.patch("", response_model=UserResponse)
async def edit_user(
    user_in: UserUpdate,
    user_id: int = Depends(get_current_user_id),
    users: UserService = Depends(get_user_service)
):
    """更新当前用户信息"""
    return await users.edit_self(user_id, user_in.model_dump(exclude_unset=True))
