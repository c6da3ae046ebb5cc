"""认证路由"""
from fastapi import APIRouter, Depends, status

from ...schemas import AuthRequest, Token
from ...services import AuthService
from ..deps import get_auth_service

router = APIRouter()


@router.post("/signup", response_model=Token, status_code=status.HTTP_201_CREATED)
async def signup(auth_in: AuthRequest, auth: AuthService = Depends(get_auth_service)):
    """用户注册，成功后直接返回访问令牌"""
    return await auth.signup(auth_in.email, auth_in.password)


@router.post("/signin", response_model=Token, status_code=status.HTTP_200_OK)
async def signin(auth_in: AuthRequest, auth: AuthService = Depends(get_auth_service)):
    """用户登录"""
    return await auth.signin(auth_in.email, auth_in.password)
