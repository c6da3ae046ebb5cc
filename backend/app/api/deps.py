"""路由依赖：请求身份解析与服务装配"""
from typing import Optional
import logging

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..errors import AuthFailure, AuthFailureKind
from ..repositories import BookmarkRepository, UserRepository
from ..schemas import TokenClaims
from ..services import AuthService, BookmarkService, UserService
from ..utils.security import decode_token

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

_CLAIM_NAMES = {"id", "sub", "email", "iat", "exp"}


async def resolve_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[TokenClaims]:
    """
    解析 Bearer 令牌得到调用者身份

    结果缓存在 request.state 上，同一请求内无论被多少依赖引用都只校验一次。
    没有令牌时返回 None（匿名）；令牌无效时同样返回 None，失败原因留给
    get_current_identity 抛出。
    """
    if hasattr(request.state, "identity"):
        return request.state.identity

    identity = None
    error = None
    if credentials is not None:
        try:
            identity = decode_token(credentials.credentials)
        except AuthFailure as e:
            logger.info(f"令牌校验失败: {e.kind.value} {request.method} {request.url.path}")
            error = e

    request.state.identity = identity
    request.state.identity_error = error
    return identity


async def get_optional_identity(
    identity: Optional[TokenClaims] = Depends(resolve_identity),
) -> Optional[TokenClaims]:
    """允许匿名访问的路由使用（目前所有业务路由都要求登录，尚无路由引用）"""
    return identity


async def get_current_identity(
    request: Request,
    identity: Optional[TokenClaims] = Depends(resolve_identity),
) -> TokenClaims:
    """需要登录的路由使用，在处理函数执行前拒绝未认证请求"""
    if identity is not None:
        return identity
    error = getattr(request.state, "identity_error", None)
    if error is not None:
        raise error
    raise AuthFailure(AuthFailureKind.UNAUTHENTICATED)


def identity_claim(name: str):
    """返回只取身份中单个字段的依赖，例如 identity_claim("id")"""
    if name not in _CLAIM_NAMES:
        raise ValueError(f"未知的身份字段: {name}")

    async def dependency(identity: TokenClaims = Depends(get_current_identity)):
        return getattr(identity, name)

    dependency.__name__ = f"identity_claim_{name}"
    return dependency


get_current_user_id = identity_claim("id")


# ==================== 服务装配 ====================

def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    return AuthService(UserRepository(db))


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(UserRepository(db))


def get_bookmark_service(db: AsyncSession = Depends(get_db)) -> BookmarkService:
    return BookmarkService(BookmarkRepository(db))
