"""安全相关工具"""
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError, ExpiredSignatureError
from jose.exceptions import JWTClaimsError
from passlib.context import CryptContext
from pydantic import ValidationError

from ..config import settings
from ..errors import AuthFailure, AuthFailureKind
from ..schemas.auth import TokenClaims

# 密码加密上下文（argon2：加盐、内存困难）
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

ACCESS_TOKEN_TYPE = "access"


def hash_password(password: str) -> str:
    """哈希密码，每次调用使用新的随机盐"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """验证密码，不匹配返回 False；哈希格式非法时抛出 ValueError"""
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(user_id: int, email: str, expires_delta: Optional[timedelta] = None) -> str:
    """创建访问令牌"""
    now = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {
        "sub": str(user_id),
        "email": email,
        "iat": now,
        "exp": now + expires_delta,
        "type": ACCESS_TOKEN_TYPE,
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def _check_structure(token: str) -> None:
    """不校验签名地解析 header 与 claims，只判断结构是否合法"""
    try:
        jwt.get_unverified_header(token)
        jwt.get_unverified_claims(token)
    except JWTError:
        raise AuthFailure(AuthFailureKind.MALFORMED)


def decode_token(token: str) -> TokenClaims:
    """
    校验并解码访问令牌

    失败时抛出 AuthFailure：
    - MALFORMED: 令牌无法解析或缺少身份字段
    - INVALID_SIGNATURE: 签名不匹配
    - EXPIRED: 已过期
    """
    _check_structure(token)

    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except ExpiredSignatureError:
        raise AuthFailure(AuthFailureKind.EXPIRED)
    except JWTClaimsError:
        raise AuthFailure(AuthFailureKind.MALFORMED)
    except JWTError:
        raise AuthFailure(AuthFailureKind.INVALID_SIGNATURE)

    # 签名通过后再检查令牌类型
    if payload.get("type") != ACCESS_TOKEN_TYPE:
        raise AuthFailure(AuthFailureKind.MALFORMED)

    try:
        return TokenClaims(
            sub=payload.get("sub"),
            email=payload.get("email"),
            iat=payload.get("iat"),
            exp=payload.get("exp"),
        )
    except ValidationError:
        raise AuthFailure(AuthFailureKind.MALFORMED)
