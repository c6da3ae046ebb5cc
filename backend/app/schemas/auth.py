"""认证相关 Schema"""
from pydantic import BaseModel, EmailStr, Field


class AuthRequest(BaseModel):
    """注册 / 登录"""
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=100)


class Token(BaseModel):
    """Token 响应"""
    access_token: str
    token_type: str = "bearer"


class TokenClaims(BaseModel):
    """已校验令牌中的身份信息"""
    sub: int  # user_id
    email: str
    iat: int
    exp: int

    class Config:
        frozen = True

    @property
    def id(self) -> int:
        return self.sub
