"""用户相关 Schema"""
from pydantic import BaseModel, EmailStr, Field
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional


class UserUpdate(BaseModel):
    """用户更新"""
    email: Optional[EmailStr] = None
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class UserResponse(BaseModel):
    """用户响应（不含密码哈希）"""
    id: int
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
