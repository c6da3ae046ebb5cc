"""书签相关 Schema"""
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional


class BookmarkCreate(BaseModel):
    """创建书签"""
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    link: str = Field(..., min_length=1, max_length=2000)


class BookmarkUpdate(BaseModel):
    """更新书签"""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    link: Optional[str] = Field(None, min_length=1, max_length=2000)


class BookmarkResponse(BaseModel):
    """书签响应"""
    id: int
    title: str
    description: Optional[str] = None
    link: str
    user_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
