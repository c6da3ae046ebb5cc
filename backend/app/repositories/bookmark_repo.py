"""书签数据访问，所有查询同时按书签 id 和 user_id 过滤"""
from typing import Any, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Bookmark


class BookmarkRepository:

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_for_user(self, user_id: int) -> Sequence[Bookmark]:
        result = await self.session.execute(
            select(Bookmark).where(Bookmark.user_id == user_id).order_by(Bookmark.id)
        )
        return result.scalars().all()

    async def get_for_user(self, user_id: int, bookmark_id: int) -> Optional[Bookmark]:
        result = await self.session.execute(
            select(Bookmark).where(
                Bookmark.id == bookmark_id,
                Bookmark.user_id == user_id
            )
        )
        return result.scalar_one_or_none()

    async def create(self, user_id: int, fields: dict[str, Any]) -> Bookmark:
        bookmark = Bookmark(user_id=user_id, **fields)
        self.session.add(bookmark)
        await self.session.flush()
        await self.session.refresh(bookmark)
        return bookmark

    async def update_for_user(self, user_id: int, bookmark_id: int, fields: dict[str, Any]) -> Optional[Bookmark]:
        bookmark = await self.get_for_user(user_id, bookmark_id)
        if bookmark is None:
            return None
        for name, value in fields.items():
            setattr(bookmark, name, value)
        await self.session.flush()
        await self.session.refresh(bookmark)
        return bookmark

    async def delete_for_user(self, user_id: int, bookmark_id: int) -> bool:
        bookmark = await self.get_for_user(user_id, bookmark_id)
        if bookmark is None:
            return False
        await self.session.delete(bookmark)
        await self.session.flush()
        return True
