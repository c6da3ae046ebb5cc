"""书签 CRUD，所有操作都限定在调用者自己的数据内"""
import logging
from typing import Any, Optional, Sequence

from ..errors import NotFoundFailure
from ..models import Bookmark
from ..repositories import BookmarkRepository

logger = logging.getLogger(__name__)

# 非空列，PATCH 传 null 时忽略
_REQUIRED_FIELDS = ("title", "link")


class BookmarkService:

    def __init__(self, bookmarks: BookmarkRepository):
        self.bookmarks = bookmarks

    async def list(self, user_id: int) -> Sequence[Bookmark]:
        return await self.bookmarks.list_for_user(user_id)

    async def get_by_id(self, user_id: int, bookmark_id: int) -> Bookmark:
        bookmark = await self.bookmarks.get_for_user(user_id, bookmark_id)
        if bookmark is None:
            raise NotFoundFailure("Bookmark not found")
        return bookmark

    async def create(self, user_id: int, title: str, link: str, description: Optional[str] = None) -> Bookmark:
        bookmark = await self.bookmarks.create(
            user_id,
            {"title": title, "description": description, "link": link},
        )
        logger.info(f"创建书签: id={bookmark.id} user_id={user_id}")
        return bookmark

    async def update(self, user_id: int, bookmark_id: int, patch: dict[str, Any]) -> Bookmark:
        fields = {
            name: value for name, value in patch.items()
            if not (name in _REQUIRED_FIELDS and value is None)
        }
        # 不属于当前用户与不存在一样返回 404
        bookmark = await self.bookmarks.update_for_user(user_id, bookmark_id, fields)
        if bookmark is None:
            raise NotFoundFailure("Bookmark not found")
        logger.info(f"更新书签: id={bookmark_id} user_id={user_id}")
        return bookmark

    async def delete(self, user_id: int, bookmark_id: int) -> None:
        if not await self.bookmarks.delete_for_user(user_id, bookmark_id):
            raise NotFoundFailure("Bookmark not found")
        logger.info(f"删除书签: id={bookmark_id} user_id={user_id}")
