"""书签路由"""
from fastapi import APIRouter, Depends, Path, Response, status
from typing import List

from ...schemas import BookmarkCreate, BookmarkUpdate, BookmarkResponse
from ...services import BookmarkService
from ..deps import get_bookmark_service, get_current_user_id

router = APIRouter()

# SQLite INTEGER 为 64 位有符号整数
MAX_ID = 2**63 - 1


@router.get("", response_model=List[BookmarkResponse])
async def get_bookmarks(
    user_id: int = Depends(get_current_user_id),
    bookmarks: BookmarkService = Depends(get_bookmark_service)
):
    """获取书签列表"""
    return await bookmarks.list(user_id)


@router.post("", response_model=BookmarkResponse, status_code=status.HTTP_201_CREATED)
async def create_bookmark(
    bookmark_in: BookmarkCreate,
    user_id: int = Depends(get_current_user_id),
    bookmarks: BookmarkService = Depends(get_bookmark_service)
):
    """创建书签"""
    return await bookmarks.create(
        user_id,
        title=bookmark_in.title,
        link=bookmark_in.link,
        description=bookmark_in.description,
    )


@router.get("/{bookmark_id}", response_model=BookmarkResponse)
async def get_bookmark(
    bookmark_id: int = Path(..., gt=0, le=MAX_ID),
    user_id: int = Depends(get_current_user_id),
    bookmarks: BookmarkService = Depends(get_bookmark_service)
):
    """获取单个书签"""
    return await bookmarks.get_by_id(user_id, bookmark_id)


@router.patch("/{bookmark_id}", response_model=BookmarkResponse)
async def update_bookmark(
    bookmark_in: BookmarkUpdate,
    bookmark_id: int = Path(..., gt=0, le=MAX_ID),
    user_id: int = Depends(get_current_user_id),
    bookmarks: BookmarkService = Depends(get_bookmark_service)
):
    """更新书签"""
    return await bookmarks.update(user_id, bookmark_id, bookmark_in.model_dump(exclude_unset=True))


@router.delete("/{bookmark_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_bookmark(
    bookmark_id: int = Path(..., gt=0, le=MAX_ID),
    user_id: int = Depends(get_current_user_id),
    bookmarks: BookmarkService = Depends(get_bookmark_service)
):
    """删除书签"""
    await bookmarks.delete(user_id, bookmark_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
