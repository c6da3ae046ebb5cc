"""当前用户资料"""
from typing import Any

from ..errors import NotFoundFailure
from ..models import User
from ..repositories import UserRepository


class UserService:

    def __init__(self, users: UserRepository):
        self.users = users

    async def get_self(self, user_id: int) -> User:
        user = await self.users.get_by_id(user_id)
        if user is None:
            # 令牌有效但账号已不存在
            raise NotFoundFailure("User not found")
        return user

    async def edit_self(self, user_id: int, patch: dict[str, Any]) -> User:
        """只更新传入的字段；email 冲突由仓储层转换为 DuplicateEmailFailure"""
        user = await self.get_self(user_id)
        if patch.get("email") is None:
            patch.pop("email", None)
        if not patch:
            return user
        return await self.users.update(user, patch)
