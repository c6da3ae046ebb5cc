"""用户数据访问"""
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import DuplicateEmailFailure
from ..models import User


class UserRepository:
    """用户表读写，唯一约束冲突在这里转换为业务异常"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: int) -> Optional[User]:
        return await self.session.get(User, user_id)

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def create(self, email: str, password_hash: str) -> User:
        user = User(email=email, password_hash=password_hash)
        self.session.add(user)
        await self._flush()
        await self.session.refresh(user)
        return user

    async def update(self, user: User, fields: dict[str, Any]) -> User:
        for name, value in fields.items():
            setattr(user, name, value)
        await self._flush()
        await self.session.refresh(user)
        return user

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except IntegrityError:
            # users 表只有 email 一个唯一约束
            await self.session.rollback()
            raise DuplicateEmailFailure()
