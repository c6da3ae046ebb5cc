"""注册与登录"""
import logging

from fastapi.concurrency import run_in_threadpool

from ..errors import CredentialFailure, DuplicateEmailFailure, ValidationFailure
from ..repositories import UserRepository
from ..schemas import Token
from ..utils.security import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)


def _require_credentials(email: str, password: str) -> None:
    if not email or not email.strip() or not password:
        raise ValidationFailure("Email and password are required")


class AuthService:
    """
    只有 signup / signin 会接触明文密码，其余接口只信任已签发的令牌。

    argon2 计算耗时，放到线程池里执行，避免阻塞事件循环。
    """

    def __init__(self, users: UserRepository):
        self.users = users

    async def signup(self, email: str, password: str) -> Token:
        _require_credentials(email, password)

        password_hash = await run_in_threadpool(hash_password, password)
        try:
            user = await self.users.create(email, password_hash)
        except DuplicateEmailFailure:
            logger.warning("注册失败: 邮箱已存在")
            raise

        logger.info(f"新用户注册: id={user.id}")
        return self._issue(user.id, user.email)

    async def signin(self, email: str, password: str) -> Token:
        _require_credentials(email, password)

        user = await self.users.get_by_email(email)
        if user is None:
            logger.warning("登录失败: 凭据错误")
            raise CredentialFailure()

        matches = await run_in_threadpool(verify_password, password, user.password_hash)
        if not matches:
            logger.warning(f"登录失败: 凭据错误 id={user.id}")
            raise CredentialFailure()

        return self._issue(user.id, user.email)

    @staticmethod
    def _issue(user_id: int, email: str) -> Token:
        return Token(access_token=create_access_token(user_id, email))
