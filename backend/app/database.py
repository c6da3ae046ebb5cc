"""数据库配置"""
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy import event, delete
from sqlalchemy.engine import make_url
from pathlib import Path
import logging

from .config import settings

logger = logging.getLogger(__name__)

_db_url = make_url(settings.DATABASE_URL)
_is_sqlite = _db_url.get_backend_name() == "sqlite"

# 确保 SQLite 数据目录存在
if _is_sqlite and _db_url.database and _db_url.database != ":memory:":
    Path(_db_url.database).parent.mkdir(parents=True, exist_ok=True)

# 创建异步引擎
engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    future=True,
)

# 异步会话工厂
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


class Base(DeclarativeBase):
    """模型基类"""
    pass


if _is_sqlite:
    @event.listens_for(engine.sync_engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        """SQLite 外键约束与性能优化"""
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA synchronous=NORMAL")
        cursor.execute("PRAGMA temp_store=MEMORY")
        cursor.close()


async def init_db():
    """初始化数据库表"""
    # 注册模型到 Base.metadata
    from . import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"数据库初始化完成: {_db_url.render_as_string(hide_password=True)}")


async def close_db():
    """释放连接池"""
    await engine.dispose()


async def clean_db():
    """清空所有业务数据（测试与 e2e 环境使用）"""
    from .models import Bookmark, User

    async with AsyncSessionLocal() as session:
        async with session.begin():
            await session.execute(delete(Bookmark))
            await session.execute(delete(User))
    logger.info("数据库已清空")


async def get_db():
    """获取数据库会话"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
