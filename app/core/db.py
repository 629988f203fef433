import logging
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from app.core.config import Settings

logger = logging.getLogger(__name__)

# Base 클래스 (모든 모델의 부모)
Base = declarative_base()


def _is_memory_sqlite(url: str) -> bool:
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:")


class Database:
    """
    프로세스 전체에서 하나만 쓰는 저장소 핸들.
    startup에서 만들고 shutdown에서 dispose 한다.
    요청마다 session_factory로 AsyncSession을 하나씩 연다.
    """

    def __init__(self, url: str, echo: bool = False) -> None:
        engine_kwargs = {"echo": echo}
        if _is_memory_sqlite(url):
            # in-memory SQLite는 커넥션마다 DB가 따로 생기므로 커넥션 하나를 공유
            engine_kwargs["poolclass"] = StaticPool

        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            expire_on_commit=False,
            autoflush=False,
            class_=AsyncSession,
        )

    async def create_all(self) -> None:
        """
        employees 테이블 생성.
        이미 있으면 아무 일도 안 함 (CREATE TABLE IF NOT EXISTS 느낌).
        """
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


async def init_db(app: FastAPI, settings: Settings) -> None:
    # 모델을 metadata에 등록
    from app.models import employee  # noqa: F401

    db = Database(settings.DATABASE_URL, echo=settings.SQL_ECHO)
    await db.create_all()
    app.state.db = db
    logger.info("Database ready (%s)", make_url(settings.DATABASE_URL).render_as_string(hide_password=True))


async def close_db(app: FastAPI) -> None:
    db = getattr(app.state, "db", None)
    if db:
        await db.dispose()
        app.state.db = None
        logger.info("Database connection closed")


# FastAPI 의존성 주입용 세션
async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    db: Database = request.app.state.db
    async with db.session_factory() as session:
        yield session
