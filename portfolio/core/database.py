"""
데이터베이스 설정 및 연결

단일 SQLite 파일 + 단일 연결(StaticPool) + 프로세스 전역 asyncio.Lock.
저장소 접근은 반드시 Store.session()을 통해서만 한다.
"""

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker, AsyncEngine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool
from sqlalchemy import MetaData
from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator
from fastapi import Request
import asyncio
import logging


logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """SQLAlchemy Base 클래스"""
    metadata = MetaData(
        naming_convention={
            "ix": "ix_%(column_0_label)s",
            "uq": "uq_%(table_name)s_%(column_0_name)s",
            "ck": "ck_%(table_name)s_%(constraint_name)s",
            "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
            "pk": "pk_%(table_name)s"
        }
    )


class Store:
    """포트폴리오 저장소 핸들

    - engine/session factory/lock 을 한 곳에서 소유한다.
    - lock 은 "작업 단위" (핸들러 하나의 조회 묶음 또는 쓰기 하나) 동안만 잡는다.
    """

    def __init__(self, url: str, *, echo: bool = False) -> None:
        self.url = url
        connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
        self.engine: AsyncEngine = create_async_engine(
            url,
            echo=echo,
            future=True,
            poolclass=StaticPool,
            connect_args=connect_args,
        )
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        self.lock = asyncio.Lock()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """락을 잡은 상태의 세션"""
        async with self.lock:
            async with self.session_factory() as session:
                try:
                    yield session
                except Exception:
                    await session.rollback()
                    raise

    async def initialize(self, admin_username: str, admin_password: str) -> None:
        """테이블 생성 + 기본 데이터 시드 (idempotent)

        실패는 그대로 전파한다. 시작 단계에서 복구할 방법이 없다.
        """
        # 모델 등록을 위해 import
        import portfolio.models  # noqa: F401
        from portfolio.services.seed_service import seed_defaults

        logger.info("Using database at: %s", self.url)
        async with self.lock:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        async with self.session() as db:
            await seed_defaults(db, admin_username, admin_password)

    async def dispose(self) -> None:
        await self.engine.dispose()


# 데이터베이스 세션 의존성
async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """데이터베이스 세션 의존성 (락 보유)"""
    store: Store = request.app.state.ctx.store
    async with store.session() as session:
        yield session


def get_store(request: Request) -> Store:
    return request.app.state.ctx.store
