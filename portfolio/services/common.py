"""
서비스 공통 헬퍼
"""

from datetime import datetime, timezone
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession


def utcnow() -> datetime:
    """UTC 기준 현재 시각 (초 단위, naive로 저장)"""
    return datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0)


async def count_rows(db: AsyncSession, model) -> int:
    result = await db.execute(select(func.count()).select_from(model))
    return int(result.scalar_one() or 0)
