"""
관리자 계정 서비스
"""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from portfolio.core.security import verify_password, get_password_hash
from portfolio.models.admin import Admin


async def get_admin(db: AsyncSession, username: str) -> Optional[Admin]:
    """사용자명으로 관리자 조회"""
    result = await db.execute(select(Admin).where(Admin.username == username))
    return result.scalar_one_or_none()


async def authenticate_admin(db: AsyncSession, username: str, password: str) -> Optional[Admin]:
    """사용자명 + 비밀번호 검증. 실패 시 None"""
    admin = await get_admin(db, username)
    if admin is None or not verify_password(password, admin.password_hash):
        return None
    return admin


async def change_admin_password(db: AsyncSession, username: str, new_password: str) -> None:
    """비밀번호 교체 + 부트스트랩 플래그 해제"""
    await db.execute(
        update(Admin)
        .where(Admin.username == username)
        .values(password_hash=get_password_hash(new_password), must_change_password=False)
    )
    await db.commit()
