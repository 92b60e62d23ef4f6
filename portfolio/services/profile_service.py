"""
프로필 관련 서비스
"""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.models.profile import Profile, PROFILE_ID
from portfolio.schemas.profile import ProfileForm


class ProfileMissingError(RuntimeError):
    """싱글톤 프로필 행이 없음 (설정 오류, 복구 불가)"""


async def get_profile(db: AsyncSession) -> Profile:
    """프로필 조회 (id = 1)"""
    result = await db.execute(select(Profile).where(Profile.id == PROFILE_ID))
    profile = result.scalar_one_or_none()
    if profile is None:
        raise ProfileMissingError("profile row (id=1) is missing")
    return profile


async def update_profile(db: AsyncSession, form: ProfileForm) -> None:
    """프로필 전체 덮어쓰기"""
    await db.execute(
        update(Profile)
        .where(Profile.id == PROFILE_ID)
        .values(**form.model_dump())
    )
    await db.commit()
