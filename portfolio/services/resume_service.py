"""
경력/학력 관련 서비스

경력(Experience)은 조회 전용. 학력(Education)은 CRUD.
"""

from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from portfolio.models.experience import Experience
from portfolio.models.education import Education
from portfolio.schemas.education import EducationForm


async def get_experience(db: AsyncSession) -> List[Experience]:
    """경력 (시작일 최신순)"""
    result = await db.execute(select(Experience).order_by(Experience.start_date.desc()))
    return list(result.scalars().all())


async def get_education(db: AsyncSession) -> List[Education]:
    """학력 (시작일 최신순)"""
    result = await db.execute(select(Education).order_by(Education.start_date.desc()))
    return list(result.scalars().all())


async def get_education_by_id(db: AsyncSession, education_id: int) -> Optional[Education]:
    result = await db.execute(select(Education).where(Education.id == education_id))
    return result.scalar_one_or_none()


async def add_education(db: AsyncSession, form: EducationForm) -> Education:
    education = Education(**form.model_dump())
    db.add(education)
    await db.commit()
    await db.refresh(education)
    return education


async def update_education(db: AsyncSession, education_id: int, form: EducationForm) -> None:
    await db.execute(update(Education).where(Education.id == education_id).values(**form.model_dump()))
    await db.commit()


async def delete_education(db: AsyncSession, education_id: int) -> None:
    await db.execute(delete(Education).where(Education.id == education_id))
    await db.commit()
