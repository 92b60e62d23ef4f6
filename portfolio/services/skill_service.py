"""
스킬 관련 서비스
"""

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from portfolio.models.skill import Skill
from portfolio.schemas.skill import SkillForm


async def get_skills(db: AsyncSession) -> List[Skill]:
    """스킬 목록 (카테고리, 이름 순)"""
    result = await db.execute(select(Skill).order_by(Skill.category, Skill.name))
    return list(result.scalars().all())


async def add_skill(db: AsyncSession, form: SkillForm) -> Skill:
    """스킬 생성"""
    skill = Skill(**form.model_dump())
    db.add(skill)
    await db.commit()
    await db.refresh(skill)
    return skill


async def delete_skill(db: AsyncSession, skill_id: int) -> None:
    await db.execute(delete(Skill).where(Skill.id == skill_id))
    await db.commit()
