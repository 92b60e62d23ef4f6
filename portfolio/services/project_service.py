"""
프로젝트 관련 서비스

slug는 저장 시점마다 title에서 다시 만든다(수정 시 URL이 바뀔 수 있음).
중복 slug는 DB UNIQUE 제약에서 IntegrityError로 실패한다.
"""

from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from portfolio.models.project import Project
from portfolio.schemas.project import ProjectForm
from portfolio.services.common import utcnow
from portfolio.services.slug_utils import slugify


FEATURED_LIMIT = 4


async def get_projects(db: AsyncSession) -> List[Project]:
    """프로젝트 목록 (최신순)"""
    result = await db.execute(select(Project).order_by(Project.created_at.desc(), Project.id.desc()))
    return list(result.scalars().all())


async def get_featured_projects(db: AsyncSession, limit: int = FEATURED_LIMIT) -> List[Project]:
    """대표 프로젝트 (최신순, 최대 limit개)"""
    result = await db.execute(
        select(Project)
        .where(Project.featured == True)  # noqa: E712
        .order_by(Project.created_at.desc(), Project.id.desc())
        .limit(limit)
    )
    return list(result.scalars().all())


async def get_project_by_slug(db: AsyncSession, slug: str) -> Optional[Project]:
    result = await db.execute(select(Project).where(Project.slug == slug))
    return result.scalar_one_or_none()


async def get_project_by_id(db: AsyncSession, project_id: int) -> Optional[Project]:
    result = await db.execute(select(Project).where(Project.id == project_id))
    return result.scalar_one_or_none()


async def add_project(db: AsyncSession, form: ProjectForm) -> Project:
    """프로젝트 생성 (slug/created_at 자동)"""
    project = Project(
        **form.model_dump(),
        slug=slugify(form.title),
        created_at=utcnow(),
    )
    db.add(project)
    await db.commit()
    await db.refresh(project)
    return project


async def update_project(db: AsyncSession, project_id: int, form: ProjectForm) -> None:
    """프로젝트 전체 덮어쓰기 (slug 재생성, created_at 유지)"""
    await db.execute(
        update(Project)
        .where(Project.id == project_id)
        .values(**form.model_dump(), slug=slugify(form.title))
    )
    await db.commit()


async def delete_project(db: AsyncSession, project_id: int) -> None:
    await db.execute(delete(Project).where(Project.id == project_id))
    await db.commit()
