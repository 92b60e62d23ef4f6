"""
블로그 관련 서비스
"""

from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from portfolio.models.blog import Blog
from portfolio.schemas.blog import BlogForm
from portfolio.services.common import utcnow
from portfolio.services.slug_utils import slugify


RECENT_LIMIT = 3


def _latest_first(stmt):
    return stmt.order_by(Blog.created_at.desc(), Blog.id.desc())


async def get_blogs(db: AsyncSession) -> List[Blog]:
    """전체 글 (관리자용, 최신순)"""
    result = await db.execute(_latest_first(select(Blog)))
    return list(result.scalars().all())


async def get_published_blogs(db: AsyncSession) -> List[Blog]:
    """게시된 글 (최신순)"""
    result = await db.execute(_latest_first(select(Blog).where(Blog.published == True)))  # noqa: E712
    return list(result.scalars().all())


async def get_recent_blogs(db: AsyncSession, limit: int = RECENT_LIMIT) -> List[Blog]:
    result = await db.execute(
        _latest_first(select(Blog).where(Blog.published == True)).limit(limit)  # noqa: E712
    )
    return list(result.scalars().all())


async def get_blog_by_slug(db: AsyncSession, slug: str) -> Optional[Blog]:
    """slug로 조회 (게시 여부와 무관)"""
    result = await db.execute(select(Blog).where(Blog.slug == slug))
    return result.scalar_one_or_none()


async def get_blog_by_id(db: AsyncSession, blog_id: int) -> Optional[Blog]:
    result = await db.execute(select(Blog).where(Blog.id == blog_id))
    return result.scalar_one_or_none()


async def add_blog(db: AsyncSession, form: BlogForm) -> Blog:
    """글 생성 (slug/created_at/updated_at 자동)"""
    now = utcnow()
    blog = Blog(**form.model_dump(), slug=slugify(form.title), created_at=now, updated_at=now)
    db.add(blog)
    await db.commit()
    await db.refresh(blog)
    return blog


async def update_blog(db: AsyncSession, blog_id: int, form: BlogForm) -> None:
    """글 전체 덮어쓰기 (slug 재생성, updated_at 갱신)"""
    await db.execute(
        update(Blog)
        .where(Blog.id == blog_id)
        .values(**form.model_dump(), slug=slugify(form.title), updated_at=utcnow())
    )
    await db.commit()


async def delete_blog(db: AsyncSession, blog_id: int) -> None:
    await db.execute(delete(Blog).where(Blog.id == blog_id))
    await db.commit()
