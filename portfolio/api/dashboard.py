"""
관리자 대시보드 라우터
"""

from fastapi import APIRouter, Depends, Request
from fastapi.templating import Jinja2Templates
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.api.deps import admin_page_context
from portfolio.core.context import get_templates
from portfolio.core.database import get_db
from portfolio.core.templating import render
from portfolio.models import Blog, Message, Project, Skill
from portfolio.services.common import count_rows
from portfolio.services.message_service import get_unread_message_count


router = APIRouter()


@router.get("")
async def dashboard(
    request: Request,
    db: AsyncSession = Depends(get_db),
    templates: Jinja2Templates = Depends(get_templates),
):
    """대시보드: 엔티티별 개수 + 읽지 않은 문의 수"""
    context = await admin_page_context(db, request)
    context.update({
        "projects_count": await count_rows(db, Project),
        "blogs_count": await count_rows(db, Blog),
        "skills_count": await count_rows(db, Skill),
        "messages_count": await count_rows(db, Message),
        "unread_count": await get_unread_message_count(db),
    })
    return render(templates, request, "admin/dashboard.html", context)
