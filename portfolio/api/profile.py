"""
관리자 프로필 라우터

POST는 리다이렉트하지 않고 success 플래그와 함께 프로필 화면을 다시 그린다.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.templating import Jinja2Templates
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from portfolio.api.deps import admin_page_context
from portfolio.core.context import AppContext, get_context, get_templates
from portfolio.core.database import get_db
from portfolio.core.templating import render
from portfolio.schemas.profile import ProfileForm
from portfolio.services.profile_service import get_profile, update_profile
from portfolio.services.upload_service import decode_form, read_form


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/profile")
async def profile_page(
    request: Request,
    db: AsyncSession = Depends(get_db),
    templates: Jinja2Templates = Depends(get_templates),
):
    context = await admin_page_context(db, request)
    context.update({"profile": await get_profile(db), "success": False})
    return render(templates, request, "admin/profile.html", context)


@router.post("/profile")
async def update_profile_action(request: Request, ctx: AppContext = Depends(get_context)):
    """프로필 전체 덮어쓰기 (avatar_file → /images/{id}, resume_file → /files/{id})"""
    parsed = await read_form(request)
    async with ctx.store.session() as db:
        try:
            form = await decode_form(db, parsed, ProfileForm)
            await update_profile(db, form)
            logger.info("Profile updated")
        except SQLAlchemyError:
            await db.rollback()
            logger.exception("Failed to update profile")
        context = await admin_page_context(db, request)
        context.update({"profile": await get_profile(db), "success": True})
    return render(ctx.templates, request, "admin/profile.html", context)
