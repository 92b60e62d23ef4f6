"""
관리자 스킬 라우터 (목록/추가/삭제)
"""

from fastapi import APIRouter, Depends, Request
from fastapi.templating import Jinja2Templates
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from portfolio.api.deps import admin_page_context, redirect_to
from portfolio.core.context import get_templates
from portfolio.core.database import Store, get_db, get_store
from portfolio.core.templating import render
from portfolio.schemas.skill import SkillForm
from portfolio.services import skill_service
from portfolio.services.upload_service import decode_form, read_form


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/skills")
async def skills_page(
    request: Request,
    db: AsyncSession = Depends(get_db),
    templates: Jinja2Templates = Depends(get_templates),
):
    context = await admin_page_context(db, request)
    context["skills"] = await skill_service.get_skills(db)
    return render(templates, request, "admin/skills.html", context)


@router.post("/skills/add")
async def add_skill(request: Request, store: Store = Depends(get_store)):
    """스킬 추가 (icon_file 업로드 시 icon_url 대체)"""
    parsed = await read_form(request)
    async with store.session() as db:
        try:
            form = await decode_form(db, parsed, SkillForm)
            await skill_service.add_skill(db, form)
            logger.info("Skill added: %s", form.name)
        except SQLAlchemyError:
            await db.rollback()
            logger.exception("Failed to add skill")
    return redirect_to("/admin/skills")


@router.post("/skills/delete/{skill_id}")
async def delete_skill(skill_id: int, store: Store = Depends(get_store)):
    async with store.session() as db:
        try:
            await skill_service.delete_skill(db, skill_id)
            logger.info("Skill deleted: %s", skill_id)
        except SQLAlchemyError:
            await db.rollback()
            logger.exception("Failed to delete skill %s", skill_id)
    return redirect_to("/admin/skills")
