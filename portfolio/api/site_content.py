"""
관리자 사이트 문구 라우터

POST는 이미 있는 key만 갱신한다. 폼의 알 수 없는 key는 무시된다.
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
from portfolio.services.settings_service import get_site_content_by_section, update_site_content_batch
from portfolio.services.upload_service import read_form


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/site-content")
async def site_content_page(
    request: Request,
    db: AsyncSession = Depends(get_db),
    templates: Jinja2Templates = Depends(get_templates),
):
    context = await admin_page_context(db, request)
    context["sections"] = await get_site_content_by_section(db)
    return render(templates, request, "admin/site_content.html", context)


@router.post("/site-content")
async def update_site_content(request: Request, store: Store = Depends(get_store)):
    parsed = await read_form(request)
    async with store.session() as db:
        try:
            updated = await update_site_content_batch(db, parsed.fields)
            logger.info("Site content updated: %d keys", updated)
        except SQLAlchemyError:
            await db.rollback()
            logger.exception("Failed to update site content")
    return redirect_to("/admin/site-content")
