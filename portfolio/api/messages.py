"""
관리자 문의 메시지 라우터
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
from portfolio.services import message_service


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/messages")
async def messages_page(
    request: Request,
    db: AsyncSession = Depends(get_db),
    templates: Jinja2Templates = Depends(get_templates),
):
    context = await admin_page_context(db, request)
    context["messages"] = await message_service.get_messages(db)
    return render(templates, request, "admin/messages.html", context)


@router.post("/messages/delete/{message_id}")
async def delete_message(message_id: int, store: Store = Depends(get_store)):
    async with store.session() as db:
        try:
            await message_service.delete_message(db, message_id)
            logger.info("Message deleted: %s", message_id)
        except SQLAlchemyError:
            await db.rollback()
            logger.exception("Failed to delete message %s", message_id)
    return redirect_to("/admin/messages")
