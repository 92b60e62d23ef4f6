"""
관리자 이메일 알림 설정 라우터
"""

from fastapi import APIRouter, Depends, Request
from fastapi.templating import Jinja2Templates
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from portfolio.api.deps import admin_page_context, redirect_to
from portfolio.core.context import AppContext, get_context, get_templates
from portfolio.core.database import Store, get_db, get_store
from portfolio.core.templating import render
from portfolio.schemas.email_settings import EmailSettingsData, EmailSettingsForm, EmailTestResponse
from portfolio.services.mail_service import send_notification_email_async
from portfolio.services.settings_service import get_email_settings, update_email_settings
from portfolio.services.upload_service import read_form


logger = logging.getLogger(__name__)

router = APIRouter()

TEST_SENDER_NAME = "Test User"
TEST_SUBJECT = "Test Email"
TEST_BODY = (
    "This is a test email from your portfolio website. "
    "If you received this, email notifications are working correctly!"
)


@router.get("/email-settings")
async def email_settings_page(
    request: Request,
    db: AsyncSession = Depends(get_db),
    templates: Jinja2Templates = Depends(get_templates),
):
    context = await admin_page_context(db, request)
    context["settings"] = await get_email_settings(db)
    return render(templates, request, "admin/email_settings.html", context)


@router.post("/email-settings")
async def update_email_settings_action(request: Request, store: Store = Depends(get_store)):
    """설정 upsert (enabled 체크박스: 존재하면 True)"""
    form = EmailSettingsForm.from_fields((await read_form(request)).fields)
    async with store.session() as db:
        try:
            await update_email_settings(db, form)
            logger.info("Email settings updated (enabled=%s)", form.enabled)
        except SQLAlchemyError:
            await db.rollback()
            logger.exception("Failed to update email settings")
    return redirect_to("/admin/email-settings")


@router.post("/email-settings/test", response_model=EmailTestResponse)
async def test_email(ctx: AppContext = Depends(get_context)):
    """테스트 메일을 알림 주소로 동기 발송하고 결과를 JSON으로 반환"""
    async with ctx.store.session() as db:
        current = EmailSettingsData.model_validate(await get_email_settings(db))

    if not current.enabled:
        return EmailTestResponse(success=False, message="Email notifications are disabled")

    error = await send_notification_email_async(
        current,
        TEST_SENDER_NAME,
        current.notification_email,
        TEST_SUBJECT,
        TEST_BODY,
        timeout=ctx.settings.SMTP_TIMEOUT,
    )
    if error is not None:
        return EmailTestResponse(success=False, message=error)
    return EmailTestResponse(success=True, message="Test email sent successfully!")
