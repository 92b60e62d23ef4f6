"""
관리자 인증 라우터 (로그인/로그아웃/비밀번호 교체)
"""

from fastapi import APIRouter, Depends, Request
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from portfolio.api.deps import admin_page_context, parse_required_form, redirect_to
from portfolio.core.context import AppContext, get_context, get_templates
from portfolio.core.database import get_db
from portfolio.core.security import (
    LOGIN_PATH,
    get_current_admin,
    is_authenticated,
    login_session,
    logout_session,
)
from portfolio.core.templating import render
from portfolio.schemas.auth import LoginForm, PasswordChangeForm
from portfolio.services.admin_service import authenticate_admin, change_admin_password
from portfolio.services.upload_service import read_form


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/admin/login")
async def login_page(request: Request, templates: Jinja2Templates = Depends(get_templates)):
    """로그인 화면 (이미 로그인 상태면 대시보드로)"""
    if is_authenticated(request):
        return redirect_to("/admin")
    return render(templates, request, "admin/login.html", {"error": False})


@router.post("/admin/login")
async def login(request: Request, ctx: AppContext = Depends(get_context)):
    """로그인. 실패 시 같은 화면을 error 플래그와 함께 다시 그린다 (200)."""
    form = parse_required_form(await read_form(request), LoginForm)
    async with ctx.store.session() as db:
        admin = await authenticate_admin(db, form.username, form.password)
    if admin is None:
        logger.info("Failed admin login for '%s'", form.username)
        return render(ctx.templates, request, "admin/login.html", {"error": True})
    login_session(request, admin.username)
    logger.info("Admin '%s' logged in", admin.username)
    return redirect_to("/admin")


@router.get("/admin/logout")
async def logout(request: Request):
    logout_session(request)
    return redirect_to(LOGIN_PATH)


@router.get("/admin/password")
async def password_page(
    request: Request,
    db: AsyncSession = Depends(get_db),
    templates: Jinja2Templates = Depends(get_templates),
):
    context = await admin_page_context(db, request)
    context["error"] = None
    return render(templates, request, "admin/password.html", context)


@router.post("/admin/password")
async def change_password(
    request: Request,
    username: str = Depends(get_current_admin),
    ctx: AppContext = Depends(get_context),
):
    """비밀번호 교체 (현재 비밀번호 확인 후 재해싱, 부트스트랩 플래그 해제)"""
    parsed = await read_form(request)
    error = None
    try:
        form = PasswordChangeForm.from_fields(parsed.fields)
    except ValidationError as e:
        form = None
        error = e.errors()[0]["msg"]

    async with ctx.store.session() as db:
        if form is not None:
            if await authenticate_admin(db, username, form.current_password) is None:
                error = "Current password is incorrect."
            else:
                await change_admin_password(db, username, form.new_password)
                logger.info("Admin '%s' changed password", username)
                return redirect_to("/admin")
        context = await admin_page_context(db, request)
    context["error"] = error
    return render(ctx.templates, request, "admin/password.html", context)
