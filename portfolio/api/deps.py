"""
라우터 공통 헬퍼
"""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse, RedirectResponse
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, Dict, Type, TypeVar

from portfolio.core.security import get_session_admin
from portfolio.schemas.common import FormModel
from portfolio.services.admin_service import get_admin
from portfolio.services.upload_service import ParsedForm


F = TypeVar("F", bound=FormModel)


def redirect_to(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_302_FOUND)


def not_found(text: str) -> PlainTextResponse:
    """템플릿 없는 404 (plain text)"""
    return PlainTextResponse(text, status_code=status.HTTP_404_NOT_FOUND)


def parse_required_form(parsed: ParsedForm, form_cls: Type[F]) -> F:
    """필수 필드 누락 시 422 (빈 문자열은 허용)"""
    try:
        return form_cls.from_fields(parsed.fields)
    except ValidationError as e:
        raise RequestValidationError(e.errors())


async def admin_page_context(db: AsyncSession, request: Request) -> Dict[str, Any]:
    """관리 화면 공통 컨텍스트 (비밀번호 교체 배너 포함)"""
    username = get_session_admin(request)
    admin = await get_admin(db, username) if username else None
    return {
        "admin_username": username,
        "must_change_password": bool(admin and admin.must_change_password),
    }
