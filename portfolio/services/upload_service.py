"""
폼 본문 디코딩 + 업로드 파일 처리

urlencoded/multipart 본문을 모두 받는다.
- 파일 파트: filename이 있고 내용이 비어 있지 않은 파트
- filename이 빈 파일 파트는 값이 ""인 텍스트 필드로 취급 (파일 미선택)
- filename은 있지만 내용이 빈 파트는 버린다
"""

from dataclasses import dataclass, field
from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.datastructures import UploadFile
from typing import Dict, Optional, Type, TypeVar
import logging

from portfolio.schemas.common import FormModel
from portfolio.services.file_service import public_url, save_file


logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"

F = TypeVar("F", bound=FormModel)


@dataclass
class UploadedFile:
    filename: str
    content_type: str
    data: bytes


@dataclass
class ParsedForm:
    """요청 본문 디코딩 결과 (파트 이름 → 값, 같은 이름은 뒤의 값 우선)"""
    fields: Dict[str, str] = field(default_factory=dict)
    files: Dict[str, UploadedFile] = field(default_factory=dict)

    def first_file(self) -> Optional[UploadedFile]:
        return next(iter(self.files.values()), None)


async def read_form(request: Request) -> ParsedForm:
    """본문 전체를 읽어 텍스트 필드와 파일 파트로 분류한다. (저장소 락 없이 호출)"""
    parsed = ParsedForm()
    async with request.form() as form:
        for name, value in form.multi_items():
            if isinstance(value, UploadFile):
                if not value.filename:
                    parsed.fields[name] = ""
                    continue
                data = await value.read()
                if not data:
                    continue
                parsed.files[name] = UploadedFile(
                    filename=value.filename,
                    content_type=value.content_type or DEFAULT_CONTENT_TYPE,
                    data=data,
                )
            else:
                parsed.fields[name] = value
    return parsed


async def store_upload(db: AsyncSession, upload: UploadedFile, kind: str = "images") -> str:
    """파일 저장 후 공개 URL 반환"""
    file_id = await save_file(db, upload.filename, upload.content_type, upload.data)
    return public_url(kind, file_id)


async def resolve_file_slots(db: AsyncSession, parsed: ParsedForm, form_cls: Type[FormModel]) -> Dict[str, str]:
    """파일 슬롯 처리: 새 파일이 있으면 저장 후 URL로 대체할 필드 값을 돌려준다.

    저장 실패 시 로그만 남기고 같은 이름의 텍스트 필드 값을 그대로 쓴다.
    """
    overrides: Dict[str, str] = {}
    for part_name, (url_field, kind) in form_cls.file_slots.items():
        upload = parsed.files.get(part_name)
        if upload is None:
            continue
        try:
            overrides[url_field] = await store_upload(db, upload, kind)
            logger.info("Stored upload %s (%d bytes) for %s", upload.filename, len(upload.data), url_field)
        except SQLAlchemyError:
            await db.rollback()
            logger.exception("Failed to store upload %s for %s", upload.filename, url_field)
    return overrides


async def decode_form(db: AsyncSession, parsed: ParsedForm, form_cls: Type[F]) -> F:
    """엔티티 폼 모델로 디코딩 (파일 슬롯 반영)"""
    overrides = await resolve_file_slots(db, parsed, form_cls)
    return form_cls.from_fields(parsed.fields, **overrides)
