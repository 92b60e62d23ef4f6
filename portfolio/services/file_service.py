"""
업로드 파일(BLOB) 저장/조회 서비스
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
import uuid

from portfolio.models.stored_file import StoredFile
from portfolio.services.common import utcnow


IMAGE_URL_PREFIX = "/images"
FILE_URL_PREFIX = "/files"


def public_url(kind: str, file_id: str) -> str:
    """kind: "images"(인라인 표시) | "files"(다운로드)"""
    prefix = FILE_URL_PREFIX if kind == "files" else IMAGE_URL_PREFIX
    return f"{prefix}/{file_id}"


async def save_file(db: AsyncSession, filename: str, content_type: str, data: bytes) -> str:
    """바이트 저장 후 새 id 반환 (UUID4, 내용 중복 제거 없음)"""
    file_id = str(uuid.uuid4())
    db.add(StoredFile(
        id=file_id,
        filename=filename,
        content_type=content_type,
        data=data,
        created_at=utcnow(),
    ))
    await db.commit()
    return file_id


async def get_file(db: AsyncSession, file_id: str) -> Optional[StoredFile]:
    result = await db.execute(select(StoredFile).where(StoredFile.id == file_id))
    return result.scalar_one_or_none()
