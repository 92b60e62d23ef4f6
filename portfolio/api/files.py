"""
업로드 파일 서빙 라우터
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from urllib.parse import quote
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.api.deps import not_found
from portfolio.core.database import get_db
from portfolio.services.file_service import get_file


router = APIRouter()

IMAGE_CACHE_CONTROL = "public, max-age=31536000"


def content_disposition(filename: str) -> str:
    """attachment 헤더 (비 ASCII 파일명은 filename* 로 함께 전달)"""
    fallback = filename.encode("ascii", "ignore").decode("ascii").replace('"', "") or "download"
    if fallback == filename:
        return f'attachment; filename="{fallback}"'
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


@router.get("/images/{file_id}")
async def serve_image(file_id: str, db: AsyncSession = Depends(get_db)):
    """이미지 인라인 서빙 (장기 캐시)"""
    stored = await get_file(db, file_id)
    if stored is None:
        return not_found("Image not found")
    return Response(
        content=stored.data,
        media_type=stored.content_type,
        headers={"Cache-Control": IMAGE_CACHE_CONTROL},
    )


@router.get("/files/{file_id}")
async def serve_file(file_id: str, db: AsyncSession = Depends(get_db)):
    """파일 다운로드 (원본 파일명으로 저장되도록 attachment)"""
    stored = await get_file(db, file_id)
    if stored is None:
        return not_found("File not found")
    return Response(
        content=stored.data,
        media_type=stored.content_type,
        headers={"Content-Disposition": content_disposition(stored.filename)},
    )
