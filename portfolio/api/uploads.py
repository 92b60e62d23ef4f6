"""
관리자 AJAX 이미지 업로드 라우터

인증 실패는 게이트에서 JSON 401로 처리된다.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
import logging

from portfolio.core.database import Store, get_store
from portfolio.schemas.upload import UploadImageResponse
from portfolio.services.file_service import public_url, save_file
from portfolio.services.upload_service import read_form


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/upload-image", response_model=UploadImageResponse)
async def upload_image(request: Request, store: Store = Depends(get_store)):
    """첫 번째 파일 파트를 저장하고 URL 반환"""
    upload = (await read_form(request)).first_file()
    if upload is None:
        return JSONResponse({"error": "No image provided"}, status_code=status.HTTP_400_BAD_REQUEST)

    async with store.session() as db:
        try:
            image_id = await save_file(db, upload.filename, upload.content_type, upload.data)
        except SQLAlchemyError as e:
            await db.rollback()
            logger.exception("Failed to save uploaded image %s", upload.filename)
            return JSONResponse(
                {"error": f"Failed to save image: {e}"},
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
    logger.info("Image uploaded: %s (%d bytes)", image_id, len(upload.data))
    return UploadImageResponse(image_url=public_url("images", image_id), image_id=image_id)
