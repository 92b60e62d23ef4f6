"""
이미지 업로드(AJAX) 응답 스키마
"""

from pydantic import BaseModel


class UploadImageResponse(BaseModel):
    success: bool = True
    image_url: str
    image_id: str
