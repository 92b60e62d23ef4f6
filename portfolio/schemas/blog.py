"""
블로그 폼 스키마
"""

from pydantic import field_validator
from typing import ClassVar, Dict, Tuple

from portfolio.schemas.common import FormModel, checkbox_value


class BlogForm(FormModel):
    """블로그 생성/수정 요청 (slug는 title에서 파생)"""

    file_slots: ClassVar[Dict[str, Tuple[str, str]]] = {
        "image_file": ("image_url", "images"),
    }

    title: str = ""
    excerpt: str = ""
    content: str = ""
    image_url: str = ""
    tags: str = ""
    published: bool = False

    @field_validator("published", mode="before")
    @classmethod
    def parse_published(cls, v):
        return checkbox_value(v)
