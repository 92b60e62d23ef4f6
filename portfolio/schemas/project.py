"""
프로젝트 폼 스키마
"""

from pydantic import field_validator
from typing import ClassVar, Dict, Tuple

from portfolio.schemas.common import FormModel, checkbox_value


class ProjectForm(FormModel):
    """프로젝트 생성/수정 요청 (slug는 title에서 파생)"""

    file_slots: ClassVar[Dict[str, Tuple[str, str]]] = {
        "image_file": ("image_url", "images"),
    }

    title: str = ""
    description: str = ""
    content: str = ""
    image_url: str = ""
    demo_url: str = ""
    github_url: str = ""
    technologies: str = ""
    featured: bool = False

    @field_validator("featured", mode="before")
    @classmethod
    def parse_featured(cls, v):
        return checkbox_value(v)
