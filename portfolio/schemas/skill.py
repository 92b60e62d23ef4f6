"""
스킬 폼 스키마
"""

from pydantic import field_validator
from typing import ClassVar, Dict, Tuple

from portfolio.schemas.common import FormModel, int_or_default


DEFAULT_PROFICIENCY = 80


class SkillForm(FormModel):
    file_slots: ClassVar[Dict[str, Tuple[str, str]]] = {
        "icon_file": ("icon_url", "images"),
    }

    name: str = ""
    category: str = ""
    proficiency: int = DEFAULT_PROFICIENCY
    icon: str = ""
    icon_url: str = ""

    @field_validator("proficiency", mode="before")
    @classmethod
    def parse_proficiency(cls, v):
        return int_or_default(v, DEFAULT_PROFICIENCY)
