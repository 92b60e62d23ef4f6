"""
제공 서비스 폼 스키마
"""

from pydantic import field_validator
from typing import ClassVar, Dict, Tuple

from portfolio.schemas.common import FormModel, int_or_default


class ServiceForm(FormModel):
    file_slots: ClassVar[Dict[str, Tuple[str, str]]] = {
        "image_file": ("image_url", "images"),
    }

    name: str = ""
    description: str = ""
    image_url: str = ""
    icon: str = ""
    order_index: int = 0

    @field_validator("order_index", mode="before")
    @classmethod
    def parse_order_index(cls, v):
        return int_or_default(v, 0)
