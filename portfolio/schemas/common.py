"""
폼 디코딩 공통 베이스

multipart/urlencoded 본문을 엔티티별 타입 있는 모델로 변환한다.
- 체크박스 필드: 값이 "존재"하면 True, 없으면 False (값 내용은 보지 않음)
- 숫자 필드: 파싱 실패 시 필드별 기본값
"""

from pydantic import BaseModel, ConfigDict
from typing import Any, ClassVar, Dict, Mapping, Tuple


def checkbox_value(value: Any) -> bool:
    """체크박스 규칙: 폼에 키가 있으면 True"""
    if isinstance(value, bool):
        return value
    return value is not None


def int_or_default(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return default


class FormModel(BaseModel):
    """관리자/공개 폼 베이스"""

    model_config = ConfigDict(extra="ignore")

    # 파일 파트 이름 → (대체 텍스트 필드명, URL 종류 "images"|"files")
    file_slots: ClassVar[Dict[str, Tuple[str, str]]] = {}

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any], **overrides: Any):
        data = dict(fields)
        data.update(overrides)
        return cls.model_validate(data)
