"""
URL slug 생성

규칙: 음역(Привет → privet, 한글 → 로마자) → 소문자 → 영숫자 이외 구간은 하이픈 하나로 → 양끝 하이픈 제거.
음역 후에도 남는 글자가 없으면(이모지/기호뿐인 제목) 짧은 랜덤 slug 를 돌려준다.
"""

import re
import uuid

from slugify import slugify as _transliterate_slug

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    # '&' → 'and' 같은 치환은 하지 않는다
    slug = _transliterate_slug(text or "", lowercase=True)
    slug = _NON_ALNUM.sub("-", slug).strip("-")
    if not slug:
        # 빈 slug 는 상세 URL 이 사라지고 UNIQUE 충돌을 만든다
        slug = f"untitled-{uuid.uuid4().hex[:8]}"
    return slug
