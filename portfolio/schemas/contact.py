"""
공개 문의 폼 스키마

모든 필드 필수 문자열. 빈 문자열은 허용한다(검증은 하지 않음).
"""

from portfolio.schemas.common import FormModel


class ContactForm(FormModel):
    name: str
    email: str
    subject: str
    message: str
