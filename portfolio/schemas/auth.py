"""
인증 관련 폼 스키마
"""

from pydantic import Field, model_validator

from portfolio.schemas.common import FormModel


class LoginForm(FormModel):
    username: str
    password: str


class PasswordChangeForm(FormModel):
    """관리자 비밀번호 교체"""

    current_password: str
    new_password: str = Field(..., min_length=8, max_length=128)
    confirm_password: str

    @model_validator(mode="after")
    def passwords_match(self):
        if self.new_password != self.confirm_password:
            raise ValueError("New passwords do not match.")
        return self
