"""
이메일 설정 관련 Pydantic 스키마
"""

from pydantic import BaseModel, ConfigDict, field_validator

from portfolio.schemas.common import FormModel, checkbox_value, int_or_default


DEFAULT_SMTP_PORT = 587


class EmailSettingsForm(FormModel):
    smtp_server: str = ""
    smtp_port: int = DEFAULT_SMTP_PORT
    smtp_username: str = ""
    smtp_password: str = ""
    notification_email: str = ""
    enabled: bool = False

    @field_validator("smtp_port", mode="before")
    @classmethod
    def parse_port(cls, v):
        return int_or_default(v, DEFAULT_SMTP_PORT)

    @field_validator("enabled", mode="before")
    @classmethod
    def parse_enabled(cls, v):
        return checkbox_value(v)


class EmailSettingsData(BaseModel):
    """발송 스레드로 넘기는 설정 스냅샷 (ORM 객체와 분리)"""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    smtp_server: str = ""
    smtp_port: int = DEFAULT_SMTP_PORT
    smtp_username: str = ""
    smtp_password: str = ""
    notification_email: str = ""
    enabled: bool = False


class EmailTestResponse(BaseModel):
    success: bool
    message: str
