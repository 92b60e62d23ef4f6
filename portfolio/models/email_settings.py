"""
이메일 알림 설정 모델 (싱글톤 행, id = 1)
"""

from sqlalchemy import Column, Integer, String, Boolean, CheckConstraint

from portfolio.core.database import Base


EMAIL_SETTINGS_ID = 1


class EmailSettings(Base):
    __tablename__ = "email_settings"
    __table_args__ = (CheckConstraint("id = 1", name="singleton"),)

    id = Column(Integer, primary_key=True, default=EMAIL_SETTINGS_ID)
    smtp_server = Column(String(255), nullable=False, default="")
    smtp_port = Column(Integer, nullable=False, default=587)
    smtp_username = Column(String(255), nullable=False, default="")
    smtp_password = Column(String(255), nullable=False, default="")
    notification_email = Column(String(255), nullable=False, default="")
    enabled = Column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<EmailSettings(server={self.smtp_server}, enabled={self.enabled})>"
