"""
관리자 계정 모델 (단일 행)
"""

from sqlalchemy import Column, Integer, String, Boolean

from portfolio.core.database import Base


class Admin(Base):
    __tablename__ = "admin"

    id = Column(Integer, primary_key=True)
    username = Column(String(50), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    # 부트스트랩 계정은 최초 로그인 후 비밀번호 교체 필요
    must_change_password = Column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return f"<Admin(id={self.id}, username={self.username})>"
