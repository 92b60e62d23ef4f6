"""
경력 모델 (표시 전용, 시드 데이터만 존재)
"""

from sqlalchemy import Column, Integer, String, Text, Boolean

from portfolio.core.database import Base


class Experience(Base):
    __tablename__ = "experience"

    id = Column(Integer, primary_key=True, autoincrement=True)
    company = Column(String(200), nullable=False)
    position = Column(String(200), nullable=False)
    description = Column(Text, default="")
    start_date = Column(String(20), nullable=False)
    end_date = Column(String(20), nullable=True)
    current = Column(Boolean, default=False)

    def __repr__(self) -> str:
        return f"<Experience(id={self.id}, company={self.company})>"
