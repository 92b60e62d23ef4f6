"""
학력 모델
"""

from sqlalchemy import Column, Integer, String, Text

from portfolio.core.database import Base


class Education(Base):
    __tablename__ = "education"

    id = Column(Integer, primary_key=True, autoincrement=True)
    institution = Column(String(200), nullable=False)
    degree = Column(String(200), nullable=False)
    field = Column(String(200), nullable=False)
    start_date = Column(String(20), nullable=False)
    end_date = Column(String(20), default="")
    description = Column(Text, default="")

    def __repr__(self) -> str:
        return f"<Education(id={self.id}, institution={self.institution})>"
