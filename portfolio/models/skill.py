"""
스킬 모델
"""

from sqlalchemy import Column, Integer, String

from portfolio.core.database import Base


class Skill(Base):
    """스킬 (숙련도 0~100)"""

    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    category = Column(String(100), nullable=False)
    proficiency = Column(Integer, default=80)
    icon = Column(String(50), default="")  # 이모지 아이콘
    icon_url = Column(String(500), default="")

    def __repr__(self) -> str:
        return f"<Skill(id={self.id}, name={self.name}, category={self.category})>"
