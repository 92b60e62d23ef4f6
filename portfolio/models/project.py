"""
프로젝트 모델
"""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime

from portfolio.core.database import Base


class Project(Base):
    """포트폴리오 프로젝트"""

    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    slug = Column(String(250), nullable=False, unique=True, index=True)
    description = Column(Text, nullable=False)
    content = Column(Text, default="")  # markdown
    image_url = Column(String(500), default="")
    demo_url = Column(String(500), default="")
    github_url = Column(String(500), default="")
    technologies = Column(String(500), default="")  # 콤마 구분
    featured = Column(Boolean, default=False, index=True)
    created_at = Column(DateTime, nullable=False)

    @property
    def technology_list(self) -> list[str]:
        return [t.strip() for t in (self.technologies or "").split(",") if t.strip()]

    def __repr__(self) -> str:
        return f"<Project(id={self.id}, slug={self.slug})>"
