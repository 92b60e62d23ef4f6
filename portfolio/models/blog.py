"""
블로그 글 모델
"""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime

from portfolio.core.database import Base


class Blog(Base):
    """블로그 글"""

    __tablename__ = "blogs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    slug = Column(String(250), nullable=False, unique=True, index=True)
    excerpt = Column(Text, nullable=False)
    content = Column(Text, nullable=False)  # markdown
    image_url = Column(String(500), default="")
    tags = Column(String(500), default="")
    published = Column(Boolean, default=False, index=True)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    @property
    def tag_list(self) -> list[str]:
        return [t.strip() for t in (self.tags or "").split(",") if t.strip()]

    def __repr__(self) -> str:
        return f"<Blog(id={self.id}, slug={self.slug}, published={self.published})>"
