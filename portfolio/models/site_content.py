"""
사이트 문구(Key-Value) 모델

- key는 PK. 요청 핸들러는 새 key를 만들지 않고 기존 값만 수정한다.
- 기본 key 집합은 최초 부팅 시드로 확정된다.
"""

from sqlalchemy import Column, String, Text

from portfolio.core.database import Base


class SiteContentItem(Base):
    __tablename__ = "site_content"

    key = Column(String(100), primary_key=True)
    value = Column(Text, nullable=False, default="")
    section = Column(String(50), nullable=False, default="general", index=True)
    description = Column(String(300), default="")

    def __repr__(self) -> str:
        return f"<SiteContentItem(key={self.key}, section={self.section})>"
