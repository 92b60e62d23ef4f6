"""
업로드 파일 모델 (이미지/이력서 등, BLOB 저장)

- id는 업로드마다 무작위 UUID 문자열. 내용 해시가 아니므로 중복 제거 없음.
- 참조가 끊긴 파일도 지우지 않는다.
"""

from sqlalchemy import Column, String, LargeBinary, DateTime

from portfolio.core.database import Base


class StoredFile(Base):
    __tablename__ = "images"

    id = Column(String(36), primary_key=True)
    filename = Column(String(255), nullable=False)
    content_type = Column(String(100), nullable=False)
    data = Column(LargeBinary, nullable=False)
    created_at = Column(DateTime, nullable=False)

    @property
    def size(self) -> int:
        return len(self.data or b"")

    def __repr__(self) -> str:
        return f"<StoredFile(id={self.id}, filename={self.filename}, size={self.size})>"
