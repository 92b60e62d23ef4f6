"""
문의 메시지 모델 (공개 문의 폼)
"""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime

from portfolio.core.database import Base


class Message(Base):
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    email = Column(String(255), nullable=False)
    subject = Column(String(300), nullable=False)
    message = Column(Text, nullable=False)
    read = Column(Boolean, default=False, index=True)
    created_at = Column(DateTime, nullable=False)

    def __repr__(self) -> str:
        return f"<Message(id={self.id}, email={self.email})>"
