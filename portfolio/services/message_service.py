"""
문의 메시지 관련 서비스
"""

from sqlalchemy import select, delete, func
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from portfolio.models.message import Message
from portfolio.schemas.contact import ContactForm
from portfolio.services.common import utcnow


async def add_message(db: AsyncSession, form: ContactForm) -> Message:
    """문의 저장"""
    message = Message(**form.model_dump(), read=False, created_at=utcnow())
    db.add(message)
    await db.commit()
    await db.refresh(message)
    return message


async def get_messages(db: AsyncSession) -> List[Message]:
    """문의 목록 (최신순)"""
    result = await db.execute(select(Message).order_by(Message.created_at.desc(), Message.id.desc()))
    return list(result.scalars().all())


async def get_unread_message_count(db: AsyncSession) -> int:
    result = await db.execute(select(func.count()).select_from(Message).where(Message.read == False))  # noqa: E712
    return int(result.scalar_one() or 0)


async def delete_message(db: AsyncSession, message_id: int) -> None:
    await db.execute(delete(Message).where(Message.id == message_id))
    await db.commit()
