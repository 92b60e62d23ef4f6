"""
제공 서비스(Service) 관련 서비스
"""

from sqlalchemy import select, update, delete
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from portfolio.models.service import Service
from portfolio.schemas.service import ServiceForm


async def get_services(db: AsyncSession) -> List[Service]:
    """서비스 목록 (order_index 순)"""
    result = await db.execute(select(Service).order_by(Service.order_index, Service.id))
    return list(result.scalars().all())


async def get_service(db: AsyncSession, service_id: int) -> Optional[Service]:
    result = await db.execute(select(Service).where(Service.id == service_id))
    return result.scalar_one_or_none()


async def add_service(db: AsyncSession, form: ServiceForm) -> int:
    """서비스 생성, 새 id 반환"""
    service = Service(**form.model_dump())
    db.add(service)
    await db.commit()
    await db.refresh(service)
    return service.id


async def update_service(db: AsyncSession, service_id: int, form: ServiceForm) -> None:
    await db.execute(update(Service).where(Service.id == service_id).values(**form.model_dump()))
    await db.commit()


async def delete_service(db: AsyncSession, service_id: int) -> None:
    await db.execute(delete(Service).where(Service.id == service_id))
    await db.commit()
